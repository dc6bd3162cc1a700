from __future__ import annotations

from flask import Flask, g, redirect, request

from ..common.notify import notify, notify_failure
from ..container import Container
from ..core.enums import Severity
from ..routing.guards import page_url
from ..routing.router import Page
from .service import ANONYMOUS
from .session_storage import FlaskSessionStorage


def register(app: Flask, container: Container) -> None:
    @app.before_request
    def load_auth_state():
        gate = container.auth_gate(FlaskSessionStorage())
        gate.restore_session()
        g.auth = gate

    @app.context_processor
    def inject_auth():
        gate = g.get("auth")
        return {
            "auth_state": gate.state if gate else ANONYMOUS,
            "Page": Page,
            "page_url": page_url,
        }

    @app.route("/register", methods=["POST"], endpoint="register_submit")
    def register_submit():
        try:
            g.auth.register(
                first_name=request.form.get("first_name", ""),
                last_name=request.form.get("last_name", ""),
                email=request.form.get("email", ""),
                password=request.form.get("password", ""),
            )
            notify("Account created! Please verify your email.", Severity.SUCCESS)
            return redirect(page_url(Page.VERIFY_EMAIL))
        except Exception as e:
            notify_failure(e, action="registering")

        return redirect(page_url(Page.REGISTER))

    @app.route("/verify-email", methods=["POST"], endpoint="verify_email_submit")
    def verify_email_submit():
        try:
            g.auth.verify_email()
            notify("Email verified successfully!", Severity.SUCCESS)
            return redirect(page_url(Page.LOGIN))
        except Exception as e:
            notify_failure(e, action="verifying email")

        return redirect(page_url(Page.VERIFY_EMAIL))

    @app.route("/login", methods=["POST"], endpoint="login_submit")
    def login_submit():
        try:
            g.auth.login(request.form.get("email", ""), request.form.get("password", ""))
            notify("Login successful!", Severity.SUCCESS)
            return redirect(page_url(Page.PROFILE))
        except Exception as e:
            notify_failure(e, action="logging in")

        return redirect(page_url(Page.LOGIN))

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        g.auth.logout()
        notify("Logged out successfully", Severity.INFO)
        return redirect(page_url(Page.HOME))
