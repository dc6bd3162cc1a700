from __future__ import annotations

from flask import Flask, g, redirect, request

from ..common.notify import notify, notify_failure
from ..container import Container
from ..core.enums import Severity
from ..routing.guards import page_required, page_url
from ..routing.router import Page


def register(app: Flask, container: Container) -> None:
    @app.route("/accounts/save", methods=["POST"], endpoint="save_account")
    @page_required(Page.ACCOUNTS)
    def save_account():
        account_id = request.form.get("account_id", "")
        fields = dict(
            first_name=request.form.get("first_name", ""),
            last_name=request.form.get("last_name", ""),
            email=request.form.get("email", ""),
            password=request.form.get("password", ""),
            role=request.form.get("role", "User"),
            verified=request.form.get("verified") is not None,
        )
        try:
            if account_id:
                container.account_service.update_account(account_id=account_id, **fields)
                if g.auth.current_account and g.auth.current_account.id == account_id:
                    g.auth.refresh_token()
                notify("Account updated successfully", Severity.SUCCESS)
            else:
                container.account_service.create_account(**fields)
                notify("Account created successfully", Severity.SUCCESS)
        except Exception as e:
            notify_failure(e, action="saving the account")

        return redirect(page_url(Page.ACCOUNTS))

    @app.route("/accounts/<account_id>/reset-password", methods=["POST"], endpoint="reset_password")
    @page_required(Page.ACCOUNTS)
    def reset_password(account_id: str):
        try:
            container.account_service.reset_password(
                account_id=account_id,
                new_password=request.form.get("new_password", ""),
            )
            notify("Password reset successfully", Severity.SUCCESS)
        except Exception as e:
            notify_failure(e, action="resetting the password")

        return redirect(page_url(Page.ACCOUNTS))

    @app.route("/accounts/<account_id>/delete", methods=["POST"], endpoint="delete_account")
    @page_required(Page.ACCOUNTS)
    def delete_account(account_id: str):
        try:
            container.account_service.delete_account(
                account_id=account_id,
                current_account_id=g.auth.current_account.id,
            )
            notify("Account deleted", Severity.INFO)
        except Exception as e:
            notify_failure(e, action="deleting the account")

        return redirect(page_url(Page.ACCOUNTS))
