from __future__ import annotations

from flask import Flask, g, redirect, request

from ..common.notify import notify, notify_failure
from ..container import Container
from ..core.enums import Severity
from ..routing.guards import page_required, page_url
from ..routing.router import Page


def register(app: Flask, container: Container) -> None:
    @app.route("/requests/new", methods=["POST"], endpoint="new_request")
    @page_required(Page.REQUESTS)
    def new_request():
        names = request.form.getlist("item_name")
        quantities = request.form.getlist("item_qty")
        try:
            container.request_service.create_request(
                owner_email=g.auth.current_account.email,
                request_type=request.form.get("type", ""),
                items=zip(names, quantities),
            )
            notify("Request submitted successfully", Severity.SUCCESS)
        except Exception as e:
            notify_failure(e, action="submitting the request")

        return redirect(page_url(Page.REQUESTS))

    # Approval buttons are shown but decisions are not recorded yet.
    @app.route("/requests/<request_id>/approve", methods=["POST"], endpoint="approve_request")
    @page_required(Page.REQUESTS)
    def approve_request(request_id: str):
        notify("Request approval not implemented in this prototype", Severity.INFO)
        return redirect(page_url(Page.REQUESTS))

    @app.route("/requests/<request_id>/reject", methods=["POST"], endpoint="reject_request")
    @page_required(Page.REQUESTS)
    def reject_request(request_id: str):
        notify("Request rejection not implemented in this prototype", Severity.INFO)
        return redirect(page_url(Page.REQUESTS))
