from __future__ import annotations

from flask import Flask, redirect

from ..common.notify import notify
from ..container import Container
from ..core.enums import Severity
from ..routing.guards import page_required, page_url
from ..routing.router import Page


def register(app: Flask, container: Container) -> None:
    # Placeholders: the buttons exist, stored departments never change.

    @app.route("/departments/new", methods=["POST"], endpoint="new_department")
    @page_required(Page.DEPARTMENTS)
    def new_department():
        notify("Department creation not fully implemented in this prototype", Severity.INFO)
        return redirect(page_url(Page.DEPARTMENTS))

    @app.route("/departments/<department_id>/edit", methods=["POST"], endpoint="edit_department")
    @page_required(Page.DEPARTMENTS)
    def edit_department(department_id: str):
        if container.department_service.get_department(department_id) is None:
            notify("Department not found", Severity.DANGER)
        else:
            notify("Edit not implemented", Severity.INFO)
        return redirect(page_url(Page.DEPARTMENTS))

    @app.route("/departments/<department_id>/delete", methods=["POST"], endpoint="delete_department")
    @page_required(Page.DEPARTMENTS)
    def delete_department(department_id: str):
        if container.department_service.get_department(department_id) is None:
            notify("Department not found", Severity.DANGER)
        else:
            notify("Delete not implemented", Severity.INFO)
        return redirect(page_url(Page.DEPARTMENTS))
