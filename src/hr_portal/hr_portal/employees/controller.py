from __future__ import annotations

from flask import Flask, redirect, request

from ..common.notify import notify, notify_failure
from ..container import Container
from ..core.enums import Severity
from ..routing.guards import page_required, page_url
from ..routing.router import Page


def register(app: Flask, container: Container) -> None:
    @app.route("/employees/save", methods=["POST"], endpoint="save_employee")
    @page_required(Page.EMPLOYEES)
    def save_employee():
        record_id = request.form.get("record_id", "")
        fields = dict(
            employee_id=request.form.get("employee_id", ""),
            user_email=request.form.get("user_email", ""),
            position=request.form.get("position", ""),
            department_id=request.form.get("department_id", ""),
            hire_date=request.form.get("hire_date", ""),
        )
        try:
            if record_id:
                container.employee_service.update_employee(record_id=record_id, **fields)
                notify("Employee updated successfully", Severity.SUCCESS)
            else:
                container.employee_service.create_employee(**fields)
                notify("Employee added successfully", Severity.SUCCESS)
        except Exception as e:
            notify_failure(e, action="saving the employee")

        return redirect(page_url(Page.EMPLOYEES))

    @app.route("/employees/<record_id>/delete", methods=["POST"], endpoint="delete_employee")
    @page_required(Page.EMPLOYEES)
    def delete_employee(record_id: str):
        try:
            container.employee_service.delete_employee(record_id=record_id)
            notify("Employee deleted", Severity.INFO)
        except Exception as e:
            notify_failure(e, action="deleting the employee")

        return redirect(page_url(Page.EMPLOYEES))
