from __future__ import annotations

from itertools import zip_longest
from typing import List, Tuple

from flask import Flask, g, redirect, render_template, request

from ..common.notify import notify
from ..container import Container
from ..views.presenters import account_rows, department_rows, employee_rows, profile_view, request_rows
from .guards import page_url
from .router import Page, resolve

REQUEST_TYPES = ("Equipment", "Leave", "Resources")
MAX_REQUEST_ITEM_ROWS = 50
BLANK_ITEM_ROW = ("", "1")


def request_form_rows(args) -> List[Tuple[str, str]]:
    """Item rows of the new-request form after an add or remove click.

    The form re-submits itself by GET with `add` or `remove=<index>`, so
    values already typed are rendered back.
    """
    rows = list(zip_longest(args.getlist("item_name"), args.getlist("item_qty"), fillvalue=""))

    remove = args.get("remove", type=int)
    if remove is not None and 0 <= remove < len(rows):
        del rows[remove]
    if "add" in args:
        rows.append(BLANK_ITEM_ROW)

    return rows[:MAX_REQUEST_ITEM_ROWS] or [BLANK_ITEM_ROW]


def register(app: Flask, container: Container) -> None:
    def render_home():
        return render_template("home.html")

    def render_register():
        return render_template("register.html")

    def render_verify_email():
        return render_template("verify_email.html", pending_email=g.auth.pending_verification_email())

    def render_login():
        return render_template("login.html", show_verified=g.auth.consume_email_verified_flag())

    def render_profile():
        return render_template("profile.html", profile=profile_view(g.auth.current_account))

    def render_employees():
        departments = container.department_service.list_departments()
        rows = employee_rows(
            container.employee_service.list_employees(),
            container.account_service.list_accounts(),
            departments,
        )
        editing = None
        edit_id = request.args.get("edit")
        if edit_id:
            editing = container.employee_service.get_employee(edit_id)
        return render_template("employees.html", rows=rows, departments=departments, editing=editing)

    def render_departments():
        rows = department_rows(container.department_service.list_departments())
        return render_template("departments.html", rows=rows)

    def render_accounts():
        rows = account_rows(container.account_service.list_accounts())
        editing = None
        edit_id = request.args.get("edit")
        if edit_id:
            editing = container.account_service.get_account(edit_id)
        return render_template("accounts.html", rows=rows, editing=editing)

    def render_requests():
        owner = g.auth.current_account
        rows = request_rows(container.request_service.list_for_owner(owner_email=owner.email))
        return render_template(
            "requests.html",
            rows=rows,
            request_types=REQUEST_TYPES,
            item_rows=request_form_rows(request.args),
            selected_type=request.args.get("type", REQUEST_TYPES[0]),
            max_item_rows=MAX_REQUEST_ITEM_ROWS,
        )

    renderers = {
        Page.HOME: render_home,
        Page.REGISTER: render_register,
        Page.VERIFY_EMAIL: render_verify_email,
        Page.LOGIN: render_login,
        Page.PROFILE: render_profile,
        Page.EMPLOYEES: render_employees,
        Page.DEPARTMENTS: render_departments,
        Page.ACCOUNTS: render_accounts,
        Page.REQUESTS: render_requests,
    }

    @app.route("/", defaults={"fragment": ""}, methods=["GET"], endpoint="page")
    @app.route("/<path:fragment>", methods=["GET"], endpoint="page")
    def page(fragment: str):
        result = resolve(fragment, g.auth.state)
        if not result.allowed:
            notify(result.notice.message, result.notice.severity)
            return redirect(page_url(result.redirect_to))

        return renderers[result.page]()
