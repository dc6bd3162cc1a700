from __future__ import annotations

import pytest

from src.hr_portal.hr_portal.core.constants import SEED_ADMIN_EMAIL, SEED_ADMIN_PASSWORD
from src.hr_portal.hr_portal.main import create_app


@pytest.fixture()
def client(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container=container)
    return app.test_client()


def _login(client, email, password):
    return client.post("/login", data={"email": email, "password": password})


def _register_and_verify(client, email="jane@example.com"):
    client.post(
        "/register",
        data={"first_name": "Jane", "last_name": "Doe", "email": email, "password": "secret1"},
    )
    client.post("/verify-email")


def test_home_and_unknown_paths_render_home(client):
    assert b"Welcome to the HR Portal" in client.get("/").data
    assert b"Welcome to the HR Portal" in client.get("/nowhere/at/all").data


def test_protected_page_redirects_anonymous_to_login(client):
    resp = client.get("/profile")

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/login")
    assert b"Please log in first" in client.get("/login").data


def test_admin_login_and_accounts_page(client):
    resp = _login(client, SEED_ADMIN_EMAIL, SEED_ADMIN_PASSWORD)
    assert resp.headers["Location"].endswith("/profile")

    page = client.get("/accounts")
    assert page.status_code == 200
    assert SEED_ADMIN_EMAIL.encode() in page.data


def test_wrong_password_is_reported(client):
    _login(client, SEED_ADMIN_EMAIL, "nope-nope")
    assert b"Invalid credentials or unverified email" in client.get("/login").data
    assert client.get("/profile").status_code == 302


def test_registration_verification_and_user_denied_admin_pages(client):
    _register_and_verify(client)
    login_page = client.get("/login").data
    assert b"login-success-alert" in login_page

    _login(client, "jane@example.com", "secret1")
    resp = client.get("/employees")

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/")
    assert b"Access denied. Admin only." in client.get("/").data


def test_session_survives_across_requests_and_logout(client):
    _login(client, SEED_ADMIN_EMAIL, SEED_ADMIN_PASSWORD)
    assert client.get("/profile").status_code == 200

    client.post("/logout")
    assert client.get("/profile").status_code == 302


def test_user_submits_request(client):
    _register_and_verify(client)
    _login(client, "jane@example.com", "secret1")

    client.post(
        "/requests/new",
        data={"type": "Equipment", "item_name": ["Laptop", ""], "item_qty": ["2", "1"]},
    )
    page = client.get("/requests").data

    assert b"Request submitted successfully" in page
    assert b"Laptop (2)" in page
    assert b"Pending" in page


def test_request_without_items_is_rejected(client):
    _login(client, SEED_ADMIN_EMAIL, SEED_ADMIN_PASSWORD)
    client.post("/requests/new", data={"type": "Equipment", "item_name": [""], "item_qty": ["1"]})

    assert b"Please add at least one item" in client.get("/requests").data


def test_admin_cannot_delete_self(client, admin):
    _login(client, SEED_ADMIN_EMAIL, SEED_ADMIN_PASSWORD)
    client.post(f"/accounts/{admin.id}/delete")

    assert b"Cannot delete your own account" in client.get("/accounts").data


def test_admin_adds_employee(client, container):
    _login(client, SEED_ADMIN_EMAIL, SEED_ADMIN_PASSWORD)
    dept = container.departments_repo.find_by_field("name", "HR")

    client.post(
        "/employees/save",
        data={
            "employee_id": "EMP-9",
            "user_email": SEED_ADMIN_EMAIL,
            "position": "Director",
            "department_id": dept.id,
            "hire_date": "2020-01-01",
        },
    )
    page = client.get("/employees").data

    assert b"Employee added successfully" in page
    assert b"EMP-9" in page
    assert b"Human Resources" not in page
    assert b"<td>HR</td>" in page


def test_anonymous_form_post_is_guarded(client, container):
    resp = client.post("/accounts/save", data={"email": "x@example.com", "password": "secret1"})

    assert resp.headers["Location"].endswith("/login")
    assert container.accounts_repo.find_by_email("x@example.com") is None


def test_department_actions_are_placeholders(client, container):
    _login(client, SEED_ADMIN_EMAIL, SEED_ADMIN_PASSWORD)
    client.post("/departments/new")

    assert b"not fully implemented" in client.get("/departments").data
    assert len(container.departments_repo.list_all()) == 2


def test_request_with_more_items_than_the_first_form_rows(client, container):
    _register_and_verify(client)
    _login(client, "jane@example.com", "secret1")

    client.post(
        "/requests/new",
        data={
            "type": "Resources",
            "item_name": ["Pen", "Paper", "Stapler", "Monitor", "Chair"],
            "item_qty": ["1", "2", "3", "4", "5"],
        },
    )

    (req,) = container.request_service.list_for_owner(owner_email="jane@example.com")
    assert req.items_summary() == "Pen (1), Paper (2), Stapler (3), Monitor (4), Chair (5)"


def test_request_form_adds_and_removes_item_rows(client):
    _login(client, SEED_ADMIN_EMAIL, SEED_ADMIN_PASSWORD)

    assert client.get("/requests").data.count(b'name="item_name"') == 1

    added = client.get(
        "/requests",
        query_string={"type": "Leave", "item_name": ["Stapler"], "item_qty": ["2"], "add": "1"},
    ).data
    assert added.count(b'name="item_name"') == 2
    assert b'value="Stapler"' in added
    assert b'<option value="Leave" selected>' in added

    removed = client.get(
        "/requests",
        query_string={"item_name": ["Stapler", "Monitor"], "item_qty": ["2", "1"], "remove": "0"},
    ).data
    assert removed.count(b'name="item_name"') == 1
    assert b'value="Stapler"' not in removed
    assert b'value="Monitor"' in removed


def test_employees_page_prefills_edit_form(client, container, admin):
    employee = container.employee_service.create_employee(
        employee_id="EMP-7",
        user_email=admin.email,
        position="Auditor",
        department_id="",
    )
    _login(client, SEED_ADMIN_EMAIL, SEED_ADMIN_PASSWORD)

    page = client.get("/employees", query_string={"edit": employee.id}).data

    assert b"Edit employee" in page
    assert f'value="{employee.id}"'.encode() in page
