from __future__ import annotations

import pytest

from src.hr_portal.hr_portal.core.exceptions import NotFound, ValidationError
from src.hr_portal.hr_portal.views.presenters import employee_rows


def _engineering(container):
    return container.departments_repo.find_by_field("name", "Engineering")


def test_create_employee_with_unknown_email_fails(container):
    with pytest.raises(ValidationError):
        container.employee_service.create_employee(
            employee_id="EMP-001",
            user_email="ghost@example.com",
            position="Developer",
            department_id=_engineering(container).id,
        )
    assert container.employee_service.list_employees() == []


def test_create_employee_is_listed_with_account_and_department_names(container, verified_user):
    dept = _engineering(container)
    employee = container.employee_service.create_employee(
        employee_id="EMP-001",
        user_email="JANE@example.com",
        position="Developer",
        department_id=dept.id,
        hire_date="2024-03-01",
    )

    assert employee.user_email == "jane@example.com"
    rows = employee_rows(
        container.employee_service.list_employees(),
        container.account_service.list_accounts(),
        container.department_service.list_departments(),
    )
    assert len(rows) == 1
    assert rows[0].name == "Jane Doe"
    assert rows[0].department == "Engineering"
    assert rows[0].employee_id == "EMP-001"


def test_department_is_not_validated(container, verified_user):
    employee = container.employee_service.create_employee(
        employee_id="EMP-002",
        user_email="jane@example.com",
        position="Analyst",
        department_id="no-such-department",
    )
    assert employee.department_id == "no-such-department"


def test_invalid_hire_date_and_missing_fields(container, verified_user):
    with pytest.raises(ValidationError):
        container.employee_service.create_employee(
            employee_id="EMP-003",
            user_email="jane@example.com",
            position="Analyst",
            department_id="",
            hire_date="03/01/2024",
        )
    with pytest.raises(ValidationError):
        container.employee_service.create_employee(
            employee_id=" ",
            user_email="jane@example.com",
            position="Analyst",
            department_id="",
        )


def test_update_and_delete_employee(container, verified_user, admin):
    employee = container.employee_service.create_employee(
        employee_id="EMP-001",
        user_email="jane@example.com",
        position="Developer",
        department_id="",
    )

    container.employee_service.update_employee(
        record_id=employee.id,
        employee_id="EMP-001",
        user_email=admin.email,
        position="Lead",
        department_id="",
    )
    assert (employee.user_email, employee.position) == (admin.email, "Lead")

    container.employee_service.delete_employee(record_id=employee.id)
    assert container.employee_service.list_employees() == []
    with pytest.raises(NotFound):
        container.employee_service.delete_employee(record_id=employee.id)


def test_get_employee_by_record_id(container, verified_user):
    employee = container.employee_service.create_employee(
        employee_id="EMP-002",
        user_email="jane@example.com",
        position="Tester",
        department_id="",
    )

    assert container.employee_service.get_employee(employee.id) is employee
    assert container.employee_service.get_employee("missing") is None
