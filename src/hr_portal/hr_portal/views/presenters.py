"""Read models for the page templates.

Pure functions from repository state to rows; templates only format them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from ..accounts.model import Account
from ..core.enums import RequestStatus
from ..departments.model import Department
from ..employees.model import Employee
from ..requests.model import Request

_STATUS_BADGES = {
    RequestStatus.PENDING: "warning",
    RequestStatus.APPROVED: "success",
    RequestStatus.REJECTED: "danger",
}


@dataclass(frozen=True)
class ProfileView:
    full_name: str
    email: str
    role: str


@dataclass(frozen=True)
class AccountRow:
    id: str
    name: str
    email: str
    role: str
    verified_icon: str


@dataclass(frozen=True)
class DepartmentRow:
    id: str
    name: str
    description: str


@dataclass(frozen=True)
class EmployeeRow:
    id: str
    employee_id: str
    name: str
    position: str
    department: str
    hire_date: str


@dataclass(frozen=True)
class RequestRow:
    id: str
    date: str
    type: str
    items: str
    status: str
    badge: str


def profile_view(account: Account) -> ProfileView:
    return ProfileView(
        full_name=f"{account.first_name} {account.last_name}".strip(),
        email=account.email,
        role=account.role.value,
    )


def account_rows(accounts: Iterable[Account]) -> List[AccountRow]:
    return [
        AccountRow(
            id=a.id,
            name=f"{a.first_name} {a.last_name}".strip(),
            email=a.email,
            role=a.role.value,
            verified_icon="✅" if a.verified else "—",
        )
        for a in accounts
    ]


def department_rows(departments: Iterable[Department]) -> List[DepartmentRow]:
    return [DepartmentRow(id=d.id, name=d.name, description=d.description) for d in departments]


def employee_rows(
    employees: Iterable[Employee],
    accounts: Sequence[Account],
    departments: Sequence[Department],
) -> List[EmployeeRow]:
    """Join each record to its account name and department name.

    A dangling e-mail shows the raw e-mail; a dangling department shows N/A.
    """
    names = {a.email: f"{a.first_name} {a.last_name}".strip() for a in accounts}
    dept_names = {d.id: d.name for d in departments}

    return [
        EmployeeRow(
            id=e.id,
            employee_id=e.employee_id,
            name=names.get(e.user_email, e.user_email),
            position=e.position,
            department=dept_names.get(e.department_id, "N/A"),
            hire_date=e.hire_date,
        )
        for e in employees
    ]


def request_rows(requests: Iterable[Request]) -> List[RequestRow]:
    return [
        RequestRow(
            id=r.id,
            date=r.date,
            type=r.type,
            items=r.items_summary(),
            status=r.status.value,
            badge=_STATUS_BADGES.get(r.status, "secondary"),
        )
        for r in requests
    ]
