from __future__ import annotations

from typing import List, Optional

from ..accounts.repository import AccountRepository
from ..common.datetime_utils import parse_iso_date
from ..common.identifiers import generate_id
from ..common.validators import normalize_email, require_non_empty
from ..core.exceptions import NotFound, ValidationError
from ..database.document_store import DocumentStore
from .model import Employee
from .repository import EmployeeRepository


class EmployeeService:
    """Use case: maintain employment records (admin)."""

    def __init__(self, store: DocumentStore, employees: EmployeeRepository, accounts: AccountRepository):
        self._store = store
        self._employees = employees
        self._accounts = accounts

    def list_employees(self) -> List[Employee]:
        return self._employees.list_all()

    def get_employee(self, record_id: str) -> Optional[Employee]:
        return self._employees.find_by_id(record_id)

    def _validated_fields(
        self,
        *,
        employee_id: str,
        user_email: str,
        position: str,
        department_id: str,
        hire_date: str,
    ) -> dict:
        user_email = normalize_email(user_email)
        if not self._accounts.find_by_email(user_email):
            raise ValidationError("User email not found in accounts")

        hire_date = (hire_date or "").strip()
        if hire_date:
            parse_iso_date(hire_date)

        return {
            "employee_id": require_non_empty(employee_id, "Employee ID"),
            "user_email": user_email,
            "position": require_non_empty(position, "Position"),
            "department_id": (department_id or "").strip(),
            "hire_date": hire_date,
        }

    def create_employee(
        self,
        *,
        employee_id: str,
        user_email: str,
        position: str,
        department_id: str,
        hire_date: str = "",
    ) -> Employee:
        fields = self._validated_fields(
            employee_id=employee_id,
            user_email=user_email,
            position=position,
            department_id=department_id,
            hire_date=hire_date,
        )
        employee = self._employees.insert(Employee(id=generate_id(), **fields))
        self._store.save()
        return employee

    def update_employee(
        self,
        *,
        record_id: str,
        employee_id: str,
        user_email: str,
        position: str,
        department_id: str,
        hire_date: str = "",
    ) -> Employee:
        fields = self._validated_fields(
            employee_id=employee_id,
            user_email=user_email,
            position=position,
            department_id=department_id,
            hire_date=hire_date,
        )
        employee = self._employees.update_in_place(record_id, **fields)
        if employee is None:
            raise NotFound("Employee not found")

        self._store.save()
        return employee

    def delete_employee(self, *, record_id: str) -> None:
        if not self._employees.remove(record_id):
            raise NotFound("Employee not found")
        self._store.save()
