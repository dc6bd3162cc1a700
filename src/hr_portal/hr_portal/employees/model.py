from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass
class Employee:
    """Employment record linked to an account by e-mail.

    `user_email` and `department_id` are informal foreign keys: the e-mail is
    checked when the record is written, the department never is.
    """

    id: str
    employee_id: str
    user_email: str
    position: str
    department_id: str
    hire_date: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "userEmail": self.user_email,
            "position": self.position,
            "departmentId": self.department_id,
            "hireDate": self.hire_date,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Employee":
        return cls(
            id=str(data["id"]),
            employee_id=str(data.get("employeeId") or ""),
            user_email=str(data.get("userEmail") or ""),
            position=str(data.get("position") or ""),
            department_id=str(data.get("departmentId") or ""),
            hire_date=str(data.get("hireDate") or ""),
        )
