from __future__ import annotations

from typing import List, Optional

from .model import Department
from .repository import DepartmentRepository


class DepartmentService:
    """Read side of departments.

    Departments are only created by seeding; the create/edit/delete screens are
    placeholders that do not change stored data.
    """

    def __init__(self, departments: DepartmentRepository):
        self._departments = departments

    def list_departments(self) -> List[Department]:
        return self._departments.list_all()

    def get_department(self, department_id: str) -> Optional[Department]:
        return self._departments.find_by_id(department_id)
