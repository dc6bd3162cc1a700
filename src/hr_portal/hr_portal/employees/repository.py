from __future__ import annotations

from ..database.collection import Collection
from .model import Employee


class EmployeeRepository(Collection[Employee]):
    collection_name = "employees"
