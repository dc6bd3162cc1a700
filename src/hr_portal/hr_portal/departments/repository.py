from __future__ import annotations

from ..database.collection import Collection
from .model import Department


class DepartmentRepository(Collection[Department]):
    collection_name = "departments"
