from __future__ import annotations

from typing import List

from ..database.collection import Collection
from .model import Request


class RequestRepository(Collection[Request]):
    collection_name = "requests"

    def list_for_owner(self, employee_email: str) -> List[Request]:
        return self.filter_by_field("employee_email", employee_email)
