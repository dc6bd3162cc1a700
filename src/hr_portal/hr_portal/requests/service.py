from __future__ import annotations

import re
from datetime import date
from typing import Any, Iterable, List, Optional, Tuple

from ..common.datetime_utils import today_local
from ..common.identifiers import generate_id
from ..common.validators import require_non_empty
from ..core.enums import RequestStatus
from ..core.exceptions import ValidationError
from ..database.document_store import DocumentStore
from .model import Request, RequestItem
from .repository import RequestRepository


# Leading whole number, so "2.5" reads as 2 and "3 boxes" as 3.
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class RequestService:
    def __init__(self, store: DocumentStore, requests: RequestRepository):
        self._store = store
        self._requests = requests

    @staticmethod
    def _parse_qty(value: Any) -> Optional[int]:
        match = _LEADING_INT.match(str(value))
        return int(match.group(1)) if match else None

    @classmethod
    def clean_items(cls, rows: Iterable[Tuple[Any, Any]]) -> List[RequestItem]:
        """Keep rows with a name and a positive whole quantity; drop the rest."""
        items: List[RequestItem] = []
        for name, qty in rows:
            name = (name or "").strip()
            qty_i = cls._parse_qty(qty)
            if name and qty_i is not None and qty_i > 0:
                items.append(RequestItem(name=name, qty=qty_i))
        return items

    def create_request(
        self,
        *,
        owner_email: str,
        request_type: str,
        items: Iterable[Tuple[Any, Any]],
        today: Optional[date] = None,
    ) -> Request:
        owner_email = require_non_empty(owner_email, "Owner email")
        request_type = require_non_empty(request_type, "Request type")

        cleaned = self.clean_items(items)
        if not cleaned:
            raise ValidationError("Please add at least one item")

        created_on = today or today_local()
        request = self._requests.insert(
            Request(
                id=generate_id(),
                type=request_type,
                items=cleaned,
                employee_email=owner_email,
                date=created_on.isoformat(),
                status=RequestStatus.PENDING,
            )
        )
        self._store.save()
        return request

    def list_for_owner(self, *, owner_email: str) -> List[Request]:
        return self._requests.list_for_owner(owner_email)
