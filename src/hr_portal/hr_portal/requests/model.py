from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping

from ..core.enums import RequestStatus


@dataclass(frozen=True)
class RequestItem:
    name: str
    qty: int

    def to_dict(self) -> dict:
        return {"name": self.name, "qty": self.qty}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RequestItem":
        return cls(name=str(data["name"]), qty=int(data["qty"]))


@dataclass
class Request:
    id: str
    type: str
    items: List[RequestItem]
    employee_email: str
    date: str
    status: RequestStatus = RequestStatus.PENDING

    def items_summary(self) -> str:
        return ", ".join(f"{item.name} ({item.qty})" for item in self.items)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type,
            "items": [item.to_dict() for item in self.items],
            "status": self.status.value,
            "date": self.date,
            "employeeEmail": self.employee_email,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Request":
        return cls(
            id=str(data["id"]),
            type=str(data.get("type") or ""),
            items=[RequestItem.from_dict(item) for item in data.get("items") or []],
            employee_email=str(data.get("employeeEmail") or ""),
            date=str(data.get("date") or ""),
            status=RequestStatus(data.get("status", RequestStatus.PENDING.value)),
        )
