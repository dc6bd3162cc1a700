from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..core.enums import Role


@dataclass
class Account:
    """Domain entity: Account.

    Note: password is kept in plaintext; this portal is a demo and does not
    secure credentials.
    """

    id: str
    first_name: str
    last_name: str
    email: str
    password: str
    role: Role = Role.USER
    verified: bool = False

    @property
    def display_name(self) -> str:
        if self.last_name:
            return f"{self.first_name} {self.last_name}"
        return self.first_name

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "password": self.password,
            "role": self.role.value,
            "verified": self.verified,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Account":
        return cls(
            id=str(data["id"]),
            first_name=str(data.get("firstName") or ""),
            last_name=str(data.get("lastName") or ""),
            email=str(data["email"]),
            password=str(data.get("password") or ""),
            role=Role(data.get("role", Role.USER.value)),
            verified=bool(data.get("verified", False)),
        )
