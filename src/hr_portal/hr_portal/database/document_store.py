from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from ..accounts.model import Account
from ..common.identifiers import generate_id
from ..core.constants import CORRUPT_BACKUP_KEY, SEED_ADMIN_EMAIL, SEED_ADMIN_PASSWORD, STORAGE_KEY
from ..core.enums import Role
from ..core.exceptions import StorageError
from ..departments.model import Department
from ..employees.model import Employee
from ..requests.model import Request
from .storage import KeyValueStorage

logger = logging.getLogger(__name__)


@dataclass
class Document:
    """The single aggregate persisted as one JSON value."""

    accounts: List[Account] = field(default_factory=list)
    departments: List[Department] = field(default_factory=list)
    employees: List[Employee] = field(default_factory=list)
    requests: List[Request] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "accounts": [a.to_dict() for a in self.accounts],
            "departments": [d.to_dict() for d in self.departments],
            "employees": [e.to_dict() for e in self.employees],
            "requests": [r.to_dict() for r in self.requests],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Document":
        if not isinstance(data, Mapping):
            raise TypeError(f"Document must be an object, got {type(data).__name__}")
        return cls(
            accounts=[Account.from_dict(a) for a in data["accounts"]],
            departments=[Department.from_dict(d) for d in data["departments"]],
            employees=[Employee.from_dict(e) for e in data["employees"]],
            requests=[Request.from_dict(r) for r in data["requests"]],
        )


def seed_document() -> Document:
    """Default data: one verified admin and two departments."""
    return Document(
        accounts=[
            Account(
                id=generate_id(),
                first_name="Admin",
                last_name="",
                email=SEED_ADMIN_EMAIL,
                password=SEED_ADMIN_PASSWORD,
                role=Role.ADMIN,
                verified=True,
            )
        ],
        departments=[
            Department(id=generate_id(), name="Engineering", description="Software team"),
            Department(id=generate_id(), name="HR", description="Human Resources"),
        ],
    )


class DocumentStore:
    """Owns the in-memory document and its persisted copy.

    Every mutation is followed by `save()`, which overwrites the whole stored
    value. When a save fails the in-memory document stays authoritative until
    the next successful save. Unreadable stored data is copied under
    `backup_key` before the seed replaces it.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        key: str = STORAGE_KEY,
        backup_key: str = CORRUPT_BACKUP_KEY,
    ):
        self._storage = storage
        self._key = key
        self._backup_key = backup_key
        self._document: Optional[Document] = None

    @property
    def document(self) -> Document:
        if self._document is None:
            return self.load()
        return self._document

    def load(self) -> Document:
        try:
            raw = self._storage.get(self._key)
        except StorageError as e:
            logger.error("Error loading data: %s", e)
            return self._seed()

        if raw is None:
            logger.info("No stored data under %r, seeding defaults", self._key)
            return self._seed()

        try:
            document = Document.from_dict(json.loads(raw))
        except (ValueError, TypeError, KeyError) as e:
            logger.error("Error loading data, resetting to defaults: %s", e)
            self._backup_corrupt(raw)
            return self._seed()

        self._document = document
        return document

    def save(self) -> None:
        payload = json.dumps(self.document.to_dict(), ensure_ascii=False)
        try:
            self._storage.set(self._key, payload)
        except StorageError:
            logger.exception("Error saving data")
            raise

    def reset(self) -> Document:
        self._document = seed_document()
        self.save()
        return self._document

    def _backup_corrupt(self, raw: str) -> None:
        try:
            self._storage.set(self._backup_key, raw)
        except StorageError as e:
            logger.warning("Could not back up unreadable data under %r: %s", self._backup_key, e)
            return
        logger.warning("Unreadable data copied to %r", self._backup_key)

    def _seed(self) -> Document:
        self._document = seed_document()
        try:
            self.save()
        except StorageError:
            logger.warning("Seeded defaults are kept in memory only until the next successful save")
        return self._document
