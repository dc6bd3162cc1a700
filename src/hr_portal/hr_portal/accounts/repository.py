from __future__ import annotations

from typing import Any, Optional

from ..common.validators import normalize_email
from ..core.exceptions import DuplicateEmail
from ..database.collection import Collection
from .model import Account


class AccountRepository(Collection[Account]):
    """Accounts collection.

    E-mail uniqueness is enforced here, on insert and on update, so no caller
    can skip the check. Addresses are compared and written lower-cased.
    """

    collection_name = "accounts"

    def find_by_email(self, email: str) -> Optional[Account]:
        wanted = normalize_email(email)
        for account in self._items:
            if normalize_email(account.email) == wanted:
                return account
        return None

    def insert(self, entity: Account) -> Account:
        entity.email = normalize_email(entity.email)
        if self.find_by_email(entity.email):
            raise DuplicateEmail("Email already registered")
        return super().insert(entity)

    def update_in_place(self, entity_id: str, **changes: Any) -> Optional[Account]:
        if "email" in changes:
            changes["email"] = normalize_email(changes["email"])
            other = self.find_by_email(changes["email"])
            if other and other.id != entity_id:
                raise DuplicateEmail("Email already in use by another account")
        return super().update_in_place(entity_id, **changes)
