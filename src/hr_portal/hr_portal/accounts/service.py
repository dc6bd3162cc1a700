from __future__ import annotations

from typing import List, Optional

from ..common.identifiers import generate_id
from ..common.validators import normalize_email, require_non_empty, require_password
from ..core.enums import Role
from ..core.exceptions import NotFound, ValidationError
from ..database.document_store import DocumentStore
from .model import Account
from .repository import AccountRepository


class AccountService:
    """Use case: manage accounts (admin)."""

    def __init__(self, store: DocumentStore, accounts: AccountRepository):
        self._store = store
        self._accounts = accounts

    @staticmethod
    def _parse_role(role: Role | str) -> Role:
        try:
            return Role(role)
        except ValueError:
            raise ValidationError("Invalid account role")

    def list_accounts(self) -> List[Account]:
        return self._accounts.list_all()

    def get_account(self, account_id: str) -> Optional[Account]:
        return self._accounts.find_by_id(account_id)

    def create_account(
        self,
        *,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
        role: Role | str,
        verified: bool,
    ) -> Account:
        require_password(password)
        first_name = require_non_empty(first_name, "First name")
        email = normalize_email(require_non_empty(email, "Email"))

        account = self._accounts.insert(
            Account(
                id=generate_id(),
                first_name=first_name,
                last_name=(last_name or "").strip(),
                email=email,
                password=password,
                role=self._parse_role(role),
                verified=bool(verified),
            )
        )
        self._store.save()
        return account

    def update_account(
        self,
        *,
        account_id: str,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
        role: Role | str,
        verified: bool,
    ) -> Account:
        require_password(password)
        first_name = require_non_empty(first_name, "First name")
        email = normalize_email(require_non_empty(email, "Email"))
        role = self._parse_role(role)

        account = self._accounts.update_in_place(
            account_id,
            first_name=first_name,
            last_name=(last_name or "").strip(),
            email=email,
            password=password,
            role=role,
            verified=bool(verified),
        )
        if account is None:
            raise NotFound("Account not found")

        self._store.save()
        return account

    def reset_password(self, *, account_id: str, new_password: str) -> Account:
        require_password(new_password)
        account = self._accounts.update_in_place(account_id, password=new_password)
        if account is None:
            raise NotFound("Account not found")

        self._store.save()
        return account

    def delete_account(self, *, account_id: str, current_account_id: Optional[str]) -> None:
        if current_account_id is not None and account_id == current_account_id:
            raise ValidationError("Cannot delete your own account")

        if not self._accounts.remove(account_id):
            raise NotFound("Account not found")
        self._store.save()
