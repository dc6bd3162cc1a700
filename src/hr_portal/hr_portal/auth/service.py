from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..accounts.model import Account
from ..accounts.repository import AccountRepository
from ..common.identifiers import generate_id
from ..common.validators import normalize_email, require_non_empty, require_password
from ..core.constants import AUTH_TOKEN_KEY, EMAIL_VERIFIED_KEY, UNVERIFIED_EMAIL_KEY
from ..core.enums import Role
from ..core.exceptions import DuplicateEmail, InvalidCredentials, NotFound
from ..database.document_store import DocumentStore
from ..database.storage import KeyValueStorage


@dataclass(frozen=True)
class AuthState:
    """Anonymous when `account` is None, otherwise Authenticated(account.role)."""

    account: Optional[Account] = None

    @property
    def is_authenticated(self) -> bool:
        return self.account is not None

    @property
    def is_admin(self) -> bool:
        return self.account is not None and self.account.is_admin

    @property
    def role(self) -> Optional[Role]:
        return self.account.role if self.account else None


ANONYMOUS = AuthState()


class AuthGate:
    """Use case: registration, e-mail verification, login/logout, session restore.

    The session token is the account's own e-mail stored under `auth_token`.
    It has no expiry or signature; it only identifies, it does not protect.
    """

    def __init__(self, store: DocumentStore, accounts: AccountRepository, session: KeyValueStorage):
        self._store = store
        self._accounts = accounts
        self._session = session
        self._state = ANONYMOUS

    @property
    def state(self) -> AuthState:
        return self._state

    @property
    def current_account(self) -> Optional[Account]:
        return self._state.account

    def register(self, *, first_name: str, last_name: str, email: str, password: str) -> Account:
        first_name = require_non_empty(first_name, "First name")
        email = normalize_email(require_non_empty(email, "Email"))

        # A taken e-mail is reported before a weak password.
        if self._accounts.find_by_email(email):
            raise DuplicateEmail("Email already registered")
        require_password(password)

        account = self._accounts.insert(
            Account(
                id=generate_id(),
                first_name=first_name,
                last_name=(last_name or "").strip(),
                email=email,
                password=password,
                role=Role.USER,
                verified=False,
            )
        )
        self._store.save()
        self._session.set(UNVERIFIED_EMAIL_KEY, email)
        return account

    def pending_verification_email(self) -> Optional[str]:
        return self._session.get(UNVERIFIED_EMAIL_KEY)

    def verify_email(self, email: Optional[str] = None) -> Account:
        """Simulated verification: marks the pending (or given) account verified."""
        email = normalize_email(email) if email else self.pending_verification_email()
        if not email:
            raise NotFound("No pending verification")

        account = self._accounts.find_by_email(email)
        if not account:
            raise NotFound("Account not found")

        self._accounts.update_in_place(account.id, verified=True)
        self._store.save()

        self._session.remove(UNVERIFIED_EMAIL_KEY)
        self._session.set(EMAIL_VERIFIED_KEY, "true")
        return account

    def consume_email_verified_flag(self) -> bool:
        """True once after a successful verification (login page banner)."""
        flagged = self._session.get(EMAIL_VERIFIED_KEY) == "true"
        if flagged:
            self._session.remove(EMAIL_VERIFIED_KEY)
        return flagged

    def login(self, email: str, password: str) -> Account:
        email = normalize_email(email)
        account = self._accounts.find_by_email(email)
        if not account or account.password != password or not account.verified:
            raise InvalidCredentials("Invalid credentials or unverified email")

        self._session.set(AUTH_TOKEN_KEY, account.email)
        self._state = AuthState(account)
        return account

    def logout(self) -> None:
        self._session.remove(AUTH_TOKEN_KEY)
        self._state = ANONYMOUS

    def restore_session(self) -> AuthState:
        token = self._session.get(AUTH_TOKEN_KEY)
        if not token:
            self._state = ANONYMOUS
            return self._state

        account = self._accounts.find_by_field("email", token)
        if account and account.verified:
            self._state = AuthState(account)
        else:
            self._session.remove(AUTH_TOKEN_KEY)
            self._state = ANONYMOUS
        return self._state

    def refresh_token(self) -> None:
        """Re-issue the token after the signed-in account's e-mail was edited."""
        account = self._state.account
        if account is None:
            return
        if account.verified:
            self._session.set(AUTH_TOKEN_KEY, account.email)
        else:
            self.logout()
