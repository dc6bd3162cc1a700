from __future__ import annotations

import json

import pytest

from src.hr_portal.hr_portal.core.constants import STORAGE_KEY
from src.hr_portal.hr_portal.core.enums import Role
from src.hr_portal.hr_portal.core.exceptions import DuplicateEmail, NotFound, ValidationError, WeakPassword


def _create(container, email="bob@example.com", **overrides):
    fields = dict(
        first_name="Bob",
        last_name="Smith",
        email=email,
        password="secret1",
        role="User",
        verified=True,
    )
    fields.update(overrides)
    return container.account_service.create_account(**fields)


def test_admin_creates_account_and_it_is_persisted(container, storage):
    account = _create(container, email=" Bob@Example.com ", role=Role.ADMIN)

    assert account.email == "bob@example.com"
    assert account.role == Role.ADMIN
    stored = json.loads(storage.get(STORAGE_KEY))
    assert "bob@example.com" in [a["email"] for a in stored["accounts"]]


def test_create_rejects_weak_password_duplicate_and_bad_role(container, admin):
    with pytest.raises(WeakPassword):
        _create(container, password="12345")
    with pytest.raises(DuplicateEmail):
        _create(container, email=admin.email.upper())
    with pytest.raises(ValidationError):
        _create(container, role="Superuser")


def test_update_account(container):
    account = _create(container)

    updated = container.account_service.update_account(
        account_id=account.id,
        first_name="Robert",
        last_name="Smith",
        email="robert@example.com",
        password="secret2",
        role="Admin",
        verified=False,
    )

    assert updated is account
    assert (account.first_name, account.email, account.role, account.verified) == (
        "Robert",
        "robert@example.com",
        Role.ADMIN,
        False,
    )


def test_update_to_email_of_other_account_fails(container, admin):
    account = _create(container)
    with pytest.raises(DuplicateEmail):
        container.account_service.update_account(
            account_id=account.id,
            first_name="Bob",
            last_name="",
            email=admin.email,
            password="secret1",
            role="User",
            verified=True,
        )


def test_update_unknown_account(container):
    with pytest.raises(NotFound):
        container.account_service.update_account(
            account_id="missing",
            first_name="X",
            last_name="",
            email="x@example.com",
            password="secret1",
            role="User",
            verified=True,
        )


def test_reset_password(container):
    account = _create(container)

    with pytest.raises(WeakPassword):
        container.account_service.reset_password(account_id=account.id, new_password="short")
    container.account_service.reset_password(account_id=account.id, new_password="longer-one")

    assert account.password == "longer-one"
    with pytest.raises(NotFound):
        container.account_service.reset_password(account_id="missing", new_password="longer-one")


def test_cannot_delete_own_account(container, admin):
    with pytest.raises(ValidationError):
        container.account_service.delete_account(account_id=admin.id, current_account_id=admin.id)
    assert container.accounts_repo.find_by_id(admin.id) is admin


def test_delete_other_account(container, admin):
    account = _create(container)

    container.account_service.delete_account(account_id=account.id, current_account_id=admin.id)

    assert container.accounts_repo.find_by_id(account.id) is None
    assert container.accounts_repo.find_by_email("bob@example.com") is None
    with pytest.raises(NotFound):
        container.account_service.delete_account(account_id=account.id, current_account_id=admin.id)
