from __future__ import annotations

import pytest

from src.hr_portal.hr_portal.container import build_container
from src.hr_portal.hr_portal.core.constants import SEED_ADMIN_EMAIL
from src.hr_portal.hr_portal.database.storage import InMemoryStorage


@pytest.fixture()
def storage():
    return InMemoryStorage()


@pytest.fixture()
def container(storage):
    return build_container(storage=storage)


@pytest.fixture()
def session():
    """Per-client keys (token, pending verification)."""
    return InMemoryStorage()


@pytest.fixture()
def gate(container, session):
    return container.auth_gate(session)


@pytest.fixture()
def admin(container):
    return container.accounts_repo.find_by_email(SEED_ADMIN_EMAIL)


@pytest.fixture()
def verified_user(gate):
    account = gate.register(first_name="Jane", last_name="Doe", email="jane@example.com", password="secret1")
    gate.verify_email()
    return account
