from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .accounts.repository import AccountRepository
from .accounts.service import AccountService
from .auth.service import AuthGate
from .core.constants import DEFAULT_STORAGE_QUOTA_BYTES
from .database.document_store import DocumentStore
from .database.storage import FileStorage, KeyValueStorage
from .departments.repository import DepartmentRepository
from .departments.service import DepartmentService
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .requests.repository import RequestRepository
from .requests.service import RequestService


@dataclass(frozen=True)
class Container:
    store: DocumentStore

    accounts_repo: AccountRepository
    departments_repo: DepartmentRepository
    employees_repo: EmployeeRepository
    requests_repo: RequestRepository

    account_service: AccountService
    department_service: DepartmentService
    employee_service: EmployeeService
    request_service: RequestService

    def auth_gate(self, session: KeyValueStorage) -> AuthGate:
        """Auth gate bound to one client's session storage."""
        return AuthGate(self.store, self.accounts_repo, session)


def build_container(*, storage_config: Optional[dict] = None, storage: Optional[KeyValueStorage] = None) -> Container:
    if storage is None:
        config = storage_config or {}
        storage = FileStorage(
            str(config["path"]),
            quota_bytes=config.get("quota_bytes", DEFAULT_STORAGE_QUOTA_BYTES),
        )

    store = DocumentStore(storage)
    store.load()

    accounts_repo = AccountRepository(store)
    departments_repo = DepartmentRepository(store)
    employees_repo = EmployeeRepository(store)
    requests_repo = RequestRepository(store)

    return Container(
        store=store,
        accounts_repo=accounts_repo,
        departments_repo=departments_repo,
        employees_repo=employees_repo,
        requests_repo=requests_repo,
        account_service=AccountService(store, accounts_repo),
        department_service=DepartmentService(departments_repo),
        employee_service=EmployeeService(store, employees_repo, accounts_repo),
        request_service=RequestService(store, requests_repo),
    )
