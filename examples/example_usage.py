"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the rules live in the services.
"""

from src.hr_portal.hr_portal.container import build_container
from src.hr_portal.hr_portal.database.storage import InMemoryStorage


def main():
    container = build_container(storage=InMemoryStorage())
    gate = container.auth_gate(InMemoryStorage())

    gate.register(first_name="Jane", last_name="Doe", email="jane@example.com", password="secret1")
    gate.verify_email()
    account = gate.login("jane@example.com", "secret1")

    container.request_service.create_request(
        owner_email=account.email,
        request_type="Equipment",
        items=[("Laptop", 1), ("Monitor", "2")],
    )
    for req in container.request_service.list_for_owner(owner_email=account.email):
        print(req.date, req.type, req.items_summary(), req.status.value)


if __name__ == "__main__":
    main()
