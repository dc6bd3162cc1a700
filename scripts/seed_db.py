"""Reset the portal storage to the default seed data."""

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.hr_portal.hr_portal.database.document_store import DocumentStore
from src.hr_portal.hr_portal.database.storage import FileStorage


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    settings = importlib.import_module(get_settings_module())

    storage = FileStorage(settings.STORAGE_PATH, quota_bytes=getattr(settings, "STORAGE_QUOTA_BYTES", None))
    document = DocumentStore(storage).reset()

    print(
        f"OK: Seeded {storage.path} "
        f"(accounts={len(document.accounts)}, departments={len(document.departments)})"
    )


if __name__ == "__main__":
    main()
