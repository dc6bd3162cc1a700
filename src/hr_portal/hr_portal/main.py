from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .accounts.controller import register as register_accounts
from .auth.controller import register as register_auth
from .departments.controller import register as register_departments
from .employees.controller import register as register_employees
from .requests.controller import register as register_requests
from .routing.controller import register as register_pages

logger = logging.getLogger(__name__)


def create_app(*, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder=str(Path(__file__).resolve().parent / "templates"), static_folder=None)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    if container is None:
        storage_config = {
            "path": getattr(settings, "STORAGE_PATH"),
            "quota_bytes": getattr(settings, "STORAGE_QUOTA_BYTES", None),
        }
        logger.info("settings=%s storage=%s", settings_module, storage_config["path"])
        container = build_container(storage_config=storage_config)

    # Auth first: its before_request hook sets g.auth for every other view.
    register_auth(app, container)
    register_accounts(app, container)
    register_employees(app, container)
    register_departments(app, container)
    register_requests(app, container)
    register_pages(app, container)

    return app


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    app = create_app()
    # Handlers run one at a time; the document store has no locking.
    app.run(debug=app.config["DEBUG"], threaded=False)


if __name__ == "__main__":
    main()
