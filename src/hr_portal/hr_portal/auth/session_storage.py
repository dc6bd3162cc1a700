from __future__ import annotations

from typing import Optional

from flask import session

from ..database.storage import KeyValueStorage


class FlaskSessionStorage(KeyValueStorage):
    """Per-client keys (session token, pending verification) kept in the Flask session cookie."""

    def get(self, key: str) -> Optional[str]:
        value = session.get(key)
        return None if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        session.permanent = True
        session[key] = value

    def remove(self, key: str) -> None:
        session.pop(key, None)
