from __future__ import annotations

import uuid


def generate_id() -> str:
    """Opaque unique identifier for stored records."""
    return uuid.uuid4().hex
