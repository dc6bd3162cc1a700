from __future__ import annotations

import logging

from flask import flash

from ..core.enums import Severity
from ..core.exceptions import DomainError, StorageError

logger = logging.getLogger(__name__)


def notify(message: str, severity: Severity = Severity.INFO) -> None:
    """Fire-and-forget user notification (rendered as a toast on the next page)."""
    flash(message, Severity(severity).value)


def notify_failure(exc: Exception, *, action: str) -> None:
    """Turn a failed action into a user notification; unexpected errors are logged."""
    if isinstance(exc, StorageError):
        notify("Error saving data", Severity.DANGER)
    elif isinstance(exc, DomainError):
        notify(str(exc), Severity.DANGER)
    else:
        logger.exception("Unexpected error while %s", action)
        notify(f"System error while {action}", Severity.DANGER)
