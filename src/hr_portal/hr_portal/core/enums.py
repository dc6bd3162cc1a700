from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account role used for page authorization."""

    ADMIN = "Admin"
    USER = "User"


class RequestStatus(str, Enum):
    """Approval state of an employee request."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class Severity(str, Enum):
    """Notification level; values double as flash categories."""

    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    DANGER = "danger"
