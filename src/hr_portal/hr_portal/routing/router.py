from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..auth.service import AuthState
from ..core.enums import Severity


class Page(str, Enum):
    """Every page of the portal; values are the URL fragments."""

    HOME = "home"
    REGISTER = "register"
    VERIFY_EMAIL = "verify-email"
    LOGIN = "login"
    PROFILE = "profile"
    EMPLOYEES = "employees"
    DEPARTMENTS = "departments"
    ACCOUNTS = "accounts"
    REQUESTS = "requests"


PROTECTED_PAGES = frozenset(
    {Page.PROFILE, Page.EMPLOYEES, Page.DEPARTMENTS, Page.ACCOUNTS, Page.REQUESTS}
)
ADMIN_PAGES = frozenset({Page.EMPLOYEES, Page.DEPARTMENTS, Page.ACCOUNTS})


@dataclass(frozen=True)
class Notice:
    message: str
    severity: Severity


@dataclass(frozen=True)
class RouteResult:
    page: Page
    redirect_to: Optional[Page] = None
    notice: Optional[Notice] = None

    @property
    def allowed(self) -> bool:
        return self.redirect_to is None


LOGIN_REQUIRED = Notice("Please log in first", Severity.WARNING)
ADMIN_ONLY = Notice("Access denied. Admin only.", Severity.DANGER)


def parse_page(path: Optional[str]) -> Page:
    """Map '#/login', '/login', 'login/' ... to a Page; anything unknown is Home."""
    fragment = (path or "").strip().lstrip("#").strip("/")
    try:
        return Page(fragment)
    except ValueError:
        return Page.HOME


def resolve(path: Optional[str], state: AuthState) -> RouteResult:
    """Pure function of (path, auth state): the page to show or where to go instead."""
    page = parse_page(path)

    if page in PROTECTED_PAGES and not state.is_authenticated:
        return RouteResult(page=page, redirect_to=Page.LOGIN, notice=LOGIN_REQUIRED)

    if page in ADMIN_PAGES and not state.is_admin:
        return RouteResult(page=page, redirect_to=Page.HOME, notice=ADMIN_ONLY)

    return RouteResult(page=page)
