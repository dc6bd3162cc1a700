from __future__ import annotations

from functools import wraps

from flask import g, redirect, url_for

from ..common.notify import notify
from .router import Page, resolve


def page_url(page: Page) -> str:
    return url_for("page", fragment="" if page is Page.HOME else page.value)


def page_required(page: Page):
    """Apply the page's route guard to a form action posting to that page."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            result = resolve(page.value, g.auth.state)
            if not result.allowed:
                notify(result.notice.message, result.notice.severity)
                return redirect(page_url(result.redirect_to))
            return view(*args, **kwargs)

        return wrapper

    return decorator
