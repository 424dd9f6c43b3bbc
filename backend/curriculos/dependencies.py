"""Shared FastAPI dependencies."""

from fastapi import Request

from .security.csrf import CsrfGuard


def get_csrf_guard(request: Request) -> CsrfGuard:
    """Get the anti-forgery guard from app state."""
    return request.app.state.csrf
