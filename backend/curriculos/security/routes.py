"""Anti-forgery token route."""

from fastapi import APIRouter, Depends

from ..dependencies import get_csrf_guard
from .csrf import CsrfGuard

router = APIRouter(tags=["security"])


@router.get("/csrf-token")
def csrf_token(guard: CsrfGuard = Depends(get_csrf_guard)):
    return {"csrfToken": guard.issue_token()}
