"""API router: résumé endpoints and the anti-forgery token endpoint."""

from fastapi import APIRouter

from .curriculo.routes import router as curriculo_router
from .security.routes import router as security_router


def build_api_router(prefix: str = "") -> APIRouter:
    api_router = APIRouter(prefix=prefix)
    api_router.include_router(security_router)
    api_router.include_router(curriculo_router)
    return api_router
