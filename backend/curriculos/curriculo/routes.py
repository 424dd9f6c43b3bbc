"""Résumé JSON routes (create, list, get by id)."""

import logging
import re

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..database.base import get_db
from ..dependencies import get_csrf_guard
from ..errors import InvalidIdentifier, RecordNotFound, StoreFailure
from ..security.csrf import CsrfGuard
from ..security.sanitizer import sanitize_rich_text
from .schemas import CurriculoCreate, CurriculoResponse
from .service import fetch_all, fetch_by_id, insert_record
from .validation import validate_curriculo

logger = logging.getLogger(__name__)

router = APIRouter(tags=["curriculos"])

_ID_RE = re.compile(r"[+-]?[0-9]+")

# Signed 64-bit: the widest id column any backend can hold.
_ID_MIN = -(2**63)
_ID_MAX = 2**63 - 1


def parse_record_id(raw: str) -> int:
    """Parse a path identifier as a base-10 integer.

    Raises InvalidIdentifier for non-numeric input and RecordNotFound for
    numbers no row can carry.
    """
    value = raw.strip()
    if not _ID_RE.fullmatch(value):
        raise InvalidIdentifier()
    rid = int(value)
    if not _ID_MIN <= rid <= _ID_MAX:
        raise RecordNotFound()
    return rid


@router.post("/curriculos")
def create_curriculo(
    request: Request,
    payload: CurriculoCreate,
    db: Session = Depends(get_db),
    guard: CsrfGuard = Depends(get_csrf_guard),
):
    guard.enforce(payload.csrf_token or request.headers.get("X-CSRF-Token"))
    validate_curriculo(payload)

    record = insert_record(db, payload.record_fields())
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Commit failed for new curriculo")
        raise StoreFailure("Erro ao cadastrar currículo", str(exc)) from exc

    return JSONResponse(CurriculoResponse.model_validate(record).to_json(), status_code=201)


@router.get("/curriculos")
def list_curriculos(db: Session = Depends(get_db)):
    records = fetch_all(db)
    return JSONResponse([CurriculoResponse.model_validate(r).to_json() for r in records])


@router.get("/curriculos/{record_id}")
def get_curriculo(record_id: str, db: Session = Depends(get_db)):
    rid = parse_record_id(record_id)
    record = fetch_by_id(db, rid)
    if record is None:
        raise RecordNotFound()

    data = CurriculoResponse.model_validate(record).to_json()
    # Rows written before write-time sanitization existed may still carry markup.
    cleaned = sanitize_rich_text(record.experiencia_profissional)
    if cleaned != record.experiencia_profissional:
        logger.warning("Curriculo id=%s: stored experienciaProfissional changed by re-sanitization", rid)
    data["experienciaProfissional"] = cleaned
    return JSONResponse(data)
