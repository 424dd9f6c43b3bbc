"""Résumé store: insert and fetch operations.

Queries go through the ORM, so caller-supplied values are always bound as
parameters. Driver errors are rolled back and re-raised as StoreFailure.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..errors import StoreFailure
from .models import Curriculo

logger = logging.getLogger(__name__)


def insert_record(db: Session, fields: dict) -> Curriculo:
    """Insert one résumé and return it with its generated id."""
    record = Curriculo(**fields)
    try:
        db.add(record)
        db.flush()
        db.refresh(record)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Insert failed")
        raise StoreFailure("Erro ao cadastrar currículo", str(exc)) from exc
    logger.info("Curriculo created: id=%s", record.id)
    return record


def fetch_all(db: Session) -> list[Curriculo]:
    """Every résumé, in whatever order the backend returns them."""
    try:
        return db.query(Curriculo).all()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("List query failed")
        raise StoreFailure("Erro ao listar currículos", str(exc)) from exc


def fetch_by_id(db: Session, record_id: int) -> Curriculo | None:
    """The résumé with ``record_id``, or None if there is none."""
    try:
        return db.query(Curriculo).filter(Curriculo.id == record_id).first()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Lookup failed for id=%s", record_id)
        raise StoreFailure("Erro ao buscar currículo", str(exc)) from exc
