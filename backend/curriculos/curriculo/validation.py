"""Required-field check and sanitization of résumé submissions."""

import logging

from ..errors import MissingRequiredField
from ..security.sanitizer import sanitize_plain_text, sanitize_rich_text
from .schemas import CurriculoCreate

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("nome", "email", "experiencia_profissional")
PLAIN_TEXT_FIELDS = ("nome", "email", "telefone", "endereco_web")

# JSON names, used in error responses.
_PUBLIC_NAMES = {
    "nome": "nome",
    "email": "email",
    "experiencia_profissional": "experienciaProfissional",
}


def _missing(payload: CurriculoCreate) -> list[str]:
    return [
        _PUBLIC_NAMES[name]
        for name in REQUIRED_FIELDS
        if not (getattr(payload, name) or "").strip()
    ]


def validate_curriculo(payload: CurriculoCreate) -> CurriculoCreate:
    """Check required fields, then sanitize every text field in place.

    Raises MissingRequiredField when a required field is absent, blank, or
    left blank by sanitization. Returns the same (mutated) payload.
    """
    missing = _missing(payload)
    if missing:
        logger.info("Submission rejected, missing fields: %s", ", ".join(missing))
        raise MissingRequiredField(missing)

    for name in PLAIN_TEXT_FIELDS:
        setattr(payload, name, sanitize_plain_text(getattr(payload, name)))
    payload.experiencia_profissional = sanitize_rich_text(payload.experiencia_profissional)

    # e.g. a name made only of a <script> element
    missing = _missing(payload)
    if missing:
        logger.info("Submission rejected, fields empty after sanitization: %s", ", ".join(missing))
        raise MissingRequiredField(missing)

    return payload
