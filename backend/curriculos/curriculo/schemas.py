"""Résumé request/response schemas.

JSON uses the camelCase names clients submit (``enderecoWeb``,
``experienciaProfissional``); Python attributes use snake_case.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CurriculoCreate(BaseModel):
    """Submission payload. Every field is optional here: presence is checked by
    ``validate_curriculo`` so missing fields map to a 400, not a schema error."""

    model_config = ConfigDict(populate_by_name=True)

    nome: str | None = None
    telefone: str | None = None
    email: str | None = None
    endereco_web: str | None = Field(None, alias="enderecoWeb")
    experiencia_profissional: str | None = Field(None, alias="experienciaProfissional")
    csrf_token: str | None = Field(None, alias="_csrf")

    @field_validator(
        "nome", "telefone", "email", "endereco_web", "experiencia_profissional", "csrf_token", mode="before"
    )
    @classmethod
    def coerce_string(cls, v: object) -> str | None:
        """Accept JSON scalars (numbers, booleans) as text."""
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, (int, float, bool)):
            return str(v)
        return v

    def record_fields(self) -> dict:
        """Column values for the store, without the anti-forgery token."""
        return {
            "nome": self.nome,
            "telefone": self.telefone or "",
            "email": self.email,
            "endereco_web": self.endereco_web or "",
            "experiencia_profissional": self.experiencia_profissional,
        }


class CurriculoResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nome: str
    telefone: str
    email: str
    endereco_web: str = Field(serialization_alias="enderecoWeb")
    experiencia_profissional: str = Field(serialization_alias="experienciaProfissional")

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)
