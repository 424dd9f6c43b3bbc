"""Résumé record model."""

from sqlalchemy import Column, Integer, String, Text

from ..database.base import Base


class Curriculo(Base):
    __tablename__ = "curriculos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nome = Column(String(255), nullable=False)
    telefone = Column(String(50), nullable=False, default="")
    email = Column(String(255), nullable=False)
    endereco_web = Column(String(500), nullable=False, default="")
    experiencia_profissional = Column(Text, nullable=False)
