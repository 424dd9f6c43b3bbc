"""Tests for the résumé store."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from curriculos.curriculo.models import Curriculo
from curriculos.curriculo.service import fetch_all, fetch_by_id, insert_record
from curriculos.errors import StoreFailure


def _fields(**overrides) -> dict:
    fields = {
        "nome": "Ana",
        "telefone": "",
        "email": "a@x.com",
        "endereco_web": "",
        "experiencia_profissional": "<p>dev</p>",
    }
    fields.update(overrides)
    return fields


class TestInsertRecord:
    def test_assigns_id(self, db_session):
        record = insert_record(db_session, _fields())
        db_session.commit()
        assert isinstance(record.id, int)
        assert record.nome == "Ana"

    def test_ids_are_unique(self, db_session):
        first = insert_record(db_session, _fields(nome="A"))
        second = insert_record(db_session, _fields(nome="B"))
        db_session.commit()
        assert first.id != second.id

    def test_constraint_violation_raises_store_failure(self, db_session):
        with pytest.raises(StoreFailure) as exc_info:
            insert_record(db_session, _fields(nome=None))
        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "Erro ao cadastrar currículo"
        assert exc_info.value.error

    def test_failed_insert_leaves_no_row(self, db_session):
        with pytest.raises(StoreFailure):
            insert_record(db_session, _fields(email=None))
        assert db_session.query(Curriculo).count() == 0

    def test_connectivity_failure(self):
        db = MagicMock()
        db.flush.side_effect = OperationalError("INSERT", {}, Exception("connection refused"))
        with pytest.raises(StoreFailure) as exc_info:
            insert_record(db, _fields())
        assert "connection refused" in exc_info.value.error
        db.rollback.assert_called_once()


class TestFetchAll:
    def test_returns_every_record(self, db_session):
        insert_record(db_session, _fields(nome="A"))
        insert_record(db_session, _fields(nome="B"))
        db_session.commit()
        assert sorted(r.nome for r in fetch_all(db_session)) == ["A", "B"]

    def test_empty(self, db_session):
        assert fetch_all(db_session) == []

    def test_store_failure(self):
        db = MagicMock()
        db.query.side_effect = OperationalError("SELECT", {}, Exception("db down"))
        with pytest.raises(StoreFailure) as exc_info:
            fetch_all(db)
        assert exc_info.value.message == "Erro ao listar currículos"


class TestFetchById:
    def test_returns_record(self, db_session):
        record = insert_record(db_session, _fields())
        db_session.commit()
        found = fetch_by_id(db_session, record.id)
        assert found is not None
        assert found.email == "a@x.com"

    def test_returns_none_for_unknown_id(self, db_session):
        assert fetch_by_id(db_session, 999999) is None

    def test_store_failure(self):
        db = MagicMock()
        db.query.side_effect = IntegrityError("SELECT", {}, Exception("boom"))
        with pytest.raises(StoreFailure) as exc_info:
            fetch_by_id(db, 1)
        assert exc_info.value.message == "Erro ao buscar currículo"
