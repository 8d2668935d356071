"""Unit tests for the exception handlers registered in main."""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import Request

from main import (
    conflict_handler,
    field_validation_handler,
    not_found_handler,
    persistence_error_handler,
)
from services.crud_service import (
    PersistenceError,
    RecordConflictError,
    RecordNotFoundError,
)
from services.validation import FieldValidationError


def _make_request() -> Request:
    request = MagicMock(spec=Request)
    request.url.path = "/abrigos"
    request.method = "POST"
    return request


@pytest.mark.unit
class TestFieldValidationHandler:
    async def test_returns_400_with_errors(self):
        exc = FieldValidationError(['Campo "nome_abrigo" é obrigatório.'])

        response = await field_validation_handler(_make_request(), exc)

        assert response.status_code == 400
        body = json.loads(response.body)
        assert body["statusCode"] == 400
        assert body["message"] == "Bad Request Exception"
        assert body["errors"] == ['Campo "nome_abrigo" é obrigatório.']

    async def test_unexpected_exception_type_is_500(self):
        response = await field_validation_handler(_make_request(), RuntimeError("x"))

        assert response.status_code == 500
        assert json.loads(response.body)["statusCode"] == 500


@pytest.mark.unit
class TestPersistenceErrorHandler:
    async def test_returns_400_with_driver_message(self):
        exc = PersistenceError("Erro ao atualizar o registro.", ["UNIQUE constraint"])

        response = await persistence_error_handler(_make_request(), exc)

        assert response.status_code == 400
        body = json.loads(response.body)
        assert body["message"] == "Erro ao atualizar o registro."
        assert body["errors"] == ["UNIQUE constraint"]

    async def test_unexpected_exception_type_is_500(self):
        response = await persistence_error_handler(_make_request(), ValueError("x"))

        assert response.status_code == 500


@pytest.mark.unit
class TestStatusHandlers:
    async def test_not_found_keeps_null_data(self):
        response = await not_found_handler(
            _make_request(), RecordNotFoundError("Registro 9 não encontrado.")
        )

        assert response.status_code == 404
        body = json.loads(response.body)
        assert "data" in body
        assert body["data"] is None

    async def test_conflict(self):
        response = await conflict_handler(
            _make_request(), RecordConflictError("possui registros vinculados")
        )

        assert response.status_code == 409
        assert json.loads(response.body)["message"] == "possui registros vinculados"
