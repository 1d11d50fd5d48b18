"""Unit tests for surreal_http.types — response wire models."""

import pytest
from pydantic import ValidationError

from surreal_http.types import AuthResult, ErrorBody, QueryResult, QueryResults, ResponseStatus


class TestResponseStatus:
    def test_values(self) -> None:
        assert ResponseStatus.OK.value == "OK"
        assert ResponseStatus.ERR.value == "ERR"

    def test_from_string(self) -> None:
        assert ResponseStatus("OK") == ResponseStatus.OK
        assert ResponseStatus("ERR") == ResponseStatus.ERR


class TestQueryResult:
    def test_validate_full(self) -> None:
        result = QueryResult.model_validate({"result": 2, "status": "OK", "time": "1ms"})
        assert result.result == 2
        assert result.status == ResponseStatus.OK
        assert result.time == "1ms"
        assert result.is_ok is True

    def test_validate_error(self) -> None:
        result = QueryResult.model_validate({"status": "ERR", "result": "query failed"})
        assert result.is_error is True
        assert result.is_ok is False
        assert result.time == ""

    def test_status_required(self) -> None:
        with pytest.raises(ValidationError):
            QueryResult.model_validate({"result": 1})

    def test_unknown_status_rejected(self) -> None:
        with pytest.raises(ValidationError):
            QueryResult.model_validate({"result": 1, "status": "MAYBE"})

    def test_records_with_list(self) -> None:
        result = QueryResult(result=[{"id": "1"}, {"id": "2"}], status=ResponseStatus.OK)
        assert len(result.records) == 2
        assert result.first == {"id": "1"}

    def test_records_with_non_list(self) -> None:
        result = QueryResult(result="scalar_value", status=ResponseStatus.OK)
        assert result.records == []
        assert result.first is None
        assert result.scalar == "scalar_value"

    def test_scalar_for_records(self) -> None:
        result = QueryResult(result=[{"id": "1"}], status=ResponseStatus.OK)
        assert result.scalar is None

    def test_list_preserves_order(self) -> None:
        results = QueryResults.validate_json(
            b'[{"result":1,"status":"OK","time":"1ms"},{"result":2,"status":"OK","time":"2ms"}]'
        )
        assert [r.result for r in results] == [1, 2]


class TestAuthResult:
    def test_with_token(self) -> None:
        result = AuthResult.model_validate_json(b'{"code":200,"details":"Authenticated","token":"eyJ"}')
        assert result.code == 200
        assert result.token == "eyJ"

    def test_without_token(self) -> None:
        result = AuthResult.model_validate_json(b'{"code":200,"details":"Authenticated"}')
        assert result.token is None


class TestErrorBody:
    def test_full(self) -> None:
        body = ErrorBody.model_validate_json(
            b'{"code":400,"details":"Request problems detected","description":"d","information":"i"}'
        )
        assert body.code == 400
        assert body.information == "i"

    def test_code_required(self) -> None:
        with pytest.raises(ValidationError):
            ErrorBody.model_validate_json(b'{"details":"nope"}')

    def test_extra_fields_ignored(self) -> None:
        body = ErrorBody.model_validate({"code": 500, "extra": True})
        assert body.details == ""
