"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import pytest

from maib_mia.kernel.errors import (
    ApiError,
    AuthError,
    MiaError,
    NetworkError,
    ProtocolError,
    ValidationError,
)


class TestMiaError:
    def test_message_is_stored(self) -> None:
        err = MiaError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert MiaError("m").code == "mia_error"

    def test_custom_code(self) -> None:
        assert MiaError("m", code="custom").code == "custom"

    def test_log_fields_basic(self) -> None:
        assert MiaError("m", code="my_code").log_fields() == {"error_code": "my_code", "error": "m"}

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = MiaError("wrap", cause=cause)
        assert err.__cause__ is cause
        assert "root" in err.log_fields()["cause"]

    def test_str_is_the_message(self) -> None:
        assert str(MiaError("oops")) == "oops"

    def test_repr(self) -> None:
        assert repr(AuthError("no token")) == "AuthError(code='auth_error', message='no token')"


class TestSubclasses:
    @pytest.mark.parametrize(
        ("cls", "code"),
        [
            (ValidationError, "validation_error"),
            (AuthError, "auth_error"),
            (ApiError, "api_error"),
            (ProtocolError, "protocol_error"),
            (NetworkError, "network_error"),
        ],
    )
    def test_codes_and_root(self, cls, code) -> None:
        err = cls("m")
        assert isinstance(err, MiaError)
        assert err.code == code

    def test_validation_error_carries_errors(self) -> None:
        err = ValidationError("bad", errors=[{"field": "amount", "reason": "missing"}])
        assert err.log_fields()["field_errors"] == [{"field": "amount", "reason": "missing"}]

    def test_validation_error_defaults_to_empty_list(self) -> None:
        assert ValidationError("bad").errors == []

    def test_api_error_fields(self) -> None:
        err = ApiError(
            "Invalid amount (12001)",
            errors=[{"errorCode": "12001", "errorMessage": "Invalid amount"}, {"errorMessage": "no code"}],
            status_code=400,
        )
        assert err.error_codes == ["12001"]
        fields = err.log_fields()
        assert fields["status_code"] == 400
        assert fields["error_codes"] == ["12001"]

    def test_protocol_error_status_code(self) -> None:
        assert ProtocolError("m", status_code=502).status_code == 502
        assert ProtocolError("m", status_code=502).log_fields()["status_code"] == 502

    def test_network_error_wraps_cause(self) -> None:
        cause = OSError("dns")
        err = NetworkError("failed", cause=cause)
        assert err.cause is cause
