"""Tests for the wildglob error hierarchy."""

from __future__ import annotations

from datetime import datetime

import pytest

from wildglob.errors import (
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    GlobError,
    InvalidWildcardError,
)


class TestGlobError:
    def test_str_includes_code(self) -> None:
        err = GlobError(code="SOME_CODE", message="something broke")
        assert str(err) == "[SOME_CODE] something broke"

    def test_defaults(self) -> None:
        err = GlobError(code="X", message="m")
        assert err.details == {}
        assert err.cause is None
        assert datetime.fromisoformat(err.timestamp).tzinfo is not None

    def test_cause_preserved(self) -> None:
        cause = ValueError("inner")
        err = ConfigError(message="outer", cause=cause)
        assert err.cause is cause


class TestSubclasses:
    @pytest.mark.parametrize(
        ("error", "code"),
        [
            (ConfigNotFoundError(config_path="/tmp/missing.yaml"), ErrorCodes.CONFIG_NOT_FOUND),
            (ConfigError(message="bad"), ErrorCodes.CONFIG_INVALID),
            (InvalidWildcardError(wildcard=""), ErrorCodes.INVALID_WILDCARD),
        ],
    )
    def test_codes(self, error: GlobError, code: str) -> None:
        assert isinstance(error, GlobError)
        assert error.code == code

    def test_config_not_found_details(self) -> None:
        err = ConfigNotFoundError(config_path="/tmp/missing.yaml")
        assert err.config_path == "/tmp/missing.yaml"
        assert "/tmp/missing.yaml" in err.message

    def test_invalid_wildcard_message(self) -> None:
        err = InvalidWildcardError(wildcard="")
        assert "''" in err.message


class TestErrorCodes:
    def test_immutable(self) -> None:
        codes = ErrorCodes()
        with pytest.raises(AttributeError):
            codes.CONFIG_INVALID = "OTHER"
