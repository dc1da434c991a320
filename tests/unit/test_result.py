"""Unit tests for the Ok/Err result type."""

import pytest

from src.domain.result import Err, Ok, UnwrapError


class TestOk:
    """Tests for Ok."""

    def test_flags(self) -> None:
        assert Ok(1).is_ok() is True
        assert Ok(1).is_err() is False

    def test_map_applies_function(self) -> None:
        assert Ok(2).map(lambda x: x * 10) == Ok(20)

    def test_map_error_is_skipped(self) -> None:
        assert Ok(2).map_error(lambda e: "changed") == Ok(2)

    def test_unwrap_returns_value(self) -> None:
        assert Ok("value").unwrap() == "value"


class TestErr:
    """Tests for Err."""

    def test_flags(self) -> None:
        assert Err("boom").is_ok() is False
        assert Err("boom").is_err() is True

    def test_map_is_skipped(self) -> None:
        """Later steps never run once a failure occurred."""
        called = []
        assert Err("boom").map(called.append) == Err("boom")
        assert called == []

    def test_map_error_wraps_error(self) -> None:
        assert Err("boom").map_error(str.upper) == Err("BOOM")

    def test_unwrap_raises(self) -> None:
        with pytest.raises(UnwrapError):
            Err("boom").unwrap()

    def test_ok_and_err_never_equal(self) -> None:
        assert Ok("x") != Err("x")
