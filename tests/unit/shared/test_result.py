"""Unit tests for the Result envelope."""

from __future__ import annotations

import pytest

from shared.domain.result import Result, ResultError, ResultStatus

pytestmark = pytest.mark.unit


class TestSucceeded:
    def test_carries_payload(self):
        result = Result.succeeded([1, 2])
        assert result.status == ResultStatus.SUCCEEDED
        assert result.data == [1, 2]
        assert result.error is None
        assert result.is_succeeded
        assert not result.is_failed

    def test_void_result_has_no_payload(self):
        result = Result.succeeded()
        assert result.status == ResultStatus.SUCCEEDED
        assert result.data is None

    def test_false_is_a_valid_payload(self):
        result = Result.succeeded(False)
        assert result.data is False

    def test_error_code_rejected(self):
        with pytest.raises(ValueError, match="succeeded"):
            Result(status=ResultStatus.SUCCEEDED, error=ResultError.NOT_FOUND)


class TestFailed:
    def test_carries_error_and_message(self):
        result = Result.failed(ResultError.NOT_FOUND, "Customer x not found.")
        assert result.status == ResultStatus.FAILED
        assert result.data is None
        assert result.error == ResultError.NOT_FOUND
        assert result.message == "Customer x not found."
        assert result.is_failed

    def test_payload_rejected(self):
        with pytest.raises(ValueError, match="cannot carry data"):
            Result(status=ResultStatus.FAILED, data="x", error=ResultError.CANCELLED)

    def test_error_code_required(self):
        with pytest.raises(ValueError, match="requires an error code"):
            Result(status=ResultStatus.FAILED)


class TestImmutability:
    def test_is_frozen(self):
        result = Result.succeeded(1)
        with pytest.raises(AttributeError):
            result.data = 2  # type: ignore[misc]
