"""Tests for error record normalization and filtering."""

from __future__ import annotations

from types import MappingProxyType

from filelog.models.record import (
    DEFAULT_MESSAGE,
    ErrorRecord,
    normalize_error,
    skip_reason,
)


class TestSkipReason:
    """Tests for the write guard."""

    def test_none_is_skipped(self):
        assert skip_reason(None) == "empty"

    def test_empty_string_is_skipped(self):
        assert skip_reason("") == "empty"

    def test_empty_mapping_is_accepted(self):
        assert skip_reason({}) is None

    def test_logged_marker_is_skipped(self):
        assert skip_reason({"logged": True}) == "already logged"
        assert skip_reason(ErrorRecord(message="x", logged=True)) == "already logged"

    def test_low_code_is_skipped_by_default(self):
        assert skip_reason({"code": 404}) == "code 404 below 500"

    def test_low_code_is_accepted_with_every(self):
        assert skip_reason({"code": 404}, every=True) is None

    def test_missing_code_counts_as_severe(self):
        assert skip_reason(ErrorRecord(message="x")) is None

    def test_non_numeric_code_is_not_filtered(self):
        assert skip_reason({"code": "ECONNRESET"}) is None

    def test_numeric_string_code_is_filtered(self):
        assert skip_reason({"code": "404"}) == "code 404 below 500"
        assert skip_reason({"code": " 503 "}) is None

    def test_read_only_mapping_is_skipped(self):
        assert skip_reason(MappingProxyType({"message": "ro"})) == "read-only record"


class TestNormalizeError:
    """Tests for in-place default filling."""

    def test_fills_defaults_on_mapping(self):
        error = {}
        assert normalize_error(error) is error
        assert error == {
            "code": 500,
            "message": DEFAULT_MESSAGE,
            "stack": DEFAULT_MESSAGE,
            "logged": True,
        }

    def test_stack_defaults_to_message(self):
        record = normalize_error(ErrorRecord(message="disk full", code=507))
        assert record.code == 507
        assert record.stack == "disk full"
        assert record.logged

    def test_keeps_existing_fields(self):
        record = normalize_error(ErrorRecord(message="m", code=503, stack="s"))
        assert (record.code, record.message, record.stack) == (503, "m", "s")

    def test_exception_without_traceback(self):
        exc = normalize_error(ValueError("bad value"))
        assert exc.code == 500
        assert exc.message == "bad value"
        assert exc.stack == "bad value"
        assert exc.logged is True

    def test_exception_with_traceback_uses_formatted_stack(self):
        try:
            raise KeyError("missing")
        except KeyError as e:
            exc = normalize_error(e)

        assert exc.message == "'missing'"
        assert exc.stack.startswith("Traceback (most recent call last):")
        assert "KeyError: 'missing'" in exc.stack

    def test_exception_with_empty_text_uses_placeholder(self):
        exc = normalize_error(RuntimeError())
        assert exc.message == DEFAULT_MESSAGE
