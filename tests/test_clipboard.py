"""Tests for passgen.clipboard."""

from passgen.clipboard import (
    COPY_FAILED_MESSAGE,
    COPY_OK_MESSAGE,
    ClipboardUnavailable,
    Notification,
    copy_with_fallback,
)


def _failing(text):
    raise ClipboardUnavailable("denied")


def test_primary_success_skips_fallback():
    written, fallback_written = [], []
    note = copy_with_fallback("pw", written.append, fallback_written.append)
    assert note == Notification(COPY_OK_MESSAGE, "success")
    assert written == ["pw"]
    assert fallback_written == []


def test_fallback_used_when_primary_fails():
    fallback_written = []
    note = copy_with_fallback("pw", _failing, fallback_written.append)
    assert not note.is_error
    assert fallback_written == ["pw"]


def test_both_fail_reports_error():
    note = copy_with_fallback("pw", _failing, _failing)
    assert note.is_error
    assert note.message == COPY_FAILED_MESSAGE


def test_primary_fails_without_fallback():
    note = copy_with_fallback("pw", _failing)
    assert note.kind == "error"
