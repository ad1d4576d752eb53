import pytest  # noqa: F401
from numify.utils.errors import error_payload, ERROR_CODES, BatchTooLarge, DomainError, InvalidNumber


def test_error_payload_basic():
    p = error_payload(ERROR_CODES["validation"], "Invalid data", details={
                      "field": "x"}, path="/api/v1/numify")
    assert p["status"] == "error"
    assert p["error"]["code"] == ERROR_CODES["validation"]
    assert p["error"]["details"] == {"field": "x"}
    assert p["path"] == "/api/v1/numify"


def test_error_payload_omits_empty_fields():
    p = error_payload(ERROR_CODES["internal"], "boom")
    assert "details" not in p["error"]
    assert "path" not in p


def test_invalid_number_is_type_error():
    exc = InvalidNumber("12")
    assert isinstance(exc, DomainError)
    assert isinstance(exc, TypeError)
    assert exc.code == ERROR_CODES["invalid_number"]
    assert "str" in exc.message


def test_batch_too_large_message():
    exc = BatchTooLarge(600, 500)
    assert ERROR_CODES["batch_too_large"] == exc.code
    assert "exceeds limit" in exc.message
    assert exc.details == {"size": 600, "limit": 500}
