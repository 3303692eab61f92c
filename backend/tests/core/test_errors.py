"""Error hierarchy: codes, statuses and response envelope."""

from qa_api.core.errors import (
    BadRequestError, DatabaseError, ErrorCategory, ErrorSeverity,
    InternalError, InvalidUUIDError, QAError, RequestDataError,
    DEFAULT_INTERNAL_ERROR_MESSAGE,
)


def test_all_errors_share_the_base():
    for err in (
        InvalidUUIDError("x"), DatabaseError("x", "query"),
        BadRequestError("x"), InternalError(),
    ):
        assert isinstance(err, QAError)


def test_internal_error_defaults_to_safe_message():
    err = InternalError()
    assert err.message == DEFAULT_INTERNAL_ERROR_MESSAGE
    assert err.http_status == 500
    assert err.code == "INTERNAL_ERROR"


def test_bad_request_keeps_message():
    err = BadRequestError("Invalid UUID 'x'")
    assert err.message == "Invalid UUID 'x'"
    assert err.http_status == 400
    assert err.category is ErrorCategory.VALIDATION


def test_database_error_message_names_operation():
    err = DatabaseError("Connection or operational error", "execute")
    assert err.message == "Database execute failed: Connection or operational error"
    assert err.operation == "execute"
    assert err.severity is ErrorSeverity.CRITICAL


def test_to_response_envelope():
    body = BadRequestError("nope").to_response()
    assert body["error"]["code"] == "BAD_REQUEST"
    assert body["error"]["message"] == "nope"
    assert body["error"]["category"] == "validation"
    assert body["error"]["severity"] == "error"
    assert "timestamp" in body["error"]


def test_request_data_error_envelope_carries_details():
    details = [{"field": "body.title", "message": "Field required", "type": "missing"}]
    err = RequestDataError(details)
    body = err.to_response()
    assert err.http_status == 400
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert body["error"]["details"] == details
    assert "timestamp" in body["error"]
