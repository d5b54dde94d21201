"""Error hierarchy: status codes, envelopes, and detail exposure."""

from catalog.core.errors import (
    CatalogError, ErrorCategory, ErrorContext, ErrorSeverity,
    StartupError, StorageError, ValidationError,
)


def test_validation_error_is_400():
    err = ValidationError("Partners must be an array")
    assert err.http_status == 400
    assert err.code == "VALIDATION_ERROR"
    assert err.category == ErrorCategory.VALIDATION
    assert err.to_response() == {
        "success": False, "error": "Partners must be an array",
    }


def test_validation_error_response_includes_field():
    err = ValidationError("bad", field="0.name")
    assert err.to_response()["field"] == "0.name"


def test_storage_error_is_500_and_critical():
    err = StorageError("Failed to fetch partners", "GET /api/partners")
    assert err.http_status == 500
    assert err.severity == ErrorSeverity.CRITICAL
    assert err.context.operation == "GET /api/partners"


def test_storage_error_hides_cause_by_default():
    err = StorageError(
        "Failed to fetch partners", "GET /api/partners",
        ErrorContext(debug_info={"cause": "password authentication failed"}),
    )
    assert err.to_response() == {
        "success": False, "error": "Failed to fetch partners",
    }


def test_storage_error_shows_cause_when_requested():
    err = StorageError(
        "Failed to fetch partners", "GET /api/partners",
        ErrorContext(debug_info={"cause": "timeout"}),
    )
    assert err.to_response(include_details=True)["details"] == "timeout"


def test_storage_error_keeps_existing_operation():
    err = StorageError("x", "fallback", ErrorContext(operation="commit"))
    assert err.context.operation == "commit"


def test_log_extra_carries_timing():
    err = StorageError(
        "x", "PUT /api/partners",
        ErrorContext(elapsed_ms=12.5, record_count=3),
    )
    assert err.log_extra() == {
        "error_code": "STORAGE_ERROR",
        "operation": "PUT /api/partners",
        "elapsed_ms": 12.5,
        "record_count": 3,
    }


def test_all_errors_share_base():
    assert issubclass(ValidationError, CatalogError)
    assert issubclass(StorageError, CatalogError)
    assert issubclass(StartupError, CatalogError)
    assert StartupError("db down").code == "STARTUP_ERROR"
