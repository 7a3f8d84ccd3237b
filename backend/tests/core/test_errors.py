"""Error Hierarchy - status codes and response envelope.

Tests:
    - ResourceNotFoundError maps to 404 and keeps a custom message
    - DatabaseError maps to 500 with CRITICAL severity
    - to_response() carries message, code and table context
"""

from coffee_valley.core.errors import (
    CoffeeValleyError, DatabaseError, ErrorCategory, ErrorContext,
    ErrorSeverity, ResourceNotFoundError,
)


def test_not_found_defaults_message():
    err = ResourceNotFoundError("Distributor", "abc")
    assert err.http_status == 404
    assert err.message == "Distributor 'abc' not found"
    assert err.category is ErrorCategory.RESOURCE_NOT_FOUND


def test_not_found_custom_message_and_record_id():
    err = ResourceNotFoundError(
        "Bean", "42", "user not found", ErrorContext(table="beans"),
    )
    response = err.to_response()
    assert response["message"] == "user not found"
    assert response["error"]["context"] == {"table": "beans", "record_id": "42"}


def test_database_error_is_500_and_critical():
    err = DatabaseError("error fetching beans", "query")
    assert err.http_status == 500
    assert err.severity is ErrorSeverity.CRITICAL
    assert err.message == "Database query failed: error fetching beans"
    assert err.operation == "query"


def test_all_errors_share_base():
    assert issubclass(ResourceNotFoundError, CoffeeValleyError)
    assert issubclass(DatabaseError, CoffeeValleyError)


def test_severity_serializes_to_string():
    response = DatabaseError("x", "commit").to_response()
    assert response["error"]["severity"] == "critical"
    assert response["error"]["category"] == "database"


def test_database_error_user_message_replaces_prefixed_text():
    err = DatabaseError("bean price join", "query", user_message="error fetching beans")
    assert err.message == "error fetching beans"
    assert err.to_response()["message"] == "error fetching beans"
    assert err.operation == "query"
