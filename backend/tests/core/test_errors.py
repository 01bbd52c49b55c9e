"""Tests for the error hierarchy: ProviderError shape and REST envelope."""

from datetime import timezone

from greeter.core.errors import (
    ErrorCategory, ErrorContext, ErrorSeverity, GreeterError, ProviderError,
)


def test_provider_error_is_503_external_api():
    err = ProviderError("boom", ProviderError.TIMEOUT)
    assert isinstance(err, GreeterError)
    assert err.http_status == 503
    assert err.code == "JOKE_PROVIDER_ERROR"
    assert err.category == ErrorCategory.EXTERNAL_API
    assert err.severity == ErrorSeverity.CRITICAL
    assert err.failure == "timeout"


def test_provider_error_message_includes_failure_tag():
    err = ProviderError("HTTP 500", ProviderError.HTTP_STATUS)
    assert err.message == "Joke provider unavailable (http_status): HTTP 500"
    assert str(err) == err.message


def test_to_response_envelope():
    ctx = ErrorContext(provider_url="https://icanhazdadjoke.com/")
    body = ProviderError("x", ProviderError.TRANSPORT, context=ctx).to_response()
    error = body["error"]
    assert error["code"] == "JOKE_PROVIDER_ERROR"
    assert error["category"] == "external_api"
    assert error["severity"] == "critical"
    assert error["context"] == {"provider_url": "https://icanhazdadjoke.com/"}
    assert error["timestamp"] == ctx.timestamp.isoformat()


def test_default_context_timestamp_is_utc():
    err = GreeterError("m", "CODE", ErrorCategory.INTERNAL)
    assert err.context.timestamp.tzinfo == timezone.utc
    assert err.http_status == 500
    assert err.severity == ErrorSeverity.ERROR


def test_log_extras_base_error():
    err = GreeterError("m", "CODE", ErrorCategory.INTERNAL)
    assert err.log_extras() == {"error_code": "CODE"}


def test_log_extras_provider_error_adds_failure():
    err = ProviderError("x", ProviderError.MALFORMED_PAYLOAD)
    assert err.log_extras() == {
        "error_code": "JOKE_PROVIDER_ERROR",
        "failure": "malformed_payload",
    }
