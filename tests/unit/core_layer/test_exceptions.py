"""
Unit Tests for the Exception Hierarchy

Tests structured details, chaining helpers and the class hierarchy.
"""

import pytest

from prometheus_query.core.exceptions import (
    ArityMismatchError,
    ConfigurationError,
    DecodeError,
    EncodeError,
    InvalidSampleValueError,
    MalformedEnvelopeError,
    MalformedJsonError,
    PromBaseError,
    QueryFailedError,
    SchemaViolationError,
    TransportConnectionError,
    TransportError,
    TransportStatusError,
    TransportTimeoutError,
    UnrecognizedDataShapeError,
    UnrecognizedResultTypeError,
)


@pytest.mark.unit
class TestExceptionHierarchy:
    """Test that every error can be caught through its base class."""

    @pytest.mark.parametrize(
        "exc_class",
        [
            MalformedJsonError,
            MalformedEnvelopeError,
            UnrecognizedDataShapeError,
            UnrecognizedResultTypeError,
            InvalidSampleValueError,
            ArityMismatchError,
            SchemaViolationError,
        ],
    )
    def test_decode_errors(self, exc_class):
        assert issubclass(exc_class, DecodeError)
        assert issubclass(exc_class, PromBaseError)

    @pytest.mark.parametrize(
        "exc_class",
        [TransportConnectionError, TransportTimeoutError, TransportStatusError],
    )
    def test_transport_errors(self, exc_class):
        assert issubclass(exc_class, TransportError)
        assert not issubclass(exc_class, DecodeError)

    @pytest.mark.parametrize("exc_class", [EncodeError, ConfigurationError, QueryFailedError])
    def test_other_errors_are_not_decode_errors(self, exc_class):
        assert issubclass(exc_class, PromBaseError)
        assert not issubclass(exc_class, DecodeError)


@pytest.mark.unit
class TestPromBaseError:
    """Test the base exception's structured helpers."""

    def test_message_and_details(self):
        error = InvalidSampleValueError("Invalid sample value 'abc'", details={"token": "abc"})

        assert str(error) == "Invalid sample value 'abc'"
        assert error.details == {"token": "abc"}

    def test_details_are_copied(self):
        details = {"token": "abc"}
        error = InvalidSampleValueError("bad", details=details)
        details["token"] = "changed"

        assert error.details["token"] == "abc"

    def test_to_dict(self):
        error = SchemaViolationError("Missing field", details={"field": "url"})

        assert error.to_dict() == {
            "error_type": "SchemaViolationError",
            "message": "Missing field",
            "details": {"field": "url"},
        }

    def test_with_suggestion_and_context_chain(self):
        error = TransportConnectionError("Cannot connect").with_suggestion("Check PROMETHEUS_URL").with_context(
            url="http://localhost:9090"
        )

        assert error.details == {"suggestion": "Check PROMETHEUS_URL", "url": "http://localhost:9090"}

    def test_from_exception(self):
        original = ValueError("boom")

        error = TransportConnectionError.from_exception(original, message="Cannot connect", url="http://x")

        assert isinstance(error, TransportConnectionError)
        assert error.message == "Cannot connect"
        assert error.details == {
            "original_error": "ValueError",
            "original_message": "boom",
            "url": "http://x",
        }

    def test_from_exception_defaults_to_original_message(self):
        assert ConfigurationError.from_exception(KeyError("x")).message == str(KeyError("x"))

    def test_repr(self):
        assert repr(EncodeError("nope")) == "EncodeError(message='nope')"
        assert "details={'found': 'int'}" in repr(EncodeError("nope", details={"found": "int"}))


@pytest.mark.unit
class TestQueryFailedError:
    """Test the error raised for error envelopes."""

    def test_attributes(self):
        error = QueryFailedError("parse error", error_type="bad_data", warnings=["w"])

        assert error.error_type == "bad_data"
        assert error.warnings == ["w"]
        assert error.details["error_type"] == "bad_data"
        assert str(error) == "parse error"

    def test_warnings_default_to_empty(self):
        assert QueryFailedError("timed out", error_type="timeout").warnings == []
