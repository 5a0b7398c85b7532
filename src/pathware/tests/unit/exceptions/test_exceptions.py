# ABOUTME: Unit tests for the pathware exception hierarchy
# ABOUTME: Verifies message/code/details handling and the inheritance relationships

import pytest

from pathware.exceptions import (
    ConfigurationException,
    DispatchCancelledError,
    MiddlewareConfigurationError,
    MiddlewareError,
    MiddlewareExecutionError,
    MiddlewareValidationError,
    PathPatternError,
    PathwareException,
    ValidationException,
)


class TestPathwareException:
    """Test cases for the base exception."""

    @pytest.mark.unit
    def test_message_only(self):
        error = PathwareException("something failed")

        assert str(error) == "something failed"
        assert error.message == "something failed"
        assert error.code is None
        assert error.details == {}

    @pytest.mark.unit
    def test_code_and_details(self):
        details = {"pattern": "/a"}
        error = PathwareException("bad", code="BAD", details=details)

        assert error.code == "BAD"
        assert error.details == {"pattern": "/a"}

    @pytest.mark.unit
    def test_details_are_copied(self):
        details = {"a": 1}
        error = PathwareException("x", details=details)
        details["b"] = 2

        assert error.details == {"a": 1}


class TestMiddlewareExceptionHierarchy:
    """Test cases for the middleware exception hierarchy."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "exc_class",
        [
            MiddlewareConfigurationError,
            PathPatternError,
            MiddlewareExecutionError,
            MiddlewareValidationError,
            DispatchCancelledError,
        ],
    )
    def test_all_are_middleware_errors(self, exc_class):
        error = exc_class("x", code="C")

        assert isinstance(error, MiddlewareError)
        assert isinstance(error, PathwareException)
        assert error.code == "C"

    @pytest.mark.unit
    def test_configuration_errors(self):
        error = PathPatternError("bad pattern")

        assert isinstance(error, MiddlewareConfigurationError)
        assert isinstance(error, ConfigurationException)

    @pytest.mark.unit
    def test_execution_error_is_not_a_configuration_error(self):
        assert not isinstance(MiddlewareExecutionError("x"), ConfigurationException)

    @pytest.mark.unit
    def test_validation_exception_is_separate(self):
        assert not isinstance(ValidationException("x"), MiddlewareError)

    @pytest.mark.unit
    def test_execution_error_keeps_cause(self):
        cause = RuntimeError("boom")
        with pytest.raises(MiddlewareExecutionError) as exc_info:
            try:
                raise cause
            except RuntimeError as e:
                raise MiddlewareExecutionError("wrapped", code="MIDDLEWARE_FAILED") from e

        assert exc_info.value.__cause__ is cause
