"""Tests for parsing_strings error types."""

from parsing_strings.errors import ApplicationError, InvalidArgumentError


def test_application_error_defaults_to_docstring():
    err = ApplicationError()
    assert "parsing_strings errors" in str(err)


def test_application_error_stores_context():
    err = ApplicationError("boom", field="x", value=123)
    assert err.field == "x"
    assert err.value == 123


def test_missing_value_names_parameter():
    err = InvalidArgumentError.missing_value("text")
    assert err.param_name == "text"
    assert "'text'" in str(err)
    assert isinstance(err, ValueError)
    assert isinstance(err, ApplicationError)


def test_invalid_argument_default_message():
    assert str(InvalidArgumentError(param_name="limits")) == "Invalid argument: limits"
