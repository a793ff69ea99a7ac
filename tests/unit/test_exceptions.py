"""tests/unit/test_exceptions.py"""

import pytest

from urinexus.exceptions import (
    AmbiguousParameterError,
    DuplicateParameterError,
    FormatError,
    InvalidArgumentError,
    NullArgumentError,
    ParameterNotFoundError,
    UriNexusError,
    ValidationError,
)


def test_exception_hierarchy():
    """Verify the inheritance structure of UriNexus exceptions."""
    assert issubclass(ValidationError, UriNexusError)
    assert issubclass(ValidationError, ValueError)
    assert issubclass(NullArgumentError, ValidationError)
    assert issubclass(InvalidArgumentError, ValidationError)
    assert issubclass(DuplicateParameterError, UriNexusError)
    assert issubclass(ParameterNotFoundError, LookupError)
    assert issubclass(FormatError, ValueError)


def test_null_argument_names_argument():
    """Verify that NullArgumentError identifies the argument."""
    error = NullArgumentError("parameters")
    assert error.argument == "parameters"
    assert error.field == "parameters"
    assert "parameters" in str(error)


def test_duplicate_single_message():
    """Verify the message for one conflicting name."""
    error = DuplicateParameterError(["age"])
    assert str(error) == (
        "Cannot add parameter 'age': a parameter with that name already exists"
    )


def test_duplicate_multiple_message():
    """Verify multiple names are joined with a comma and a space."""
    error = DuplicateParameterError(["age", "status"])
    assert error.names == ("age", "status")
    assert str(error) == (
        "Cannot add parameters: parameters named age, status already exist"
    )


def test_not_found_message():
    """Verify the message names the missing parameter."""
    error = ParameterNotFoundError("age")
    assert str(error) == (
        "Cannot remove parameter 'age': no parameter with that name exists"
    )


@pytest.mark.parametrize(
    "exception_class",
    [UriNexusError, ValidationError, InvalidArgumentError, FormatError],
)
def test_generic_exceptions_accept_message(exception_class):
    """Verify that generic exceptions can be raised with a message."""
    message = f"Testing {exception_class.__name__}"
    with pytest.raises(exception_class) as exc_info:
        raise exception_class(message)
    assert message in str(exc_info.value)


def test_duplicate_repeated_messages():
    """Verify names repeated among the added parameters get their own wording."""
    single = DuplicateParameterError(["b"], repeated=True)
    assert single.repeated
    assert str(single) == "Cannot add parameter 'b': the name is given more than once"
    multiple = DuplicateParameterError(["b", "c"], repeated=True)
    assert str(multiple) == (
        "Cannot add parameters: names b, c are given more than once"
    )


def test_ambiguous_message():
    """Verify every matching name is listed."""
    error = AmbiguousParameterError("Age", ["age", "AGE"])
    assert isinstance(error, LookupError)
    assert error.matches == ("age", "AGE")
    assert str(error) == "Cannot remove parameter 'Age': it matches age, AGE"
