"""src/urinexus/exceptions.py

UriNexus Exceptions hierarchy.
"""

from typing import Optional, Sequence, Tuple


class UriNexusError(Exception):
    """Base exception for all UriNexus errors."""


class ValidationError(UriNexusError, ValueError):
    """
    A value was assigned blank or missing content where content is required.

    Attributes:
        field: Name of the offending field or argument, if known.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class NullArgumentError(ValidationError):
    """A required argument was None."""

    def __init__(self, argument: str):
        super().__init__(f"Argument '{argument}' must not be None", field=argument)
        self.argument = argument


class InvalidArgumentError(ValidationError):
    """A supplied value violated a local precondition."""


class DuplicateParameterError(UriNexusError, ValueError):
    """
    Adding parameters would break the name-uniqueness of a collection.

    Attributes:
        names: Conflicting parameter names, in the order they were found.
        repeated: True when the names are repeated within the added
            parameters rather than already present in the collection.
    """

    def __init__(self, names: Sequence[str], repeated: bool = False):
        self.names: Tuple[str, ...] = tuple(names)
        self.repeated = repeated
        if repeated and len(self.names) == 1:
            message = (
                f"Cannot add parameter '{self.names[0]}': "
                "the name is given more than once"
            )
        elif repeated:
            message = (
                "Cannot add parameters: names "
                f"{', '.join(self.names)} are given more than once"
            )
        elif len(self.names) == 1:
            message = (
                f"Cannot add parameter '{self.names[0]}': "
                "a parameter with that name already exists"
            )
        else:
            message = (
                "Cannot add parameters: parameters named "
                f"{', '.join(self.names)} already exist"
            )
        super().__init__(message)


class ParameterNotFoundError(UriNexusError, LookupError):
    """A removal targeted a parameter name absent from the collection."""

    def __init__(self, name: str):
        super().__init__(
            f"Cannot remove parameter '{name}': no parameter with that name exists"
        )
        self.name = name


class AmbiguousParameterError(UriNexusError, LookupError):
    """A removal by name matched more than one parameter."""

    def __init__(self, name: str, matches: Sequence[str]):
        self.name = name
        self.matches: Tuple[str, ...] = tuple(matches)
        super().__init__(
            f"Cannot remove parameter '{name}': it matches "
            f"{', '.join(self.matches)}"
        )


class FormatError(UriNexusError, ValueError):
    """Serialized data does not have the expected object/array shape."""
