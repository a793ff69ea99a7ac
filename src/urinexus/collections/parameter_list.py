"""src/urinexus/collections/parameter_list.py

Ordered, name-unique collection of query string parameters.
"""

import logging
from enum import Enum
from typing import Any, Iterable, Iterator, List, Tuple

from urinexus.exceptions import (
    AmbiguousParameterError,
    DuplicateParameterError,
    InvalidArgumentError,
    NullArgumentError,
    ParameterNotFoundError,
)
from urinexus.parameter import Parameter
from urinexus.utils.validators import is_blank, unpack_arguments

__all__ = ["NameComparison", "ParameterCollection", "to_parameter_collection"]

logger = logging.getLogger(__name__)


class NameComparison(Enum):
    """How parameter names are matched when removing."""

    EXACT = "exact"
    IGNORE_CASE = "ignore_case"

    def matches(self, left: str, right: str) -> bool:
        if self is NameComparison.IGNORE_CASE:
            return left.casefold() == right.casefold()
        return left == right


def _check_parameters(
    existing: Tuple[Parameter, ...], incoming: List[Any]
) -> List[Parameter]:
    if any(item is None for item in incoming):
        raise InvalidArgumentError("Cannot add null parameters", field="parameters")
    for item in incoming:
        if not isinstance(item, Parameter):
            raise InvalidArgumentError(
                f"Expected Parameter, got {type(item).__name__}", field="parameters"
            )

    incoming_names = {item.name for item in incoming}
    duplicates = [item.name for item in existing if item.name in incoming_names]
    if duplicates:
        logger.debug("Rejected existing parameter names: %s", duplicates)
        raise DuplicateParameterError(duplicates)

    seen = set()
    for item in incoming:
        if item.name in seen and item.name not in duplicates:
            duplicates.append(item.name)
        seen.add(item.name)
    if duplicates:
        logger.debug("Rejected repeated parameter names: %s", duplicates)
        raise DuplicateParameterError(duplicates, repeated=True)
    return incoming


class ParameterCollection:
    """
    Immutable, ordered collection of parameters with unique names.

    Names are compared case-sensitively. Operations that change the
    content (``with_parameter``, ``with_parameters``, ``without``) return
    a new collection and leave the receiver untouched.

    Accepts parameters either as positional arguments or as a single
    iterable::

        ParameterCollection(Parameter("a", 1), Parameter("b", 2))
        ParameterCollection([Parameter("a", 1), Parameter("b", 2)])
    """

    __slots__ = ("_items",)

    def __init__(self, *parameters: Any):
        self._items: Tuple[Parameter, ...] = tuple(
            _check_parameters((), unpack_arguments(parameters, "parameters"))
        )

    @classmethod
    def _from_trusted(cls, items: Iterable[Parameter]) -> "ParameterCollection":
        collection = cls.__new__(cls)
        collection._items = tuple(items)
        return collection

    @property
    def count(self) -> int:
        """Number of parameters."""
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Parameter]:
        return iter(self._items)

    def __getitem__(self, name: str) -> str:
        """
        Value of the parameter with exactly this name.

        Returns:
            The value, or an empty string if there is no such parameter.

        Raises:
            TypeError: If ``name`` is not a string.
        """
        if not isinstance(name, str):
            raise TypeError(
                f"Parameter names are strings, got {type(name).__name__}"
            )
        for item in self._items:
            if item.name == name:
                return item.value
        return ""

    def with_parameter(self, name: str, value: Any) -> "ParameterCollection":
        """Shortcut for ``with_parameters(Parameter(name, value))``."""
        return self.with_parameters(Parameter(name, value))

    def with_parameters(self, *parameters: Any) -> "ParameterCollection":
        """
        Return a new collection with the given parameters appended.

        Args:
            *parameters: Parameter instances, or a single iterable of them.

        Raises:
            NullArgumentError: If the iterable itself is None.
            InvalidArgumentError: If any of the parameters is None.
            DuplicateParameterError: If a name is already taken or is given
                more than once.
        """
        incoming = _check_parameters(
            self._items, unpack_arguments(parameters, "parameters")
        )
        return self._from_trusted(self._items + tuple(incoming))

    def without(
        self, name: str, comparison: NameComparison = NameComparison.EXACT
    ) -> "ParameterCollection":
        """
        Return a new collection without the parameter called ``name``.

        Raises:
            NullArgumentError: If ``name`` is None or blank.
            ParameterNotFoundError: If no parameter matches.
            AmbiguousParameterError: If several parameters match.
            TypeError: If ``comparison`` is not a NameComparison.
        """
        if not isinstance(comparison, NameComparison):
            raise TypeError(
                f"Expected NameComparison, got {type(comparison).__name__}"
            )
        if is_blank(name):
            raise NullArgumentError("name")

        matches = [
            item for item in self._items if comparison.matches(item.name, name)
        ]
        if not matches:
            logger.debug("Parameter %r not found for removal", name)
            raise ParameterNotFoundError(name)
        if len(matches) > 1:
            names = [item.name for item in matches]
            logger.debug("Parameter %r matches %s", name, names)
            raise AmbiguousParameterError(name, names)
        return self._from_trusted(
            item for item in self._items if item is not matches[0]
        )

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if other is None:
            return False
        if isinstance(other, ParameterCollection):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"ParameterCollection({list(self._items)!r})"

    def __str__(self) -> str:
        return "&".join(str(item) for item in self._items)


def to_parameter_collection(parameters: Iterable[Parameter]) -> ParameterCollection:
    """Copy any iterable of parameters into a new collection."""
    return ParameterCollection(parameters)
