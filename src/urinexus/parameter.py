"""src/urinexus/parameter.py

Query string parameter value object.
"""

from typing import Any, Tuple

from urinexus.exceptions import ValidationError
from urinexus.utils.validators import is_blank

__all__ = ["Parameter"]

_UNSET: Any = object()


class Parameter:
    """
    A validated ``name=value`` pair.

    The value may be of any type; it is kept in its string form. Both name
    and value are checked on every construction, including ``replace``.
    """

    __slots__ = ("_name", "_value")

    def __init__(self, name: str, value: Any):
        if not isinstance(name, str) or is_blank(name):
            raise ValidationError("Parameter name must not be empty", field="name")
        if is_blank(value):
            raise ValidationError("Parameter value must not be empty", field="value")
        self._name = name
        self._value = str(value)

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> str:
        return self._value

    def replace(self, name: str = _UNSET, value: Any = _UNSET) -> "Parameter":
        """Return a copy with the given fields changed."""
        return Parameter(
            self._name if name is _UNSET else name,
            self._value if value is _UNSET else value,
        )

    def _key(self) -> Tuple[str, str]:
        return (self._name, self._value)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Parameter):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"Parameter(name={self._name!r}, value={self._value!r})"

    def __str__(self) -> str:
        return f"{self._name}={self._value}"
