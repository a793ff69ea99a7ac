"""utils/validators.py

Validation utilities for UriNexus.
"""

from collections.abc import Iterable
from typing import Any, List, Tuple

from urinexus.exceptions import NullArgumentError


def is_blank(value: Any) -> bool:
    """True for None, empty and whitespace-only strings."""
    return value is None or not str(value).strip()


def unpack_arguments(args: Tuple[Any, ...], argument: str) -> List[Any]:
    """
    Resolve a varargs call into the list of items it stands for.

    A single non-string iterable argument is taken as the sequence of items,
    so ``f(a, b)`` and ``f([a, b])`` are equivalent.

    Args:
        args: Positional arguments as received by the caller.
        argument: Argument name reported when the sequence is None.

    Returns:
        A new list owned by the caller.

    Raises:
        NullArgumentError: If the only argument is None.
    """
    if len(args) == 1:
        (only,) = args
        if only is None:
            raise NullArgumentError(argument)
        if isinstance(only, Iterable) and not isinstance(only, (str, bytes)):
            return list(only)
    return list(args)
