"""src/urinexus/url.py

URL value object and its canonical string form.
"""

import logging
from typing import Any, Iterable, Optional, Tuple

from urinexus.collections.parameter_list import (
    ParameterCollection,
    to_parameter_collection,
)
from urinexus.exceptions import InvalidArgumentError
from urinexus.parameter import Parameter
from urinexus.utils.validators import is_blank, unpack_arguments

__all__ = ["Url", "UserInfo", "as_string"]

logger = logging.getLogger(__name__)

_UNSET: Any = object()


class UserInfo:
    """Credentials rendered before the host as ``name:password``."""

    __slots__ = ("_name", "_password")

    def __init__(self, name: str, password: str):
        self._name = name
        self._password = password

    @property
    def name(self) -> str:
        return self._name

    @property
    def password(self) -> str:
        return self._password

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, UserInfo):
            return NotImplemented
        return (self._name, self._password) == (other._name, other._password)

    def __hash__(self) -> int:
        return hash((self._name, self._password))

    def __repr__(self) -> str:
        return f"UserInfo(name={self._name!r}, password=...)"

    def __str__(self) -> str:
        return f"{self._name}:{self._password}"


def _normalize_scheme(value: Optional[str]) -> str:
    if value is None:
        return ""
    return value.rstrip("/:").strip(" ")


def _normalize_host(value: Optional[str]) -> str:
    if value is None:
        return ""
    return value.strip("/ ")


def _normalize_fragment(value: Optional[str]) -> str:
    if value is None:
        return ""
    return value.strip("# ")


def _normalize_segment(segment: Optional[str]) -> str:
    if segment is None:
        raise InvalidArgumentError("Path segments must not be None", field="path")
    return segment.strip("/ ")


def _normalize_path(value: Optional[Iterable[str]]) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    # snapshot first so later changes to the caller's sequence are not seen
    return tuple(_normalize_segment(segment) for segment in list(value))


def _normalize_parameters(
    value: Optional[Iterable[Parameter]],
) -> ParameterCollection:
    if value is None:
        return ParameterCollection()
    return to_parameter_collection(value)


class Url:
    """
    Immutable URL assembled from its components.

    Every field is normalized when it is set, either at construction or
    through ``replace``. Methods that "modify" the URL return a new
    instance.

    Example::

        url = Url(scheme="https", host="www.example.com", path=["api", "v1"])
        url = url.with_parameter("page", 2)
        str(url)  # 'https://www.example.com/api/v1?page=2'
    """

    __slots__ = (
        "_scheme",
        "_user_info",
        "_host",
        "_port",
        "_path",
        "_parameters",
        "_fragment",
    )

    def __init__(
        self,
        *,
        scheme: Optional[str] = None,
        user_info: Optional[UserInfo] = None,
        host: Optional[str] = None,
        port: Optional[int] = None,
        path: Optional[Iterable[str]] = None,
        parameters: Optional[Iterable[Parameter]] = None,
        fragment: Optional[str] = None,
    ):
        self._scheme = _normalize_scheme(scheme)
        self._user_info = user_info
        self._host = _normalize_host(host)
        self._port = port
        self._path = _normalize_path(path)
        self._parameters = _normalize_parameters(parameters)
        self._fragment = _normalize_fragment(fragment)

    @property
    def scheme(self) -> str:
        """Ex: ``http``."""
        return self._scheme

    @property
    def user_info(self) -> Optional[UserInfo]:
        return self._user_info

    @property
    def host(self) -> str:
        """Ex: ``www.example.com``."""
        return self._host

    @property
    def port(self) -> Optional[int]:
        return self._port

    @property
    def path(self) -> Tuple[str, ...]:
        return self._path

    @property
    def parameters(self) -> ParameterCollection:
        return self._parameters

    @property
    def fragment(self) -> str:
        return self._fragment

    def replace(
        self,
        *,
        scheme: Optional[str] = _UNSET,
        user_info: Optional[UserInfo] = _UNSET,
        host: Optional[str] = _UNSET,
        port: Optional[int] = _UNSET,
        path: Optional[Iterable[str]] = _UNSET,
        parameters: Optional[Iterable[Parameter]] = _UNSET,
        fragment: Optional[str] = _UNSET,
    ) -> "Url":
        """Return a copy with the given fields changed and normalized."""
        return Url(
            scheme=self._scheme if scheme is _UNSET else scheme,
            user_info=self._user_info if user_info is _UNSET else user_info,
            host=self._host if host is _UNSET else host,
            port=self._port if port is _UNSET else port,
            path=self._path if path is _UNSET else path,
            parameters=self._parameters if parameters is _UNSET else parameters,
            fragment=self._fragment if fragment is _UNSET else fragment,
        )

    def with_parameter(self, name: str, value: Any) -> "Url":
        """Shortcut for ``with_parameters(Parameter(name, value))``."""
        return self.with_parameters(Parameter(name, value))

    def with_parameters(self, *parameters: Any) -> "Url":
        """
        Return a copy with the given parameters appended.

        Accepts the same arguments as
        :meth:`ParameterCollection.with_parameters` and raises the same
        errors.
        """
        return self.replace(
            parameters=self._parameters.with_parameters(*parameters)
        )

    def append_path(self, *segments: Any) -> "Url":
        """
        Return a copy with path segments appended.

        Segments are trimmed of slashes and spaces before being added.

        Args:
            *segments: Path segments, or a single iterable of them.

        Returns:
            A new Url, or this one if there is nothing to append.

        Raises:
            NullArgumentError: If the iterable itself is None.
            InvalidArgumentError: If a segment is blank once trimmed.
        """
        items = unpack_arguments(segments, "path")
        trimmed = [None if item is None else item.strip(" /") for item in items]
        if any(is_blank(item) for item in trimmed):
            logger.debug("Rejected empty path segment in %r", items)
            raise InvalidArgumentError(
                "Cannot append an empty path segment", field="path"
            )

        if not trimmed:
            return self
        return self.replace(path=self._path + tuple(trimmed))

    def _key(self) -> Tuple[Any, ...]:
        return (
            self._scheme.lower(),
            self._user_info,
            self._host.lower(),
            self._port,
            self._path,
            self._parameters,
            self._fragment,
        )

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Url):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"Url({str(self)!r})"

    def __str__(self) -> str:
        output = ""
        if self._scheme:
            output += f"{self._scheme}://"

        if self._user_info is not None:
            output += f"{self._user_info}@"

        if self._host:
            output += self._host
            if self._port is not None:
                output += f":{self._port}"
            output += "/"

        if self._path:
            output += "/".join(self._path)

        if self._parameters:
            output += f"?{self._parameters}" if output else str(self._parameters)

        if self._fragment:
            output += f"#{self._fragment}" if output else self._fragment

        return output


def as_string(url: Optional[Url]) -> str:
    """String form of ``url``; an empty string when it is None."""
    return "" if url is None else str(url)
