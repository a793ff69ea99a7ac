"""utils/serialization.py

JSON codec for parameters and parameter collections.

A parameter is encoded as ``{"Name": ..., "Value": ...}`` and a collection
as an array of those objects, in order. Decoding always goes through the
ordinary constructors, so decoded values are validated like any other.
"""

import json
import logging
from typing import Any, Dict, List

from urinexus.collections.parameter_list import ParameterCollection
from urinexus.exceptions import FormatError
from urinexus.parameter import Parameter

logger = logging.getLogger(__name__)

NAME_KEY = "Name"
VALUE_KEY = "Value"


def encode_parameter(parameter: Parameter) -> Dict[str, str]:
    """Encode a parameter as a ``Name``/``Value`` object."""
    return {NAME_KEY: parameter.name, VALUE_KEY: parameter.value}


def decode_parameter(data: Any) -> Parameter:
    """
    Rebuild a parameter from its object form.

    Missing keys default to an empty string, which the Parameter
    constructor then rejects. Unknown keys are ignored.

    Raises:
        FormatError: If ``data`` is not an object or a field is not a string.
        ValidationError: If name or value is blank.
    """
    if not isinstance(data, dict):
        logger.debug("Expected object, got %s", type(data).__name__)
        raise FormatError(f"Expected object, got {type(data).__name__}")

    fields = {}
    for key in (NAME_KEY, VALUE_KEY):
        value = data.get(key, "")
        if not isinstance(value, str):
            logger.debug(
                "Expected string for %r, got %s", key, type(value).__name__
            )
            raise FormatError(
                f"Expected string for '{key}', got {type(value).__name__}"
            )
        fields[key] = value
    return Parameter(fields[NAME_KEY], fields[VALUE_KEY])


def encode_parameters(parameters: ParameterCollection) -> List[Dict[str, str]]:
    """Encode a collection as an array of parameter objects."""
    return [encode_parameter(parameter) for parameter in parameters]


def decode_parameters(data: Any) -> ParameterCollection:
    """
    Rebuild a collection from its array form.

    ``null`` entries are skipped.

    Raises:
        FormatError: If ``data`` or one of its entries has the wrong shape.
        DuplicateParameterError: If two entries share a name.
    """
    if not isinstance(data, list):
        logger.debug("Expected array, got %s", type(data).__name__)
        raise FormatError(f"Expected array, got {type(data).__name__}")
    return ParameterCollection(
        [decode_parameter(item) for item in data if item is not None]
    )


class UriNexusJSONEncoder(json.JSONEncoder):
    """JSON encoder aware of Parameter and ParameterCollection."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Parameter):
            return encode_parameter(o)
        if isinstance(o, ParameterCollection):
            return encode_parameters(o)
        return super().default(o)


def to_json(data: Any) -> str:
    """Serializes data to a JSON string."""
    return json.dumps(data, cls=UriNexusJSONEncoder)


def _load(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        logger.debug("Malformed JSON: %s", exc)
        raise FormatError(f"Malformed JSON: {exc.msg}") from exc


def parameter_from_json(text: str) -> Parameter:
    """Deserialize a parameter from a JSON string."""
    return decode_parameter(_load(text))


def parameters_from_json(text: str) -> ParameterCollection:
    """Deserialize a parameter collection from a JSON string."""
    return decode_parameters(_load(text))
