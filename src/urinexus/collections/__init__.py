"""src/urinexus/collections/__init__.py

Collections used by UriNexus values.
"""

from urinexus.collections.parameter_list import (
    NameComparison,
    ParameterCollection,
    to_parameter_collection,
)

__all__ = ["NameComparison", "ParameterCollection", "to_parameter_collection"]
