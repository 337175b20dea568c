"""
Mapping of native Python types to OpenAPI schema primitives.

Each FormatType member carries the schema type name, the optional schema
format and the Python type it stands for. Lookup is an exact match first,
then one level of base classes.
"""

import datetime
import enum
from typing import Any, Optional


class Int64(int):
    """Marker type for integers documented as int64."""


class Float32(float):
    """Marker type for numbers documented as single precision."""


class FormatType(enum.Enum):
    """Schema (type, format) pairs keyed by the native type they describe."""

    INT32 = ("integer", "int32", int)
    INT64 = ("integer", "int64", Int64)
    FLOAT = ("number", "float", Float32)
    DOUBLE = ("number", "double", float)
    STRING = ("string", None, str)
    BYTE = ("string", "byte", bytes)
    BOOLEAN = ("boolean", None, bool)
    DATE = ("string", "date", datetime.date)
    ENUM = ("string", None, enum.Enum)

    def __init__(self, type_name: str, format: Optional[str], native_type: type):
        self.type_name = type_name
        self.format = format
        self.native_type = native_type

    def to_schema(self) -> dict:
        """Return the schema fragment for this format, omitting an absent format."""
        schema = {"type": self.type_name}
        if self.format is not None:
            schema["format"] = self.format
        return schema


_BY_NATIVE_TYPE = {member.native_type: member for member in FormatType}


def resolve(native_type: Any) -> Optional[FormatType]:
    """Resolve a native type to its FormatType.

    Args:
        native_type: The Python class to look up

    Returns:
        The matching FormatType, or None when neither the type nor one of its
        direct base classes is in the table
    """
    if not isinstance(native_type, type):
        return None

    found = _BY_NATIVE_TYPE.get(native_type)
    if found is not None:
        return found

    # Only the immediate bases are consulted, not the whole MRO
    for base in native_type.__bases__:
        found = _BY_NATIVE_TYPE.get(base)
        if found is not None:
            return found
    return None
