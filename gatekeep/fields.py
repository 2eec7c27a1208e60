"""Field names, aliases and data types known to access list conditions."""

from __future__ import annotations

from enum import Enum, IntEnum


class DataType(IntEnum):
    """Shape of a value: a single string or a list of strings."""

    UNKNOWN = 0
    LIST_STR = 1
    STR = 2

    @property
    def label(self) -> str:
        """Short name of the type, or an empty string when it is unknown."""
        return _DATA_TYPE_LABELS.get(self, "")


class MatchStrategy(IntEnum):
    """How a condition compares its values with the input."""

    UNKNOWN = 0
    RESERVED = 1
    EXACT = 2
    PARTIAL = 3
    PREFIX = 4
    SUFFIX = 5
    REGEX = 6
    ALWAYS = 7


_DATA_TYPE_LABELS = {
    DataType.LIST_STR: "list_str",
    DataType.STR: "str",
}

INPUT_DATA_TYPES: dict[str, DataType] = {
    "roles": DataType.LIST_STR,
    "mail": DataType.STR,
    "origin": DataType.STR,
    "name": DataType.STR,
    "realm": DataType.STR,
    "aud": DataType.LIST_STR,
    "scopes": DataType.LIST_STR,
    "org": DataType.LIST_STR,
    "jti": DataType.STR,
    "iss": DataType.STR,
    "sub": DataType.STR,
    "addr": DataType.STR,
    "method": DataType.STR,
    "path": DataType.STR,
}

INPUT_DATA_ALIASES: dict[str, str] = {
    "id": "jti",
    "audience": "aud",
    "expires": "exp",
    "issued": "iat",
    "issuer": "iss",
    "subject": "sub",
    "email": "mail",
    "role": "roles",
    "group": "roles",
    "groups": "roles",
    "scope": "scopes",
    "organization": "org",
    "address": "addr",
    "ip": "addr",
    "ipv4": "addr",
    "http_method": "method",
    "http_path": "path",
}


def resolve_field(name: str) -> tuple[str, DataType]:
    """Return the canonical field name for ``name`` and its data type.

    Aliases are always replaced by their target; the type is
    ``DataType.UNKNOWN`` when the canonical field is not supported.
    """
    canonical = INPUT_DATA_ALIASES.get(name, name)
    return canonical, INPUT_DATA_TYPES.get(canonical, DataType.UNKNOWN)


def get_field_data_type(name: str) -> tuple[str, str]:
    """Return the field name and its type label ("list_str", "str" or "").

    An alias is replaced by its target only when the target has a known type.
    """
    target = INPUT_DATA_ALIASES.get(name)
    if target is not None:
        data_type = INPUT_DATA_TYPES.get(target)
        if data_type is None:
            return name, ""
        return target, data_type.label
    data_type = INPUT_DATA_TYPES.get(name, DataType.UNKNOWN)
    return name, data_type.label