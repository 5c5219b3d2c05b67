# Flagkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `FlagType`, an enum tagging the four value kinds a flag can hold.

The enum value doubles as the stable type name reported by
`FlagValue.type_name()` and shown in help output. Config-friendly aliases
are accepted so that declaration files can say `bool` or `list` instead of
the canonical names.

Example:
    FlagType("boolean")  → FlagType.BOOLEAN
    FlagType("bool")     → FlagType.BOOLEAN (via alias)
    FlagType("list")     → FlagType.STRING_LIST (via alias)
"""
from __future__ import annotations

from enum import Enum


class FlagType(Enum):
    """
    The closed set of flag value kinds.

    Members:
        BOOLEAN: `True`/`False`; may be set implicitly by a bare flag.
        STRING: Any string, stored verbatim.
        NUMBER: A floating-point number.
        STRING_LIST: An ordered list of strings; each occurrence appends.

    Aliases:
        - "bool" → "boolean"
        - "str" → "string"
        - "float", "int", "num" → "number"
        - "list", "strings", "string_list" → "string[]"
    """

    BOOLEAN = "boolean"
    STRING = "string"
    NUMBER = "number"
    STRING_LIST = "string[]"

    @classmethod
    def choices(cls) -> list[FlagType]:
        """Return a list of all flag types."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "bool": "boolean",
            "str": "string",
            "float": "number",
            "int": "number",
            "num": "number",
            "list": "string[]",
            "strings": "string[]",
            "string_list": "string[]",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> FlagType:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        """Return the string representation of the flag type."""
        return self.value
