"""Table and column descriptors for xBase tables."""

from __future__ import annotations

import re
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

_CAMEL_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")
_SEPARATORS = re.compile(r"[\s\-]+")


class NativeType(StrEnum):
    """xBase field type codes."""

    NUMERIC = "N"
    FLOAT = "F"
    INTEGER = "I"
    CURRENCY = "Y"
    DATE = "D"
    DATETIME = "T"
    LOGICAL = "L"
    MEMO = "M"
    BINARY = "B"
    CHARACTER = "C"


def underscore(name: str) -> str:
    """Convert a column name to lower-case, underscore-separated form.

    ``"First Name"`` -> ``first_name``, ``"lastUpdate"`` -> ``last_update``.
    """
    result = _CAMEL_BOUNDARY.sub(r"\1_\2", name.strip())
    return _SEPARATORS.sub("_", result).lower()


class Column(BaseModel):
    """Metadata for one field of an xBase table.

    ``native_type`` holds the raw type code so that codes outside
    :class:`NativeType` survive and fall back to the character rule.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    native_type: str = Field(NativeType.CHARACTER.value, alias="type")
    length: int = Field(0, ge=0)
    decimal_count: int = Field(0, ge=0, alias="decimal")

    @property
    def underscored_name(self) -> str:
        return underscore(self.name)

    def to_dict(self) -> dict[str, Any]:
        """Plain dict export used by the JSON descriptor dialect."""
        return {
            "name": self.name,
            "type": self.native_type,
            "length": self.length,
            "decimal": self.decimal_count,
        }


class Table(BaseModel):
    """A named table with an ordered list of columns."""

    model_config = ConfigDict(frozen=True)

    name: str
    columns: list[Column] = []
