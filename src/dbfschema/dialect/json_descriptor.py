"""JSON column descriptor dialect."""

from __future__ import annotations

import json
from collections.abc import Sequence

from dbfschema.dialect.base import Dialect, DialectCapabilities
from dbfschema.dialect.registry import DialectRegistry
from dbfschema.models.table import Column


@DialectRegistry.register
class JSONDialect(Dialect):
    """Structural export: a JSON array of column descriptors.

    Native type codes are exported as-is; no type mapping applies.
    """

    @property
    def name(self) -> str:
        return "json"

    @property
    def capabilities(self) -> DialectCapabilities:
        return DialectCapabilities(supports_fragment=False, structured_output=True)

    def render(
        self, table_name: str, columns: Sequence[Column], fragment_only: bool = False
    ) -> str:
        return json.dumps(
            [c.to_dict() for c in columns], separators=(",", ":"), ensure_ascii=False
        )
