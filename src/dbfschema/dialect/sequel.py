"""Sequel migration dialect."""

from __future__ import annotations

from dataclasses import replace

from dbfschema.dialect.activerecord import RUBY_TYPES
from dbfschema.dialect.base import TemplateDialect
from dbfschema.dialect.registry import DialectRegistry
from dbfschema.models.table import Column
from dbfschema.typemap import TypeSpelling

SEQUEL_TYPES = replace(RUBY_TYPES, string=":varchar, :size => {length}")


@DialectRegistry.register
class SequelDialect(TemplateDialect):
    """``Sequel.migration`` with a ``create_table`` block.

    Fragment mode emits only the ``column`` lines.
    """

    field_indent = "      "

    @property
    def name(self) -> str:
        return "sequel"

    @property
    def types(self) -> TypeSpelling:
        return SEQUEL_TYPES

    def field_definition(self, column: Column) -> str:
        return f"column :{column.underscored_name}, {self.map_type(column)}"

    def header(self, table_name: str) -> list[str]:
        return [
            "Sequel.migration do",
            "  change do",
            f"    create_table(:{table_name}) do",
        ]

    def footer(self) -> list[str]:
        return ["    end", "  end", "end"]
