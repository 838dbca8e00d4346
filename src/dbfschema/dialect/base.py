"""Abstract base dialects with capability flags and shared rendering."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from dbfschema.models.table import Column
from dbfschema.typemap import TypeSpelling, spell_type


@dataclass
class DialectCapabilities:
    """Flags describing what a dialect's output looks like."""

    supports_fragment: bool = True
    structured_output: bool = False


class Dialect(ABC):
    """Abstract base for all schema dialects.

    Renderers assume the dialect was already resolved through the registry
    and never fail on column data.
    """

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    def capabilities(self) -> DialectCapabilities:
        return DialectCapabilities()

    @abstractmethod
    def render(
        self, table_name: str, columns: Sequence[Column], fragment_only: bool = False
    ) -> str:
        """Render a complete schema document for the table."""


class TemplateDialect(Dialect):
    """Base for dialects that emit one declaration line per column.

    Subclasses supply the type spellings, the field declaration and the
    header/footer lines wrapped around the fields.
    """

    field_indent = "  "

    @property
    @abstractmethod
    def types(self) -> TypeSpelling: ...

    @abstractmethod
    def field_definition(self, column: Column) -> str:
        """Return the declaration for one column, without indent or newline."""

    @abstractmethod
    def header(self, table_name: str) -> list[str]:
        """Lines emitted before the field declarations."""

    @abstractmethod
    def footer(self) -> list[str]:
        """Lines emitted after the field declarations."""

    def map_type(self, column: Column) -> str:
        return spell_type(column.native_type, column.decimal_count, column.length, self.types)

    def render(
        self, table_name: str, columns: Sequence[Column], fragment_only: bool = False
    ) -> str:
        fields = [f"{self.field_indent}{self.field_definition(c)}" for c in columns]
        if fragment_only and self.capabilities.supports_fragment:
            lines = fields
        else:
            lines = [*self.header(table_name), *fields, *self.footer()]
        return "".join(f"{line}\n" for line in lines)


class SQLDialect(TemplateDialect):
    """``CREATE TABLE`` DDL with comma-terminated column lines."""

    create_statement = "CREATE TABLE"

    def field_definition(self, column: Column) -> str:
        return f"{column.underscored_name} {self.map_type(column)},"

    def header(self, table_name: str) -> list[str]:
        return [f"{self.create_statement} {table_name} ("]

    def footer(self) -> list[str]:
        return [");"]
