"""PostgreSQL DDL dialect."""

from __future__ import annotations

from dbfschema.dialect.base import SQLDialect
from dbfschema.dialect.registry import DialectRegistry
from dbfschema.typemap import TypeSpelling

POSTGRES_TYPES = TypeSpelling(
    integer="integer",
    floating="double precision",
    currency="numeric({precision},{scale})",
    date="date",
    datetime="timestamp with time zone",
    boolean="boolean",
    text="text",
    binary="bytea",
    string="varchar({length})",
)


@DialectRegistry.register
class PostgresDialect(SQLDialect):
    """PostgreSQL: plain ``CREATE TABLE``, timezone-aware timestamps, bytea."""

    @property
    def name(self) -> str:
        return "postgres"

    @property
    def types(self) -> TypeSpelling:
        return POSTGRES_TYPES
