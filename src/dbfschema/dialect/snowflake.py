"""Snowflake DDL dialect."""

from __future__ import annotations

from dbfschema.dialect.base import SQLDialect
from dbfschema.dialect.registry import DialectRegistry
from dbfschema.typemap import TypeSpelling

SNOWFLAKE_TYPES = TypeSpelling(
    integer="integer",
    floating="float",
    currency="decimal({precision},{scale})",
    date="date",
    datetime="datetime",
    boolean="boolean",
    text="text",
    binary="binary",
    string="varchar({length})",
)


@DialectRegistry.register
class SnowflakeDialect(SQLDialect):
    """Snowflake: ``create or replace table``, generic ``float``/``datetime``."""

    create_statement = "create or replace table"

    @property
    def name(self) -> str:
        return "snowflake"

    @property
    def types(self) -> TypeSpelling:
        return SNOWFLAKE_TYPES
