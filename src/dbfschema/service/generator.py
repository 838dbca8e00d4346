"""Schema generation entry point, reusable by the CLI, MCP and REST API."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from dbfschema.dialect import DialectRegistry, UnsupportedDialectError
from dbfschema.models.table import Column, Table

logger = logging.getLogger("dbfschema.service")

DEFAULT_DIALECT = "activerecord"


def generate_schema(
    table_name: str,
    columns: Sequence[Column],
    dialect: str = DEFAULT_DIALECT,
    fragment_only: bool = False,
) -> str:
    """Render the table's columns as a schema definition in *dialect*.

    Raises :class:`UnsupportedDialectError` before any rendering when no
    dialect is registered under that name.
    """
    try:
        renderer = DialectRegistry.get(dialect)
    except UnsupportedDialectError as exc:
        logger.warning("Rejected schema request: %s", exc)
        raise
    logger.debug(
        "Rendering %s schema for table %r (%d columns, fragment_only=%s)",
        renderer.name, table_name, len(columns), fragment_only,
    )
    return renderer.render(table_name, columns, fragment_only=fragment_only)


def generate_table_schema(
    table: Table, dialect: str = DEFAULT_DIALECT, fragment_only: bool = False
) -> str:
    """Render a :class:`Table` descriptor; see :func:`generate_schema`."""
    return generate_schema(table.name, table.columns, dialect, fragment_only=fragment_only)
