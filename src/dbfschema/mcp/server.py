"""FastMCP server exposing dbfschema's schema generation as MCP tools.

Run via::

    dbfschema-mcp                       # reads .env (default: stdio)
    MCP_TRANSPORT=http dbfschema-mcp    # streamable HTTP on port 9000
"""

from __future__ import annotations

import logging
from dataclasses import asdict

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from dbfschema import __version__
from dbfschema.dialect import DialectRegistry, UnsupportedDialectError
from dbfschema.parser.loader import DescriptorError, DescriptorLoader
from dbfschema.service.generator import generate_table_schema
from dbfschema.settings import Settings

logger = logging.getLogger("dbfschema.mcp")

mcp = FastMCP("dbfschema")


@mcp.tool
def generate_schema(
    descriptor: str,
    dialect: str | None = None,
    fragment_only: bool = False,
) -> str:
    """Render an xBase table descriptor as a schema definition.

    The descriptor is YAML or JSON with a ``name`` and a ``columns`` list;
    each column has ``name``, ``type`` (xBase code: N F I Y D T L M B C),
    ``length`` and ``decimal``.

    Args:
        descriptor: Table descriptor as YAML or JSON text.
        dialect: Target dialect (activerecord, sequel, snowflake, postgres, json);
            the configured default when omitted.
        fragment_only: Emit only the column definitions, without the
            surrounding migration or CREATE TABLE wrapper.
    """
    if dialect is None:
        dialect = Settings().default_dialect
    logger.info("generate_schema called (dialect=%s, fragment_only=%s)", dialect, fragment_only)
    try:
        table = DescriptorLoader().load_string(descriptor)
    except DescriptorError as exc:
        raise ToolError(str(exc)) from exc
    try:
        return generate_table_schema(table, dialect, fragment_only=fragment_only)
    except UnsupportedDialectError as exc:
        raise ToolError(str(exc)) from exc


@mcp.tool
def list_dialects() -> str:
    """List available schema dialects and their capabilities."""
    lines = ["Available dialects:", ""]
    for name in DialectRegistry.available():
        dialect = DialectRegistry.get(name)
        caps = asdict(dialect.capabilities)
        enabled = [k for k, v in caps.items() if v]
        cap_str = ", ".join(enabled) if enabled else "(none)"
        lines.append(f"  {name}: {cap_str}")
    return "\n".join(lines)


def main() -> None:
    """Run the MCP server using settings from environment / .env file."""
    settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger.info(
        "dbfschema MCP Server v%s starting (transport=%s)",
        __version__,
        settings.mcp_transport,
    )

    if settings.mcp_transport == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.run(
            transport=settings.mcp_transport,
            host=settings.mcp_server_host,
            port=settings.mcp_server_port,
            log_level=settings.log_level.lower(),
        )


if __name__ == "__main__":
    main()
