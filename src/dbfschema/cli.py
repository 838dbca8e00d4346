"""Command-line entry point: render a table descriptor as a schema."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dbfschema import __version__
from dbfschema.dialect import DialectRegistry, UnsupportedDialectError
from dbfschema.parser.loader import DescriptorError, DescriptorLoader
from dbfschema.service.generator import generate_table_schema
from dbfschema.settings import Settings

logger = logging.getLogger("dbfschema.cli")


def build_parser(default_dialect: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dbfschema",
        description="Render xBase table column metadata as a schema definition.",
    )
    parser.add_argument("descriptor", nargs="?", help="YAML or JSON table descriptor")
    parser.add_argument("-f", "--format", default=default_dialect,
                        help=f"Output dialect (default: {default_dialect})")
    parser.add_argument("--fragment", action="store_true",
                        help="Emit only the column definitions")
    parser.add_argument("--list-dialects", action="store_true",
                        help="List available dialects and exit")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    parser = build_parser(settings.default_dialect)
    args = parser.parse_args(argv)

    if args.list_dialects:
        for name in DialectRegistry.available():
            print(name)
        return 0
    if args.descriptor is None:
        parser.error("a descriptor file is required")

    try:
        table = DescriptorLoader().load(Path(args.descriptor))
        schema = generate_table_schema(table, args.format, fragment_only=args.fragment)
    except (DescriptorError, UnsupportedDialectError) as exc:
        print(f"dbfschema: {exc}", file=sys.stderr)
        return 2

    logger.debug("Rendered %d columns from %s", len(table.columns), args.descriptor)
    sys.stdout.write(schema)
    if not schema.endswith("\n"):
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
