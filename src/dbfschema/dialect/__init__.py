"""Schema dialect plugin system for dbfschema."""

# Import dialects to trigger registration
import dbfschema.dialect.activerecord as _activerecord  # noqa: F401
import dbfschema.dialect.json_descriptor as _json_descriptor  # noqa: F401
import dbfschema.dialect.postgres as _postgres  # noqa: F401
import dbfschema.dialect.sequel as _sequel  # noqa: F401
import dbfschema.dialect.snowflake as _snowflake  # noqa: F401
from dbfschema.dialect.base import Dialect, DialectCapabilities, SQLDialect, TemplateDialect
from dbfschema.dialect.registry import DialectRegistry, UnsupportedDialectError

__all__ = [
    "Dialect",
    "DialectCapabilities",
    "DialectRegistry",
    "SQLDialect",
    "TemplateDialect",
    "UnsupportedDialectError",
]
