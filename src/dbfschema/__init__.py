"""dbfschema: render xBase table metadata as schema definitions."""

__version__ = "0.1.0"
