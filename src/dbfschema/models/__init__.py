"""Pydantic domain models for dbfschema."""

from dbfschema.models.table import Column, NativeType, Table, underscore

__all__ = [
    "Column",
    "NativeType",
    "Table",
    "underscore",
]
