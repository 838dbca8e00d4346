"""Shared test fixtures for dbfschema."""

from __future__ import annotations

import pytest

from dbfschema.models.table import Column, Table


@pytest.fixture
def people() -> Table:
    return Table(
        name="people",
        columns=[
            Column(name="First Name", type="C", length=30),
            Column(name="Age", type="N", length=3, decimal=0),
        ],
    )


@pytest.fixture
def all_types() -> list[Column]:
    """One column per native type code, in a fixed order."""
    return [
        Column(name="Amount", type="N", length=10, decimal=2),
        Column(name="Ratio", type="F", length=8, decimal=3),
        Column(name="Count", type="I", length=4),
        Column(name="Price", type="Y", length=8, decimal=2),
        Column(name="Born", type="D", length=8),
        Column(name="lastUpdate", type="T", length=8),
        Column(name="Active", type="L", length=1),
        Column(name="Notes", type="M", length=10),
        Column(name="Blob", type="B", length=10),
        Column(name="Code", type="C", length=12),
    ]


SAMPLE_DESCRIPTOR_YAML = """\
name: people
columns:
  - name: First Name
    type: C
    length: 30
  - name: Age
    type: N
    length: 3
    decimal: 0
"""

SAMPLE_DESCRIPTOR_JSON = (
    '{"name": "people", "columns": ['
    '{"name": "First Name", "type": "C", "length": 30, "decimal": 0}, '
    '{"name": "Age", "type": "N", "length": 3, "decimal": 0}]}'
)
