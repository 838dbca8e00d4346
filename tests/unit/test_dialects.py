"""Tests for the schema dialect system."""

from __future__ import annotations

import json

import pytest

from dbfschema.dialect import DialectRegistry, TemplateDialect, UnsupportedDialectError
from dbfschema.dialect.activerecord import ActiveRecordDialect
from dbfschema.dialect.json_descriptor import JSONDialect
from dbfschema.dialect.postgres import PostgresDialect
from dbfschema.dialect.sequel import SequelDialect
from dbfschema.dialect.snowflake import SnowflakeDialect
from dbfschema.models.table import Column, Table


class TestDialectRegistry:
    def test_available_dialects(self) -> None:
        assert DialectRegistry.available() == [
            "activerecord",
            "json",
            "postgres",
            "sequel",
            "snowflake",
        ]

    def test_get_returns_instances(self) -> None:
        assert isinstance(DialectRegistry.get("activerecord"), ActiveRecordDialect)
        assert isinstance(DialectRegistry.get("sequel"), SequelDialect)
        assert isinstance(DialectRegistry.get("snowflake"), SnowflakeDialect)
        assert isinstance(DialectRegistry.get("postgres"), PostgresDialect)
        assert isinstance(DialectRegistry.get("json"), JSONDialect)

    def test_unsupported_dialect_error(self) -> None:
        with pytest.raises(UnsupportedDialectError) as exc_info:
            DialectRegistry.get("oracle")
        assert exc_info.value.dialect_name == "oracle"
        assert "sequel" in exc_info.value.available
        assert "oracle" in str(exc_info.value)
        assert "activerecord" in str(exc_info.value)

    def test_capabilities(self) -> None:
        assert DialectRegistry.get("activerecord").capabilities.supports_fragment is False
        assert DialectRegistry.get("sequel").capabilities.supports_fragment is True
        assert DialectRegistry.get("json").capabilities.structured_output is True
        assert DialectRegistry.get("postgres").capabilities.structured_output is False


class TestActiveRecordDialect:
    def test_render(self, people: Table) -> None:
        schema = ActiveRecordDialect().render(people.name, people.columns)
        assert schema == (
            "ActiveRecord::Schema.define do\n"
            '  create_table "people" do |t|\n'
            '    t.column "first_name", :string, :limit => 30\n'
            '    t.column "age", :integer\n'
            "  end\n"
            "end\n"
        )

    def test_fragment_ignored(self, people: Table) -> None:
        dialect = ActiveRecordDialect()
        assert dialect.render(people.name, people.columns, fragment_only=True) == dialect.render(
            people.name, people.columns
        )

    def test_all_types(self, all_types: list[Column]) -> None:
        schema = ActiveRecordDialect().render("things", all_types)
        assert '    t.column "amount", :float\n' in schema
        assert '    t.column "count", :integer\n' in schema
        assert '    t.column "price", :decimal, :precision => 15, :scale => 4\n' in schema
        assert '    t.column "last_update", :datetime\n' in schema
        assert '    t.column "code", :string, :limit => 12\n' in schema


class TestSequelDialect:
    def test_render(self, people: Table) -> None:
        schema = SequelDialect().render(people.name, people.columns)
        assert schema == (
            "Sequel.migration do\n"
            "  change do\n"
            "    create_table(:people) do\n"
            "      column :first_name, :varchar, :size => 30\n"
            "      column :age, :integer\n"
            "    end\n"
            "  end\n"
            "end\n"
        )

    def test_fragment(self, people: Table) -> None:
        schema = SequelDialect().render(people.name, people.columns, fragment_only=True)
        assert schema == (
            "      column :first_name, :varchar, :size => 30\n"
            "      column :age, :integer\n"
        )


class TestSnowflakeDialect:
    def test_render(self, people: Table) -> None:
        schema = SnowflakeDialect().render(people.name, people.columns)
        assert schema == (
            "create or replace table people (\n"
            "  first_name varchar(30),\n"
            "  age integer,\n"
            ");\n"
        )

    def test_fragment(self, people: Table) -> None:
        schema = SnowflakeDialect().render(people.name, people.columns, fragment_only=True)
        assert schema == "  first_name varchar(30),\n  age integer,\n"
        assert "create" not in schema
        assert ";" not in schema

    def test_uses_given_table_name(self) -> None:
        schema = SnowflakeDialect().render("enterprises_2024", [Column(name="Id", type="I")])
        assert schema.startswith("create or replace table enterprises_2024 (\n")


class TestPostgresDialect:
    def test_render(self, people: Table) -> None:
        schema = PostgresDialect().render(people.name, people.columns)
        assert schema == (
            "CREATE TABLE people (\n"
            "  first_name varchar(30),\n"
            "  age integer,\n"
            ");\n"
        )

    def test_all_types(self, all_types: list[Column]) -> None:
        schema = PostgresDialect().render("things", all_types, fragment_only=True)
        assert schema.splitlines() == [
            "  amount double precision,",
            "  ratio double precision,",
            "  count integer,",
            "  price numeric(15,4),",
            "  born date,",
            "  last_update timestamp with time zone,",
            "  active boolean,",
            "  notes text,",
            "  blob bytea,",
            "  code varchar(12),",
        ]


class TestJSONDialect:
    def test_render(self, people: Table) -> None:
        schema = JSONDialect().render(people.name, people.columns)
        assert json.loads(schema) == [
            {"name": "First Name", "type": "C", "length": 30, "decimal": 0},
            {"name": "Age", "type": "N", "length": 3, "decimal": 0},
        ]

    def test_compact_and_fragment_ignored(self, people: Table) -> None:
        dialect = JSONDialect()
        schema = dialect.render(people.name, people.columns)
        assert " " not in schema.replace("First Name", "")
        assert dialect.render(people.name, people.columns, fragment_only=True) == schema

    def test_raw_type_codes(self) -> None:
        schema = JSONDialect().render("t", [Column(name="Pic", type="G", length=10)])
        assert json.loads(schema)[0]["type"] == "G"

    def test_empty(self) -> None:
        assert JSONDialect().render("t", []) == "[]"

    def test_non_ascii_names_written_as_utf8(self) -> None:
        schema = JSONDialect().render("t", [Column(name="Größe", type="N", length=5)])
        assert '"name":"Größe"' in schema
        assert "\\u" not in schema


class TestFragmentPreservesFieldLines:
    @pytest.mark.parametrize("name", ["sequel", "snowflake", "postgres"])
    def test_field_lines_unchanged(self, name: str, all_types: list[Column]) -> None:
        dialect = DialectRegistry.get(name)
        full = dialect.render("things", all_types).splitlines()
        fragment = dialect.render("things", all_types, fragment_only=True).splitlines()
        assert len(fragment) == len(all_types)
        start = full.index(fragment[0])
        assert full[start:start + len(fragment)] == fragment
        assert len(full) > len(fragment)


class TestColumnOrder:
    @staticmethod
    def _field_tokens(name: str, columns: list[Column]) -> list[str]:
        dialect = DialectRegistry.get(name)
        if isinstance(dialect, TemplateDialect):
            return [dialect.field_definition(c) for c in columns]
        return [f'"name":"{c.name}"' for c in columns]

    @pytest.mark.parametrize("name", DialectRegistry.available())
    def test_order_preserved(self, name: str, all_types: list[Column]) -> None:
        dialect = DialectRegistry.get(name)
        tokens = self._field_tokens(name, all_types)

        forward = dialect.render("t", all_types)
        positions = [forward.index(token) for token in tokens]
        assert positions == sorted(positions)

        backward = dialect.render("t", list(reversed(all_types)))
        reversed_positions = [backward.index(token) for token in tokens]
        assert reversed_positions == sorted(reversed_positions, reverse=True)

    def test_sequel_field_names_in_order(self, all_types: list[Column]) -> None:
        lines = DialectRegistry.get("sequel").render("t", all_types).splitlines()
        fields = [line.split() for line in lines if line.lstrip().startswith("column ")]
        names = [parts[1].rstrip(",") for parts in fields]
        assert names == [f":{c.underscored_name}" for c in all_types]


class TestRegistration:
    def test_duplicate_name_rejected(self) -> None:
        class ImpostorDialect(SequelDialect):
            pass

        with pytest.raises(ValueError, match="already registered"):
            DialectRegistry.register(ImpostorDialect)
        assert isinstance(DialectRegistry.get("sequel"), SequelDialect)
        assert type(DialectRegistry.get("sequel")) is SequelDialect

    def test_shared_instance(self) -> None:
        assert DialectRegistry.get("postgres") is DialectRegistry.get("postgres")
