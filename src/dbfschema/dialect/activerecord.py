"""ActiveRecord schema dialect (ORM schema DSL)."""

from __future__ import annotations

from dbfschema.dialect.base import DialectCapabilities, TemplateDialect
from dbfschema.dialect.registry import DialectRegistry
from dbfschema.models.table import Column
from dbfschema.typemap import TypeSpelling

RUBY_TYPES = TypeSpelling(
    integer=":integer",
    floating=":float",
    currency=":decimal, :precision => {precision}, :scale => {scale}",
    date=":date",
    datetime=":datetime",
    boolean=":boolean",
    text=":text",
    binary=":binary",
    string=":string, :limit => {length}",
)


@DialectRegistry.register
class ActiveRecordDialect(TemplateDialect):
    """``ActiveRecord::Schema.define`` block; has no fragment form."""

    field_indent = "    "

    @property
    def name(self) -> str:
        return "activerecord"

    @property
    def capabilities(self) -> DialectCapabilities:
        return DialectCapabilities(supports_fragment=False)

    @property
    def types(self) -> TypeSpelling:
        return RUBY_TYPES

    def field_definition(self, column: Column) -> str:
        return f't.column "{column.underscored_name}", {self.map_type(column)}'

    def header(self, table_name: str) -> list[str]:
        return [
            "ActiveRecord::Schema.define do",
            f'  create_table "{table_name}" do |t|',
        ]

    def footer(self) -> list[str]:
        return ["  end", "end"]
