"""Translate xBase native type codes into dialect type expressions."""

from __future__ import annotations

from dataclasses import dataclass

from dbfschema.models.table import NativeType

# Currency columns are always mapped with this precision/scale, whatever the
# column's own length and decimal count say.
CURRENCY_PRECISION = 15
CURRENCY_SCALE = 4

NATIVE_CODES = frozenset(t.value for t in NativeType)
NUMBER_TYPES = frozenset(
    t.value for t in (NativeType.NUMERIC, NativeType.FLOAT, NativeType.INTEGER)
)


@dataclass(frozen=True)
class TypeSpelling:
    """How one dialect spells each generic column type.

    ``currency`` is formatted with ``precision``/``scale`` and ``string``
    with ``length``.
    """

    integer: str
    floating: str
    currency: str
    date: str
    datetime: str
    boolean: str
    text: str
    binary: str
    string: str

    def fixed(self, native_type: str) -> str | None:
        """Return the spelling for codes that ignore length and decimals."""
        match native_type:
            case NativeType.CURRENCY:
                return self.currency.format(precision=CURRENCY_PRECISION, scale=CURRENCY_SCALE)
            case NativeType.DATE:
                return self.date
            case NativeType.DATETIME:
                return self.datetime
            case NativeType.LOGICAL:
                return self.boolean
            case NativeType.MEMO:
                return self.text
            case NativeType.BINARY:
                return self.binary
            case _:
                return None


def spell_type(native_type: str, decimal_count: int, length: int, types: TypeSpelling) -> str:
    """Apply the type rules with one dialect's spellings.

    Unknown codes use the character rule; this function never raises.
    """
    if native_type in NUMBER_TYPES:
        return types.floating if decimal_count > 0 else types.integer
    fixed = types.fixed(native_type)
    if fixed is not None:
        return fixed
    return types.string.format(length=length)


def map_type(native_type: str, decimal_count: int, length: int, dialect: str) -> str:
    """Map a native type code to the type expression of the named dialect.

    The JSON descriptor dialect has no type syntax of its own and gets the
    native code back, with unknown codes reported as ``C``.  Raises
    :class:`~dbfschema.dialect.registry.UnsupportedDialectError` only for an
    unregistered dialect name.
    """
    from dbfschema.dialect import DialectRegistry, TemplateDialect

    renderer = DialectRegistry.get(dialect)
    if isinstance(renderer, TemplateDialect):
        return spell_type(native_type, decimal_count, length, renderer.types)
    return native_type if native_type in NATIVE_CODES else NativeType.CHARACTER.value
