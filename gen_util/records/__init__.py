"""Record types, closed-world symbols and projection of untyped data onto records."""

from .projector import build, build_or_raise, merge, merge_or_raise, normalize_keys, project_fields
from .schema import REGISTRY, DataclassSchema, RecordSchema, SchemaRegistry, is_record, record, schema_for
from .symbols import SYMBOLS, Symbol, SymbolTable, lookup_known_symbol, to_existing_symbol


__all__ = [
    "REGISTRY",
    "SYMBOLS",
    "DataclassSchema",
    "RecordSchema",
    "SchemaRegistry",
    "Symbol",
    "SymbolTable",
    "build",
    "build_or_raise",
    "is_record",
    "lookup_known_symbol",
    "merge",
    "merge_or_raise",
    "normalize_keys",
    "project_fields",
    "record",
    "schema_for",
    "to_existing_symbol",
]
