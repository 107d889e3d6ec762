"""Record schemas: declared fields, required fields and validating construction."""

from __future__ import annotations

import dataclasses
import inspect
import logging
import threading
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, TypeVar, override

from gen_util.errors import RequiredFieldsUnsatisfied
from gen_util.result import Err, Found, NotFound, Ok

from .symbols import SYMBOLS, Symbol, SymbolTable


if TYPE_CHECKING:
    from collections.abc import Mapping


logger = logging.getLogger(__name__)

_R = TypeVar("_R", bound=type)

# Value types of this library; dataclasses, but never records.
_VALUE_TYPES = (Found, NotFound, Ok, Err, Symbol)


def _is_record_dataclass(record_type: type) -> bool:
    return dataclasses.is_dataclass(record_type) and not issubclass(record_type, _VALUE_TYPES)


class RecordSchema(ABC):
    """Reflection capability for one record type."""

    @property
    @abstractmethod
    def record_type(self) -> type:
        """The record class described by this schema."""

    @property
    @abstractmethod
    def fields(self) -> frozenset[Symbol]:
        """Every declared field."""

    @property
    @abstractmethod
    def required(self) -> frozenset[Symbol]:
        """Fields that must be neither absent nor ``None``."""

    @abstractmethod
    def construct(self, values: Mapping[Symbol, Any]) -> Any:
        """Build a record from symbol-keyed values, defaults filling the rest.

        Raises ``RequiredFieldsUnsatisfied`` when a required field stays unset.
        """

    @abstractmethod
    def update(self, record: Any, values: Mapping[Symbol, Any]) -> Any:
        """Return a copy of ``record`` with ``values`` applied.

        Raises ``RequiredFieldsUnsatisfied`` when the copy would leave a
        required field unset.
        """

    @abstractmethod
    def as_mapping(self, record: Any) -> dict[Symbol, Any]:
        """Return the declared fields of ``record`` keyed by symbol."""

    @property
    def name(self) -> str:
        return self.record_type.__qualname__

    def is_instance(self, value: Any) -> bool:
        return isinstance(value, self.record_type)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name})"


class DataclassSchema(RecordSchema):
    """Schema reflected from a dataclass.

    Declared fields are the ``init`` fields; a field is required when it has
    neither ``default`` nor ``default_factory``.
    """

    def __init__(self, record_type: type, symbols: SymbolTable = SYMBOLS) -> None:
        """Reflect ``record_type`` and intern its field names.

        Parameters
        ----------
        record_type
            A dataclass type.
        symbols
            Table receiving the field names as known symbols.
        """
        super().__init__()
        if not (isinstance(record_type, type) and dataclasses.is_dataclass(record_type)):
            msg = f"record type must be a dataclass, got {record_type!r}"
            raise TypeError(msg)

        declared = [field for field in dataclasses.fields(record_type) if field.init]
        declared_names = {field.name for field in declared}
        init_only = [
            parameter.name
            for parameter in inspect.signature(record_type).parameters.values()
            if parameter.name not in declared_names and parameter.default is inspect.Parameter.empty
        ]
        if init_only:
            msg = f"{record_type.__qualname__} has init-only arguments without defaults: {', '.join(init_only)}"
            raise TypeError(msg)

        self._record_type = record_type
        self._order = tuple(symbols.intern(field.name) for field in declared)
        self._fields = frozenset(self._order)
        self._required = frozenset(
            symbols.intern(field.name)
            for field in declared
            if field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING
        )

    @property
    @override
    def record_type(self) -> type:
        return self._record_type

    @property
    @override
    def fields(self) -> frozenset[Symbol]:
        return self._fields

    @property
    @override
    def required(self) -> frozenset[Symbol]:
        return self._required

    def _kwargs(self, values: Mapping[Symbol, Any]) -> dict[str, Any]:
        kwargs = {symbol.name: value for symbol, value in values.items() if symbol in self._fields}
        if any(kwargs.get(symbol.name) is None for symbol in self._required):
            logger.debug("required fields of %s left unset", self.name)
            raise RequiredFieldsUnsatisfied(self)
        return kwargs

    @override
    def construct(self, values: Mapping[Symbol, Any]) -> Any:
        return self._record_type(**self._kwargs(values))

    @override
    def update(self, record: Any, values: Mapping[Symbol, Any]) -> Any:
        if not self.is_instance(record):
            msg = f"expected a record of type {self.name}, got {type(record).__name__}"
            raise TypeError(msg)
        merged = {**self.as_mapping(record), **values}
        return dataclasses.replace(record, **self._kwargs(merged))

    @override
    def as_mapping(self, record: Any) -> dict[Symbol, Any]:
        return {symbol: getattr(record, symbol.name) for symbol in self._order}


class SchemaRegistry:
    """Maps record types to their schemas."""

    def __init__(self, symbols: SymbolTable = SYMBOLS) -> None:
        super().__init__()
        self.symbols = symbols
        self._schemas: dict[type, RecordSchema] = {}
        self._lock = threading.Lock()

    def add(self, schema: RecordSchema) -> RecordSchema:
        """Register a schema built by hand for a non-dataclass record type."""
        for symbol in schema.fields:
            _ = self.symbols.intern(symbol.name)
        with self._lock:
            self._schemas[schema.record_type] = schema
        logger.debug("registered record schema %s with %d fields", schema.name, len(schema.fields))
        return schema

    def register(self, record_type: _R) -> _R:
        """Register a dataclass record type; usable as a class decorator."""
        _ = self.add(DataclassSchema(record_type, self.symbols))
        return record_type

    def schema_for(self, target: Any) -> RecordSchema:
        """Return the schema for a schema, record type or record instance.

        Unregistered dataclasses are registered on first use.
        """
        if isinstance(target, RecordSchema):
            return target
        record_type = target if isinstance(target, type) else type(target)
        schema = self._schemas.get(record_type)
        if schema is not None:
            return schema
        if not _is_record_dataclass(record_type):
            msg = f"{record_type.__qualname__} is not a registered record type"
            raise TypeError(msg)
        return self.add(DataclassSchema(record_type, self.symbols))

    def is_record(self, value: Any) -> bool:
        """Return True when ``value`` is an instance of a record type."""
        if isinstance(value, type):
            return False
        return type(value) in self._schemas or _is_record_dataclass(type(value))


REGISTRY = SchemaRegistry(SYMBOLS)
record = REGISTRY.register
schema_for = REGISTRY.schema_for
is_record = REGISTRY.is_record
