from dataclasses import InitVar, dataclass, field
from typing import Any, NamedTuple, override

import pytest

from gen_util.errors import RequiredFieldsUnsatisfied
from gen_util.records.schema import DataclassSchema, RecordSchema, SchemaRegistry
from gen_util.records.symbols import Symbol, SymbolTable, lookup_known_symbol, to_existing_symbol
from gen_util.result import Err, Found, NotFound, Ok


@dataclass(frozen=True)
class Account:
    owner: str
    balance: int
    currency: str = "CAD"
    tags: list[str] = field(default_factory=list)
    audit: str = field(default="", init=False)


class Vector(NamedTuple):
    dx: float
    dy: float = 0.0


class VectorSchema(RecordSchema):
    @property
    @override
    def record_type(self) -> type:
        return Vector

    @property
    @override
    def fields(self) -> frozenset[Symbol]:
        return frozenset({Symbol("dx"), Symbol("dy")})

    @property
    @override
    def required(self) -> frozenset[Symbol]:
        return frozenset({Symbol("dx")})

    @override
    def construct(self, values: Any) -> Any:
        if values.get(Symbol("dx")) is None:
            raise RequiredFieldsUnsatisfied(self)
        return Vector(**{symbol.name: value for symbol, value in values.items()})

    @override
    def update(self, record: Any, values: Any) -> Any:
        return self.construct({**self.as_mapping(record), **values})

    @override
    def as_mapping(self, record: Any) -> dict[Symbol, Any]:
        return {Symbol(name): value for name, value in record._asdict().items()}


def test_symbol_is_never_equal_to_text() -> None:
    assert Symbol("name") == Symbol("name")
    assert Symbol("name") != "name"
    assert str(Symbol("name")) == "name"
    assert len({Symbol("a"), Symbol("a"), Symbol("b")}) == 2


def test_symbol_table_intern_and_lookup() -> None:
    table = SymbolTable()
    symbol = table.intern("name")

    assert table.intern("name") is symbol
    assert table.lookup("name") == Found(symbol)
    assert lookup_known_symbol("name", table) == Found(symbol)
    assert "name" in table
    assert len(table) == 1


def test_symbol_table_lookup_never_registers() -> None:
    table = SymbolTable()
    assert table.lookup("i_sure_hope_this_key_does_not_exist") == NotFound()
    assert "i_sure_hope_this_key_does_not_exist" not in table
    assert len(table) == 0


def test_symbol_table_rejects_empty_name() -> None:
    with pytest.raises(ValueError, match="symbol name must not be empty"):
        _ = SymbolTable().intern("")


def test_to_existing_symbol_falls_back_to_text() -> None:
    table = SymbolTable()
    known = table.intern("known")
    assert to_existing_symbol("known", table) is known
    assert to_existing_symbol("unknown", table) == "unknown"


def test_dataclass_schema_reflects_fields_and_required() -> None:
    table = SymbolTable()
    schema = DataclassSchema(Account, table)

    assert schema.name == "Account"
    assert schema.record_type is Account
    assert schema.fields == {Symbol("owner"), Symbol("balance"), Symbol("currency"), Symbol("tags")}
    assert schema.required == {Symbol("owner"), Symbol("balance")}
    assert "audit" not in table
    assert len(table) == 4


def test_dataclass_schema_construct_and_as_mapping() -> None:
    schema = DataclassSchema(Account, SymbolTable())
    account = schema.construct({Symbol("owner"): "ada", Symbol("balance"): 10})

    assert account == Account(owner="ada", balance=10)
    assert schema.as_mapping(account) == {
        Symbol("owner"): "ada",
        Symbol("balance"): 10,
        Symbol("currency"): "CAD",
        Symbol("tags"): [],
    }


@pytest.mark.parametrize(
    "values",
    [
        {},
        {Symbol("owner"): "ada"},
        {Symbol("owner"): "ada", Symbol("balance"): None},
    ],
)
def test_dataclass_schema_construct_enforces_required_fields(values: dict[Symbol, Any]) -> None:
    schema = DataclassSchema(Account, SymbolTable())
    with pytest.raises(RequiredFieldsUnsatisfied, match="Account has required fields") as info:
        _ = schema.construct(values)
    assert info.value.schema is schema


def test_dataclass_schema_update_keeps_untouched_fields() -> None:
    schema = DataclassSchema(Account, SymbolTable())
    account = Account(owner="ada", balance=10, currency="EUR")

    updated = schema.update(account, {Symbol("balance"): 25})

    assert updated == Account(owner="ada", balance=25, currency="EUR")
    assert account.balance == 10


def test_dataclass_schema_update_rejects_other_records() -> None:
    schema = DataclassSchema(Account, SymbolTable())
    with pytest.raises(TypeError, match="expected a record of type Account, got Vector"):
        _ = schema.update(Vector(1.0), {})


def test_dataclass_schema_rejects_non_dataclass() -> None:
    with pytest.raises(TypeError, match="record type must be a dataclass"):
        _ = DataclassSchema(Vector, SymbolTable())
    with pytest.raises(TypeError, match="record type must be a dataclass"):
        _ = DataclassSchema(Account(owner="ada", balance=1), SymbolTable())  # type: ignore[arg-type]


def test_registry_register_is_a_decorator() -> None:
    registry = SchemaRegistry(SymbolTable())

    @registry.register
    @dataclass
    class Point:
        x: int
        y: int

    schema = registry.schema_for(Point)
    assert isinstance(schema, DataclassSchema)
    assert registry.schema_for(Point(1, 2)) is schema
    assert registry.schema_for(schema) is schema
    assert "x" in registry.symbols
    assert "y" in registry.symbols


def test_registry_auto_registers_dataclasses_only() -> None:
    registry = SchemaRegistry(SymbolTable())
    schema = registry.schema_for(Account)

    assert registry.schema_for(Account) is schema
    with pytest.raises(TypeError, match="Vector is not a registered record type"):
        _ = registry.schema_for(Vector)


def test_registry_accepts_hand_written_schemas() -> None:
    registry = SchemaRegistry(SymbolTable())
    schema = registry.add(VectorSchema())

    assert registry.schema_for(Vector) is schema
    assert registry.schema_for(Vector(1.0, 2.0)) is schema
    assert registry.is_record(Vector(1.0))
    assert "dx" in registry.symbols


def test_registry_is_record() -> None:
    registry = SchemaRegistry(SymbolTable())
    assert registry.is_record(Account(owner="ada", balance=1))
    assert not registry.is_record(Account)
    assert not registry.is_record({"owner": "ada"})
    assert not registry.is_record(Vector(1.0))


@dataclass
class Scaled:
    x: int
    factor: InitVar[int]

    def __post_init__(self, factor: int) -> None:
        self.x *= factor


@dataclass
class Shifted:
    x: int
    offset: InitVar[int] = 0

    def __post_init__(self, offset: int) -> None:
        self.x += offset


def test_dataclass_schema_rejects_required_init_only_arguments() -> None:
    table = SymbolTable()
    with pytest.raises(TypeError, match="Scaled has init-only arguments without defaults: factor"):
        _ = DataclassSchema(Scaled, table)
    assert len(table) == 0

    registry = SchemaRegistry(SymbolTable())
    with pytest.raises(TypeError, match="init-only arguments"):
        _ = registry.schema_for(Scaled)
    assert len(registry.symbols) == 0


def test_dataclass_schema_accepts_defaulted_init_only_arguments() -> None:
    schema = DataclassSchema(Shifted, SymbolTable())

    assert schema.fields == {Symbol("x")}
    assert schema.construct({Symbol("x"): 1}) == Shifted(1)
    assert schema.update(Shifted(1), {Symbol("x"): 5}) == Shifted(5)


def test_library_value_types_are_not_records() -> None:
    registry = SchemaRegistry(SymbolTable())

    for value in (Found(1), NotFound(), Ok({"x": 1}), Err("reason"), Symbol("x")):
        assert not registry.is_record(value)
        with pytest.raises(TypeError, match="is not a registered record type"):
            _ = registry.schema_for(value)
    assert len(registry.symbols) == 0
