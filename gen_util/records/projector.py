"""Project untyped keyed data onto record types.

Textual keys are resolved against the registry's symbol table and dropped when
unknown; the survivors are narrowed to the target record's declared fields.
A record is only ever returned once its required fields are all set.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from gen_util import keyval
from gen_util.errors import RequiredFieldsUnsatisfied
from gen_util.result import Err, Found, Ok

from .schema import REGISTRY, RecordSchema, SchemaRegistry
from .symbols import Symbol, lookup_known_symbol


logger = logging.getLogger(__name__)


def normalize_keys(mapping: Any, registry: SchemaRegistry = REGISTRY) -> Any:
    """Return ``mapping`` keyed by known symbols only.

    String keys are swapped for their known symbol or dropped; symbol keys
    are kept; any other key is dropped. A record is returned untouched.
    """
    if registry.is_record(mapping):
        return mapping

    if not isinstance(mapping, Mapping):
        msg = f"expected a mapping or a record, got {type(mapping).__name__}"
        raise TypeError(msg)

    normalized: dict[Symbol, Any] = {}
    dropped = 0
    for key, value in mapping.items():
        if isinstance(key, Symbol):
            normalized[key] = value
            continue
        if isinstance(key, str):
            found = lookup_known_symbol(key, registry.symbols)
            if isinstance(found, Found):
                normalized[found.value] = value
                continue
        dropped += 1

    if dropped:
        logger.debug("dropped %d keys without a known symbol", dropped)
    return normalized


def project_fields(mapping: Any, schema: Any, registry: SchemaRegistry = REGISTRY) -> dict[Symbol, Any]:
    """Normalize ``mapping`` and keep only the fields ``schema`` declares."""
    target = registry.schema_for(schema)
    normalized = normalize_keys(mapping, registry)
    if registry.is_record(normalized):
        normalized = registry.schema_for(normalized).as_mapping(normalized)
    return keyval.take(normalized, target.fields)


def build_or_raise(mapping: Any, schema: Any, registry: SchemaRegistry = REGISTRY) -> Any:
    """Build a record of ``schema`` from ``mapping``.

    ``schema`` may be a ``RecordSchema`` or a record type. Raises
    ``RequiredFieldsUnsatisfied`` when a required field is left unset.
    """
    target = registry.schema_for(schema)
    return target.construct(project_fields(mapping, target, registry))


def build(
    mapping: Any, schema: Any, registry: SchemaRegistry = REGISTRY
) -> Ok[Any] | Err[RequiredFieldsUnsatisfied]:
    """Non-raising form of ``build_or_raise``."""
    try:
        return Ok(build_or_raise(mapping, schema, registry))
    except RequiredFieldsUnsatisfied as error:
        return Err(error)


def merge_or_raise(existing: Any, mapping: Any, registry: SchemaRegistry = REGISTRY) -> Any:
    """Merge ``mapping`` onto ``existing``.

    For a record, only the record's own fields are taken from ``mapping`` and
    applied to a copy; the rest keep their current values. Two plain mappings
    are combined last-write-wins without any validation.
    """
    if registry.is_record(existing):
        target: RecordSchema = registry.schema_for(existing)
        return target.update(existing, project_fields(mapping, target, registry))

    if not (isinstance(existing, Mapping) and isinstance(mapping, Mapping)):
        msg = f"cannot merge {type(mapping).__name__} into {type(existing).__name__}"
        raise TypeError(msg)
    return {**existing, **mapping}


def merge(
    existing: Any, mapping: Any, registry: SchemaRegistry = REGISTRY
) -> Ok[Any] | Err[RequiredFieldsUnsatisfied]:
    """Non-raising form of ``merge_or_raise``."""
    try:
        return Ok(merge_or_raise(existing, mapping, registry))
    except RequiredFieldsUnsatisfied as error:
        return Err(error)
