"""Uniform access over mappings and ordered pair sequences.

A mapping holds unique keys. A pair sequence is a ``list`` or ``tuple`` of
``(key, value)`` tuples, ordered, where a key may repeat. Every function
here returns a new value and never mutates its input; new mappings come
back as ``dict`` and new pair sequences as ``list``.

The pair-sequence forms of ``put`` and ``replace`` differ on purpose:
``put`` collapses every occurrence of the key into one pair at the front,
``replace`` rewrites each occurrence where it stands.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, assert_never

from gen_util.errors import KeyNotFound
from gen_util.result import Found, NotFound

from .shapes import KeyVal, Shape, shape_of


if TYPE_CHECKING:
    from collections.abc import Collection


def fetch(kv: KeyVal, key: Any) -> Found[Any] | NotFound:
    """Look up ``key``; a pair sequence answers with its first match."""
    match shape_of(kv):
        case Shape.MAPPING:
            if key in kv:
                return Found(kv[key])
            return NotFound()
        case Shape.PAIRS:
            for pair_key, value in kv:
                if pair_key == key:
                    return Found(value)
            return NotFound()
        case unreachable:
            assert_never(unreachable)


def fetch_or_raise(kv: KeyVal, key: Any) -> Any:
    """Return the value for ``key`` or raise ``KeyNotFound``."""
    found = fetch(kv, key)
    if isinstance(found, NotFound):
        raise KeyNotFound(key, kv)
    return found.value


def get(kv: KeyVal, key: Any, default: Any = None) -> Any:
    """Return the value for ``key``, or ``default`` when it is absent."""
    found = fetch(kv, key)
    if isinstance(found, NotFound):
        return default
    return found.value


def has_key(kv: KeyVal, key: Any) -> bool:
    """Return True when ``key`` is present."""
    match shape_of(kv):
        case Shape.MAPPING:
            return key in kv
        case Shape.PAIRS:
            return any(pair_key == key for pair_key, _ in kv)
        case unreachable:
            assert_never(unreachable)


def put(kv: KeyVal, key: Any, value: Any) -> KeyVal:
    """Set ``key`` to ``value``.

    For a pair sequence every existing pair for ``key`` is dropped and the new
    pair is prepended.
    """
    match shape_of(kv):
        case Shape.MAPPING:
            return {**kv, key: value}
        case Shape.PAIRS:
            return [(key, value), *delete(kv, key)]
        case unreachable:
            assert_never(unreachable)


def get_all(kv: KeyVal, key: Any) -> list[Any]:
    """Return every value stored under ``key``, in order."""
    match shape_of(kv):
        case Shape.MAPPING:
            return [kv[key]] if key in kv else []
        case Shape.PAIRS:
            return [value for pair_key, value in kv if pair_key == key]
        case unreachable:
            assert_never(unreachable)


def delete(kv: KeyVal, key: Any) -> KeyVal:
    """Remove all occurrences of ``key``; an absent key leaves the contents unchanged."""
    match shape_of(kv):
        case Shape.MAPPING:
            return {k: v for k, v in kv.items() if k != key}
        case Shape.PAIRS:
            return [(k, v) for k, v in kv if k != key]
        case unreachable:
            assert_never(unreachable)


def replace(kv: KeyVal, key: Any, value: Any) -> KeyVal:
    """Update ``key`` only if it already exists, else raise ``KeyNotFound``.

    For a pair sequence every occurrence is updated in place, so order and
    occurrence count are kept.
    """
    match shape_of(kv):
        case Shape.MAPPING:
            if key not in kv:
                raise KeyNotFound(key, kv)
            return {**kv, key: value}
        case Shape.PAIRS:
            replaced: list[tuple[Any, Any]] = []
            seen_key = False
            for pair_key, pair_value in kv:
                if pair_key == key:
                    seen_key = True
                    replaced.append((pair_key, value))
                else:
                    replaced.append((pair_key, pair_value))
            if not seen_key:
                raise KeyNotFound(key, kv)
            return replaced
        case unreachable:
            assert_never(unreachable)


def put_copy(dest: KeyVal, source: KeyVal, key: Any) -> KeyVal:
    """Copy ``key`` from ``source`` into ``dest`` when ``source`` has it.

    ``dest`` is returned as-is when ``key`` is absent from ``source``.
    """
    found = fetch(source, key)
    if isinstance(found, NotFound):
        return dest
    return put(dest, key, found.value)


def put_copy_or_raise(dest: KeyVal, source: KeyVal, key: Any) -> KeyVal:
    """Copy ``key`` from ``source`` into ``dest`` or raise ``KeyNotFound``."""
    return put(dest, key, fetch_or_raise(source, key))


def take(kv: KeyVal, keys: Collection[Any]) -> KeyVal:
    """Keep only the pairs whose key is in ``keys``."""
    match shape_of(kv):
        case Shape.MAPPING:
            return {k: v for k, v in kv.items() if k in keys}
        case Shape.PAIRS:
            return [(k, v) for k, v in kv if k in keys]
        case unreachable:
            assert_never(unreachable)


def keys(kv: KeyVal) -> list[Any]:
    """Return the distinct keys in first-seen order."""
    match shape_of(kv):
        case Shape.MAPPING:
            return list(kv)
        case Shape.PAIRS:
            seen: list[Any] = []
            for pair_key, _ in kv:
                if pair_key not in seen:
                    seen.append(pair_key)
            return seen
        case unreachable:
            assert_never(unreachable)
