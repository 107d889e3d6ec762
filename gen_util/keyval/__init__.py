"""Keyed-collection access over mappings and pair sequences."""

from .access import (
    delete,
    fetch,
    fetch_or_raise,
    get,
    get_all,
    has_key,
    keys,
    put,
    put_copy,
    put_copy_or_raise,
    replace,
    take,
)
from .shapes import KeyVal, Pair, PairSequence, Shape, shape_of


__all__ = [
    "KeyVal",
    "Pair",
    "PairSequence",
    "Shape",
    "delete",
    "fetch",
    "fetch_or_raise",
    "get",
    "get_all",
    "has_key",
    "keys",
    "put",
    "put_copy",
    "put_copy_or_raise",
    "replace",
    "take",
]
