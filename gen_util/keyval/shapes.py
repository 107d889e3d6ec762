"""Shape detection for keyed collections."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeAlias


Pair: TypeAlias = tuple[Any, Any]
PairSequence: TypeAlias = list[Pair] | tuple[Pair, ...]
KeyVal: TypeAlias = Mapping[Any, Any] | PairSequence


class Shape(Enum):
    """The two supported keyed-collection shapes."""

    MAPPING = "mapping"
    PAIRS = "pairs"


def shape_of(kv: Any) -> Shape:
    """Return the shape of ``kv`` or raise ``TypeError`` for unsupported values."""
    if isinstance(kv, Mapping):
        return Shape.MAPPING
    if isinstance(kv, (list, tuple)):
        return Shape.PAIRS
    msg = f"expected a mapping or a sequence of pairs, got {type(kv).__name__}"
    raise TypeError(msg)
