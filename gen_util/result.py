"""Non-raising result values returned by the lenient helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar


_T = TypeVar("_T")
_E = TypeVar("_E")


@dataclass(frozen=True, slots=True)
class Found(Generic[_T]):
    """A lookup that matched a key."""

    value: _T


@dataclass(frozen=True, slots=True)
class NotFound:
    """A lookup that matched nothing."""


@dataclass(frozen=True, slots=True)
class Ok(Generic[_T]):
    """A successful outcome."""

    value: _T


@dataclass(frozen=True, slots=True)
class Err(Generic[_E]):
    """A failed outcome carrying its reason."""

    error: _E
