"""Exception types raised by the strict (``*_or_raise``) helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from gen_util.records.schema import RecordSchema


class GenUtilError(Exception):
    """Base class for gen-util errors."""


class KeyNotFound(GenUtilError, KeyError):
    """A key expected in a keyed collection is absent."""

    def __init__(self, key: Any, term: Any = None) -> None:
        super().__init__(key)
        self.key = key
        self.term = term

    def __str__(self) -> str:
        return f"key {self.key!r} not found in: {self.term!r}"


class RequiredFieldsUnsatisfied(GenUtilError, ValueError):
    """A record would have been built with one or more required fields unset.

    The message names the record type only. Which field was missing is
    intentionally not reported.
    """

    def __init__(self, schema: RecordSchema) -> None:
        self.schema = schema
        msg = f"{schema.name} has required fields that must be set; build it through its constructor"
        super().__init__(msg)


class ConfigError(GenUtilError, RuntimeError):
    """A required configuration value is missing."""

    def __init__(self, name: str) -> None:
        self.name = name
        msg = f"Config error {name!r} must be configured and cannot be empty."
        super().__init__(msg)


class InvalidDate(GenUtilError, ValueError):
    """A date string could not be parsed."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"{reason}: {text!r}")
