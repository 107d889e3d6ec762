"""Environment-backed configuration lookup."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from gen_util.errors import ConfigError


if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path


logger = logging.getLogger(__name__)


def load_env_file(path: str | Path | None = None, *, override: bool = False) -> bool:
    """Load ``KEY=value`` lines from a dotenv file into ``os.environ``.

    With no ``path`` the nearest ``.env`` is searched for. Returns True when
    at least one variable was set.
    """
    loaded = load_dotenv(path, override=override)
    logger.debug("dotenv file %s loaded: %s", path or ".env", loaded)
    return loaded


def get_env(name: str, default: str | None = None, environ: Mapping[str, str] | None = None) -> str | None:
    """Return an environment variable, or ``default`` when it is unset."""
    env = os.environ if environ is None else environ
    return env.get(name, default)


def require_env(name: str, environ: Mapping[str, str] | None = None) -> str:
    """Return an environment variable that must be set and non-empty.

    An empty value is treated the same as an unset one.
    """
    value = get_env(name, environ=environ)
    if not value:
        raise ConfigError(name)
    return value
