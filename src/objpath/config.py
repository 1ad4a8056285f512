from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from .errors import ObjPathConfigError

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

DEFAULT_CACHE_MAX_SIZE = 1000


def _parse_bool(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ObjPathConfigError(f"{name} must be a boolean flag, got {raw!r}")


def _parse_positive_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError as exc:
        raise ObjPathConfigError(f"{name} must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise ObjPathConfigError(f"{name} must be positive, got {value}")
    return value


def _parse_log_level(environ: Mapping[str, str], name: str, default: str) -> str:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ObjPathConfigError(f"{name} must be a logging level name, got {raw!r}")
    return level


class ObjPathConfig:
    """Process-wide settings, read from ``OBJPATH_*`` environment variables."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        env = os.environ if environ is None else environ
        self.ignore_case = _parse_bool(env, "OBJPATH_IGNORE_CASE", True)
        self.strict_literals = _parse_bool(env, "OBJPATH_STRICT_LITERALS", False)
        self.cache_max_size = _parse_positive_int(
            env, "OBJPATH_CACHE_MAX_SIZE", DEFAULT_CACHE_MAX_SIZE
        )
        self.log_level = _parse_log_level(env, "OBJPATH_LOG_LEVEL", "WARNING")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ObjPathConfig":
        return cls(environ)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(ignore_case={self.ignore_case!r}, "
            f"strict_literals={self.strict_literals!r}, "
            f"cache_max_size={self.cache_max_size!r}, "
            f"log_level={self.log_level!r})"
        )


OBJPATH_CONFIG = ObjPathConfig()


__all__ = ["DEFAULT_CACHE_MAX_SIZE", "OBJPATH_CONFIG", "ObjPathConfig"]
