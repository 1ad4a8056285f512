from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass

import pytest

from .api import clear_caches
from .config import OBJPATH_CONFIG, ObjPathConfig

_OVERRIDABLE = ("ignore_case", "strict_literals", "cache_max_size", "log_level")


@dataclass(frozen=True)
class _ObjPathConfigSnapshot:
    ignore_case: bool
    strict_literals: bool
    cache_max_size: int
    log_level: str

    @classmethod
    def capture(cls) -> "_ObjPathConfigSnapshot":
        return cls(
            ignore_case=OBJPATH_CONFIG.ignore_case,
            strict_literals=OBJPATH_CONFIG.strict_literals,
            cache_max_size=OBJPATH_CONFIG.cache_max_size,
            log_level=OBJPATH_CONFIG.log_level,
        )

    def restore(self) -> None:
        OBJPATH_CONFIG.ignore_case = self.ignore_case
        OBJPATH_CONFIG.strict_literals = self.strict_literals
        OBJPATH_CONFIG.cache_max_size = self.cache_max_size
        OBJPATH_CONFIG.log_level = self.log_level


@contextmanager
def objpath_test_env(**overrides: object) -> Generator[ObjPathConfig, None, None]:
    """Run a block with fresh caches and temporarily overridden settings.

    Settings and caches are restored on exit, including when the block raises.
    """
    unknown = sorted(set(overrides) - set(_OVERRIDABLE))
    if unknown:
        raise TypeError(f"unknown objpath settings: {', '.join(unknown)}")

    snapshot = _ObjPathConfigSnapshot.capture()
    clear_caches()
    for name, value in overrides.items():
        setattr(OBJPATH_CONFIG, name, value)
    try:
        yield OBJPATH_CONFIG
    finally:
        snapshot.restore()
        clear_caches()


@pytest.fixture()
def objpath_env() -> Generator[ObjPathConfig, None, None]:
    """Give the test fresh caches and restore settings it changes."""
    with objpath_test_env() as config:
        yield config


__all__ = ["objpath_env", "objpath_test_env"]
