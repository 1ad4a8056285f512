"""Success/failure values shared by the resolver and the coercer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias

from .errors import InvalidObjectPathError


@dataclass(frozen=True)
class Resolved:
    value: object
    status: Literal["success"] = "success"


@dataclass(frozen=True)
class Failed:
    error: InvalidObjectPathError
    status: Literal["failed"] = "failed"


Outcome: TypeAlias = Resolved | Failed


def unwrap(outcome: Outcome) -> object:
    """Return the resolved value or raise the recorded error."""
    if isinstance(outcome, Failed):
        raise outcome.error
    return outcome.value


__all__ = ["Failed", "Outcome", "Resolved", "unwrap"]
