from __future__ import annotations

from enum import Enum


class Scope(str, Enum):
    """Kind of verification requested from a component verifier."""

    PARAMETERS = "PARAMETERS"
    CONNECTIVITY = "CONNECTIVITY"

    @classmethod
    def from_string(cls, value: str) -> Scope:
        try:
            return cls[value.strip().upper()]
        except KeyError as e:
            raise ValueError(f"Unknown verification scope: {value!r}") from e


class Status(str, Enum):
    OK = "OK"
    ERROR = "ERROR"
    UNSUPPORTED = "UNSUPPORTED"
