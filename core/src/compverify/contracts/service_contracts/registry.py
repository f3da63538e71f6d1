from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable


class NameNotBoundError(KeyError):
    pass


@runtime_checkable
class ObjectRegistry(Protocol):
    def resolve(self, name: str) -> Any:
        """Return the object bound to name or raise NameNotBoundError."""
        ...

    def names(self) -> Iterable[str]:
        """List bound names (for UI / debugging)."""
        ...
