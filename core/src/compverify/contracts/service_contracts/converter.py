from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


class ConversionError(ValueError):
    def __init__(self, target: Any, value: Any, reason: str | None = None) -> None:
        self.target = target
        self.value = value
        name = getattr(target, "__name__", str(target))
        message = f"Cannot convert {value!r} to {name}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


@runtime_checkable
class ValueConverter(Protocol):
    def convert(self, target_type: type[T], value: Any) -> T:
        """Convert `value` to `target_type` or raise ConversionError."""
        ...

    def to_string(self, value: Any) -> str:
        """Return the string form the catalog expects, or raise ConversionError."""
        ...
