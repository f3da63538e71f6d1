from __future__ import annotations

import threading
from enum import Enum
from typing import Any, TypeVar

from pydantic import ConfigDict, TypeAdapter, ValidationError
from pydantic.errors import PydanticSchemaGenerationError, PydanticUserError

from compverify.contracts import ConversionError

T = TypeVar("T")

_ARBITRARY_TYPES = ConfigDict(arbitrary_types_allowed=True)


class DefaultValueConverter:
    """
    ValueConverter backed by pydantic's lax-mode validation.

    Strings such as "8080", "true" or "1.5" coerce to int/bool/float; enum
    targets accept member values. Classes pydantic has no schema for only
    accept their own instances.
    """

    def __init__(self) -> None:
        self._adapters: dict[Any, TypeAdapter[Any] | None] = {}
        self._lock = threading.Lock()

    def convert(self, target_type: type[T], value: Any) -> T:
        if value is None:
            raise ConversionError(target_type, value, "value is None")
        if target_type is str:
            return self.to_string(value)  # type: ignore[return-value]
        if _is_exact_instance(value, target_type):
            return value

        adapter = self._adapter_for(target_type)
        if adapter is None:
            raise ConversionError(target_type, value, "no conversion available")
        try:
            return adapter.validate_python(value)
        except ValidationError as exc:
            raise ConversionError(target_type, value, _first_message(exc)) from exc

    def to_string(self, value: Any) -> str:
        if value is None:
            raise ConversionError(str, value, "value is None")
        if isinstance(value, str):
            return value
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, Enum):
            return str(value.value)
        if isinstance(value, bytes):
            try:
                return value.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise ConversionError(str, value, str(exc)) from exc
        try:
            return str(value)
        except Exception as exc:
            raise ConversionError(str, value, str(exc)) from exc

    def _adapter_for(self, target_type: Any) -> TypeAdapter[Any] | None:
        with self._lock:
            if target_type in self._adapters:
                return self._adapters[target_type]
            adapter = _build_adapter(target_type)
            self._adapters[target_type] = adapter
            return adapter


def _build_adapter(target_type: Any) -> TypeAdapter[Any] | None:
    try:
        return TypeAdapter(target_type)
    except PydanticSchemaGenerationError:
        pass
    try:
        return TypeAdapter(target_type, config=_ARBITRARY_TYPES)
    except PydanticUserError:
        return None


def _is_exact_instance(value: Any, target_type: Any) -> bool:
    if not isinstance(target_type, type):
        return False
    # bool is an int subclass; let pydantic decide those
    if isinstance(value, bool) and target_type is not bool:
        return False
    return isinstance(value, target_type)


def _first_message(exc: ValidationError) -> str:
    errors = exc.errors(include_url=False)
    if not errors:
        return str(exc)
    return errors[0]["msg"]
