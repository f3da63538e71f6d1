from __future__ import annotations

import dataclasses
import logging
import typing
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

from compverify.contracts import ObjectRegistry, ValueConverter

T = TypeVar("T")

DEFAULT_REFERENCE_MARKER = "#"
_BEAN_PREFIX = "bean:"

logger = logging.getLogger("compverify.binding")


class BindingError(ValueError):
    pass


@dataclass(frozen=True, slots=True)
class LiteralValue:
    value: Any


@dataclass(frozen=True, slots=True)
class ReferenceValue:
    name: str


ParamValue = LiteralValue | ReferenceValue


def is_reference_parameter(value: Any, *, marker: str = DEFAULT_REFERENCE_MARKER) -> bool:
    return isinstance(value, str) and len(value) > len(marker) and value.startswith(marker)


def parse_param_value(raw: Any, *, marker: str = DEFAULT_REFERENCE_MARKER) -> ParamValue:
    """Split a raw option value into a literal or a registry reference."""
    if not is_reference_parameter(raw, marker=marker):
        return LiteralValue(raw)
    name = raw[len(marker) :]
    if name.startswith(_BEAN_PREFIX):
        name = name[len(_BEAN_PREFIX) :]
    name = name.strip()
    if not name:
        raise BindingError(f"Reference '{raw}' does not name an object")
    return ReferenceValue(name)


def extract_properties(properties: Mapping[str, Any], prefix: str) -> dict[str, Any]:
    """Return entries whose key starts with prefix, with the prefix stripped."""
    return {
        key[len(prefix) :]: value
        for key, value in properties.items()
        if key.startswith(prefix) and len(key) > len(prefix)
    }


@dataclass(frozen=True, slots=True)
class FieldBinding:
    key: str
    type: Any
    attribute: str | None = None

    @property
    def target(self) -> str:
        return self.attribute or self.key


@dataclass(slots=True)
class BindingReport:
    literals: dict[str, Any] = field(default_factory=dict)
    references: dict[str, str] = field(default_factory=dict)
    ignored: list[str] = field(default_factory=list)


class BindingTable:
    """
    Declared option-name -> attribute mapping for one bindable type.

    Keys match case-insensitively.
    """

    def __init__(self, owner: type, fields: Iterable[FieldBinding]) -> None:
        self.owner = owner
        self._fields: dict[str, FieldBinding] = {}
        for binding in fields:
            folded = binding.key.lower()
            if folded in self._fields:
                raise BindingError(f"{owner.__name__}: duplicate binding for '{binding.key}'")
            self._fields[folded] = binding

    @property
    def fields(self) -> tuple[FieldBinding, ...]:
        return tuple(self._fields.values())

    def lookup(self, key: str) -> FieldBinding | None:
        return self._fields.get(key.lower())

    def bind(
        self,
        instance: Any,
        properties: Mapping[str, Any],
        *,
        converter: ValueConverter,
        registry: ObjectRegistry,
        marker: str = DEFAULT_REFERENCE_MARKER,
    ) -> BindingReport:
        report = BindingReport()
        deferred: list[tuple[FieldBinding, str]] = []

        for key, raw in properties.items():
            binding = self.lookup(key)
            if binding is None:
                report.ignored.append(key)
                continue
            value = parse_param_value(raw, marker=marker)
            if isinstance(value, ReferenceValue):
                # Raw reference stays on the instance until the registry pass replaces it.
                setattr(instance, binding.target, raw)
                report.references[binding.key] = value.name
                deferred.append((binding, value.name))
                continue
            converted = converter.convert(binding.type, value.value)
            setattr(instance, binding.target, converted)
            report.literals[binding.key] = converted

        for binding, name in deferred:
            resolved = registry.resolve(name)
            if not (isinstance(binding.type, type) and isinstance(resolved, binding.type)):
                resolved = converter.convert(binding.type, resolved)
            setattr(instance, binding.target, resolved)
            logger.debug(
                "Bound %s.%s to registry object '%s'",
                self.owner.__name__,
                binding.target,
                name,
            )

        return report


_TABLES: dict[type, BindingTable] = {}


def register_bindings(owner: type, *fields: FieldBinding) -> BindingTable:
    table = BindingTable(owner, fields)
    _TABLES[owner] = table
    return table


def binding_table_for(owner: type) -> BindingTable:
    for klass in owner.__mro__:
        table = _TABLES.get(klass)
        if table is not None:
            return table
    raise BindingError(f"No bindings registered for {owner.__name__}")


def bindable(cls: type[T]) -> type[T]:
    """
    Register bindings for `cls` once, at class creation.

    Uses an explicit `__bindings__` declaration when present, otherwise the
    dataclass fields and their annotated types.
    """
    declared = getattr(cls, "__bindings__", None)
    if declared is not None:
        fields = [_as_field_binding(item) for item in declared]
    elif dataclasses.is_dataclass(cls):
        hints = typing.get_type_hints(cls)
        fields = [FieldBinding(f.name, hints.get(f.name, Any)) for f in dataclasses.fields(cls)]
    else:
        raise BindingError(f"{cls.__name__} declares no __bindings__ and is not a dataclass")
    register_bindings(cls, *fields)
    return cls


def set_properties(
    instance: T,
    properties: Mapping[str, Any],
    *,
    converter: ValueConverter,
    registry: ObjectRegistry,
    prefix: str | None = None,
    marker: str = DEFAULT_REFERENCE_MARKER,
) -> T:
    if prefix is not None:
        properties = extract_properties(properties, prefix)
    if not properties:
        return instance
    table = binding_table_for(type(instance))
    table.bind(instance, properties, converter=converter, registry=registry, marker=marker)
    return instance


def _as_field_binding(item: Any) -> FieldBinding:
    if isinstance(item, FieldBinding):
        return item
    if isinstance(item, tuple) and len(item) in (2, 3):
        return FieldBinding(*item)
    raise BindingError(f"Invalid binding declaration: {item!r}")
