from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping

from compverify.contracts import CatalogOutcome, UnknownSchemeError

from .schema import ComponentSchema, OptionSchema

_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")
_BOOLEAN_LITERALS = frozenset({"true", "false"})
_RESERVED_KEYS = frozenset({"scheme"})

logger = logging.getLogger("compverify.catalog")


class InMemoryCatalog:
    """
    CatalogService over a fixed set of component schemas.

    Values that are registry references or property placeholders are
    accepted as-is: they are only known after resolution.
    """

    def __init__(
        self,
        schemas: Iterable[ComponentSchema] = (),
        *,
        reference_marker: str = "#",
        placeholder_prefix: str = "{{",
        placeholder_suffix: str = "}}",
    ) -> None:
        self._schemas: dict[str, ComponentSchema] = {}
        for schema in schemas:
            if schema.scheme in self._schemas:
                raise ValueError(f"Duplicate schema for scheme '{schema.scheme}'")
            self._schemas[schema.scheme] = schema
        self._reference_marker = reference_marker
        self._placeholder_prefix = placeholder_prefix
        self._placeholder_suffix = placeholder_suffix

    @property
    def schemes(self) -> list[str]:
        return list(self._schemas)

    def schema_for(self, scheme: str) -> ComponentSchema:
        try:
            return self._schemas[scheme]
        except KeyError as e:
            raise UnknownSchemeError(scheme) from e

    def validate(self, scheme: str, params: Mapping[str, str]) -> CatalogOutcome:
        schema = self.schema_for(scheme)

        unknown: list[str] = []
        invalid_boolean: dict[str, str] = {}
        invalid_integer: dict[str, str] = {}
        invalid_number: dict[str, str] = {}
        invalid_enum: dict[str, str] = {}
        enum_choices: dict[str, tuple[str, ...]] = {}

        for name, value in params.items():
            if name in _RESERVED_KEYS:
                continue
            option = _find_option(schema, name)
            if option is None:
                if not schema.lenient:
                    unknown.append(name)
                continue
            if self._is_deferred(value):
                continue

            if option.type == "boolean" and value.lower() not in _BOOLEAN_LITERALS:
                invalid_boolean[name] = value
            elif option.type == "integer" and not _INTEGER_PATTERN.match(value.strip()):
                invalid_integer[name] = value
            elif option.type == "number" and not _is_number(value):
                invalid_number[name] = value
            elif option.type == "enum" and value not in option.enum:
                invalid_enum[name] = value
                enum_choices[name] = option.enum

        required = [
            name
            for name, option in schema.options.items()
            if option.required and not params.get(name)
        ]

        outcome = CatalogOutcome(
            scheme=scheme,
            unknown=tuple(unknown),
            required=tuple(required),
            invalid_boolean=invalid_boolean,
            invalid_integer=invalid_integer,
            invalid_number=invalid_number,
            invalid_enum=invalid_enum,
            enum_choices=enum_choices,
        )
        logger.debug(
            "Validated %d option(s) for '%s': success=%s", len(params), scheme, outcome.success
        )
        return outcome

    def _is_deferred(self, value: str) -> bool:
        if value.startswith(self._reference_marker) and len(value) > len(self._reference_marker):
            return True
        return value.startswith(self._placeholder_prefix) and value.endswith(
            self._placeholder_suffix
        )


def _find_option(schema: ComponentSchema, name: str) -> OptionSchema | None:
    option = schema.options.get(name)
    if option is not None:
        return option
    for candidate in schema.options.values():
        if candidate.prefix and name.startswith(candidate.prefix):
            return candidate
    return None


def _is_number(value: str) -> bool:
    try:
        float(value)
    except ValueError:
        return False
    return True
