from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


class UnknownSchemeError(LookupError):
    pass


@dataclass(frozen=True, slots=True)
class CatalogOutcome:
    """
    Result of validating string-coerced options against a component schema.

    Collections keep catalog order; the verifier relies on it for
    deterministic error output.
    """

    scheme: str
    unknown: Sequence[str] = ()
    required: Sequence[str] = ()
    invalid_boolean: Mapping[str, str] = field(default_factory=dict)
    invalid_integer: Mapping[str, str] = field(default_factory=dict)
    invalid_number: Mapping[str, str] = field(default_factory=dict)
    invalid_enum: Mapping[str, str] = field(default_factory=dict)
    enum_choices: Mapping[str, Sequence[str]] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return not (
            self.unknown
            or self.required
            or self.invalid_boolean
            or self.invalid_integer
            or self.invalid_number
            or self.invalid_enum
        )

    def enum_choices_for(self, name: str) -> tuple[str, ...]:
        return tuple(self.enum_choices.get(name, ()))


@runtime_checkable
class CatalogService(Protocol):
    def validate(self, scheme: str, params: Mapping[str, str]) -> CatalogOutcome:
        """
        Validate `params` against the schema registered for `scheme`.

        Raise UnknownSchemeError when the catalog has no such scheme.
        """
        ...
