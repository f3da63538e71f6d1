from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from compverify.contracts import (
    ComponentVerifier,
    NameNotBoundError,
    ObjectRegistry,
    VerifierNotFoundError,
    VerifierRegistry,
)


@dataclass
class DictVerifierRegistry(VerifierRegistry):
    verifiers: dict[str, ComponentVerifier]

    def get(self, scheme: str) -> ComponentVerifier:
        try:
            return self.verifiers[scheme]
        except KeyError as e:
            raise VerifierNotFoundError(scheme) from e

    def list(self) -> Iterable[str]:
        return list(self.verifiers)


@dataclass
class DictObjectRegistry(ObjectRegistry):
    objects: dict[str, Any] = field(default_factory=dict)

    def resolve(self, name: str) -> Any:
        try:
            return self.objects[name]
        except KeyError as e:
            raise NameNotBoundError(name) from e

    def names(self) -> Iterable[str]:
        return list(self.objects)
