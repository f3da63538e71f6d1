from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable

from .result import Result
from .scope import Scope


class VerifierNotFoundError(KeyError):
    pass


@runtime_checkable
class ComponentVerifier(Protocol):
    """
    Verifier contract for one component type.

    Configuration defects are reported in the returned Result, never raised.
    """

    def verify(self, scope: Scope, parameters: Mapping[str, Any]) -> Result: ...


@runtime_checkable
class VerifierRegistry(Protocol):
    def get(self, scheme: str) -> ComponentVerifier:
        """Return the verifier for scheme or raise VerifierNotFoundError."""
        ...

    def list(self) -> Iterable[str]:
        """List schemes with a registered verifier."""
        ...
