from __future__ import annotations

from dataclasses import dataclass

from .catalog import CatalogService
from .converter import ValueConverter
from .registry import ObjectRegistry


@dataclass(frozen=True, slots=True)
class VerifierRuntime:
    """
    Services a verifier depends on, injected once at construction.

    All three must be safe to share between threads when the verifier is.
    """

    catalog: CatalogService
    converter: ValueConverter
    registry: ObjectRegistry
