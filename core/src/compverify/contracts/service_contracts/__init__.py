from .catalog import CatalogOutcome, CatalogService, UnknownSchemeError
from .converter import ConversionError, ValueConverter
from .registry import NameNotBoundError, ObjectRegistry
from .runtime import VerifierRuntime

__all__ = [
    "CatalogOutcome",
    "CatalogService",
    "UnknownSchemeError",
    "ConversionError",
    "ValueConverter",
    "NameNotBoundError",
    "ObjectRegistry",
    "VerifierRuntime",
]
