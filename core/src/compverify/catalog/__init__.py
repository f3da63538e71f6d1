"""Schema catalog used to validate component options."""

from compverify.catalog.in_memory import InMemoryCatalog
from compverify.catalog.schema import ComponentSchema, OptionSchema

__all__ = ["InMemoryCatalog", "ComponentSchema", "OptionSchema"]
