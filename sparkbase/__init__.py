"""
sparkbase: adapter-driven object/document mapping for MongoDB collections.

Exports:
  - SparkCollection: Deferred CRUD facade over one collection
  - Action, VoidAction: Deferred computation wrappers
  - DataAdapter, PydanticModelAdapter, DocumentedAdapter: Adapter contract and implementations
  - AdapterRegistry, get_adapter_registry: Type-keyed adapter lookup
  - by_document, by_instance, by_query: Explicit filter targets
  - ReplaceMode: Replace-one / replace-all selection for push_or_replace
"""

from sparkbase.application.adapters import (
    AdapterRegistry,
    DataAdapter,
    DocumentedAdapter,
    PydanticModelAdapter,
    get_adapter_registry,
)
from sparkbase.boundary.db.collection import SparkCollection
from sparkbase.core.actions import Action, VoidAction
from sparkbase.core.filters import by_document, by_instance, by_query
from sparkbase.models.document import Document, ReplaceMode

__all__ = [
    "Action",
    "VoidAction",
    "AdapterRegistry",
    "DataAdapter",
    "DocumentedAdapter",
    "PydanticModelAdapter",
    "get_adapter_registry",
    "SparkCollection",
    "by_document",
    "by_instance",
    "by_query",
    "Document",
    "ReplaceMode",
]
