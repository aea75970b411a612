"""Object/document adapters and the type-keyed registry."""

from .base_adapter import DataAdapter, Documented, DocumentedAdapter
from .pydantic_adapter import PydanticModelAdapter
from .registry import AdapterRegistry, get_adapter_registry

__all__ = [
    "DataAdapter",
    "Documented",
    "DocumentedAdapter",
    "PydanticModelAdapter",
    "AdapterRegistry",
    "get_adapter_registry",
]
