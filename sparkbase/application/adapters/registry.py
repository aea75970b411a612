"""
Adapter registry.

Explicit map from a type key (class identity or string tag) to its adapter.
Lookups never walk the MRO: a subclass needs its own registration.

Dependencies: threading, functools, sparkbase.application.adapters
System role: Type-keyed adapter dispatch for the collection facade
"""

import threading
from functools import lru_cache

from pydantic import BaseModel

from sparkbase.application.adapters.base_adapter import DataAdapter, DocumentedAdapter
from sparkbase.application.adapters.pydantic_adapter import PydanticModelAdapter
from sparkbase.core.exceptions import AdapterRegistrationError, UnregisteredTypeError
from sparkbase.models.document import TypeKey, type_display_name
from sparkbase.observability.logger import get_logger

logger = get_logger(__name__)


class AdapterRegistry:
    """
    Registry holding at most one adapter per type key.

    Register adapters at start-up, before issuing collection operations.

    Example:
        >>> registry = AdapterRegistry()
        >>> adapter = registry.register_model(User)
        >>> registry.lookup(User) is adapter
        True
    """

    def __init__(self) -> None:
        self._adapters: dict[TypeKey, DataAdapter] = {}
        self._lock = threading.Lock()

    def register(self, type_key: TypeKey, adapter: DataAdapter, *, replace: bool = False) -> DataAdapter:
        """
        Register an adapter for a type key.

        Args:
            type_key: Class or string tag
            adapter: Adapter handling that type
            replace: Overwrite an existing registration instead of failing

        Returns:
            DataAdapter: The registered adapter

        Raises:
            AdapterRegistrationError: If the key is taken and replace is False
            TypeError: If adapter is not a DataAdapter
        """
        if not isinstance(adapter, DataAdapter):
            raise TypeError(f"adapter must be a DataAdapter, got {type(adapter).__name__}")
        with self._lock:
            if type_key in self._adapters and not replace:
                raise AdapterRegistrationError(type_display_name(type_key))
            self._adapters[type_key] = adapter
        logger.debug("Registered %s for %s", type(adapter).__name__, type_display_name(type_key))
        return adapter

    def register_model(self, model: type[BaseModel], *, replace: bool = False, **dump_options) -> PydanticModelAdapter:
        """Register a PydanticModelAdapter keyed by the model class."""
        return self.register(model, PydanticModelAdapter(model, **dump_options), replace=replace)

    def register_documented(self, cls: type, *, replace: bool = False) -> DocumentedAdapter:
        """Register a DocumentedAdapter keyed by a self-serializing class."""
        return self.register(cls, DocumentedAdapter(cls), replace=replace)

    def unregister(self, type_key: TypeKey) -> bool:
        """
        Remove a registration.

        Returns:
            bool: True if an adapter was removed
        """
        with self._lock:
            return self._adapters.pop(type_key, None) is not None

    def lookup(self, type_key: TypeKey) -> DataAdapter | None:
        """
        Find the adapter for a type key by exact identity.

        Returns:
            DataAdapter if registered, None otherwise
        """
        return self._adapters.get(type_key)

    def require(self, type_key: TypeKey, operation: str | None = None) -> DataAdapter:
        """
        Find the adapter for a type key or fail.

        Args:
            type_key: Class or string tag
            operation: Name of the calling operation, recorded in the error

        Returns:
            DataAdapter: The registered adapter

        Raises:
            UnregisteredTypeError: If no adapter is registered
        """
        adapter = self.lookup(type_key)
        if adapter is None:
            logger.warning("No adapter registered for %s (operation=%s)", type_display_name(type_key), operation)
            raise UnregisteredTypeError(type_display_name(type_key), operation)
        return adapter

    def registered_types(self) -> list[TypeKey]:
        with self._lock:
            return list(self._adapters)

    def __contains__(self, type_key: object) -> bool:
        return type_key in self._adapters

    def __len__(self) -> int:
        return len(self._adapters)


@lru_cache
def get_adapter_registry() -> AdapterRegistry:
    """
    Get the process-wide default registry.

    Returns:
        AdapterRegistry: Shared registry used when a collection gets none
    """
    return AdapterRegistry()
