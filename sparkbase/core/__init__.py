"""
Core primitives: exception hierarchy, deferred actions and scan filters.
"""

from sparkbase.core.actions import Action, VoidAction
from sparkbase.core.exceptions import (
    AdapterRegistrationError,
    ConfigurationError,
    SparkbaseException,
    UnregisteredTypeError,
)
from sparkbase.core.filters import (
    Candidate,
    DocumentFilter,
    InstanceFilter,
    by_document,
    by_instance,
    by_query,
)

__all__ = [
    "Action",
    "VoidAction",
    "SparkbaseException",
    "UnregisteredTypeError",
    "AdapterRegistrationError",
    "ConfigurationError",
    "Candidate",
    "DocumentFilter",
    "InstanceFilter",
    "by_document",
    "by_instance",
    "by_query",
]
