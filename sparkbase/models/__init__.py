"""Shared document types."""

from sparkbase.models.document import Document, ReplaceMode, TypeKey

__all__ = ["Document", "ReplaceMode", "TypeKey"]
