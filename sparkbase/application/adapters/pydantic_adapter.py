"""
Pydantic model adapter.

Maps pydantic models to documents with model_dump()/model_validate().

Dependencies: pydantic
System role: Default adapter for schema-defined application types
"""

from typing import Any, TypeVar

from pydantic import BaseModel

from sparkbase.application.adapters.base_adapter import DataAdapter
from sparkbase.models.document import Document

ModelT = TypeVar("ModelT", bound=BaseModel)

ID_FIELD = "_id"


class PydanticModelAdapter(DataAdapter[ModelT]):
    """
    Adapter for pydantic models.

    The driver-assigned ``_id`` is stripped before validation unless the
    model declares a field named or aliased ``_id``, so models that do not
    track the id need not declare it. Malformed documents raise
    ``pydantic.ValidationError``.

    Attributes:
        model: The pydantic model class to map
        dump_options: Extra keyword arguments forwarded to model_dump()
        keeps_id: Whether stored ``_id`` values reach the model
    """

    def __init__(self, model: type[ModelT], **dump_options: Any) -> None:
        """
        Initialize adapter with target model.

        Args:
            model: Pydantic model class
            **dump_options: model_dump() options (by_alias, exclude, ...)
        """
        self.model = model
        self.dump_options = dump_options
        self.keeps_id = declares_id_field(model)

    def serialize(self, instance: ModelT) -> Document:
        return instance.model_dump(**self.dump_options)

    def deserialize(self, document: Document) -> ModelT:
        if self.keeps_id:
            return self.model.model_validate(document)
        payload = {key: value for key, value in document.items() if key != ID_FIELD}
        return self.model.model_validate(payload)


def declares_id_field(model: type[BaseModel]) -> bool:
    """Whether any field of model is named, aliased or validated as ``_id``."""
    for name, field in model.model_fields.items():
        if ID_FIELD in (name, field.alias, field.validation_alias):
            return True
    return False
