"""
Document models and the mapping between models and stored documents.

Collections are typed by a document class. Pydantic models, usually
subclasses of :class:`MagicDocument`, are dumped by alias before writing and
validated back after reading; the ``dict`` document class passes raw
documents through untouched.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any, Dict, Generic, Optional, Type, TypeVar

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field

from magic_mongo.codecs import CodecRegistry

ID_FIELD = "_id"

DocumentType = TypeVar("DocumentType")


class MagicDocument(BaseModel):
    """Base class for documents stored in a MagicCollection."""

    model_config = ConfigDict(arbitrary_types_allowed=True, populate_by_name=True, use_enum_values=True)

    id: Optional[ObjectId] = Field(default=None, alias=ID_FIELD)


def id_field_name(model_class: Type[BaseModel]) -> Optional[str]:
    """Name of the model field stored as ``_id``, if the model has one."""
    for name, field in model_class.model_fields.items():
        if field.alias == ID_FIELD:
            return name
    return None


class DocumentMapper(Generic[DocumentType]):
    """Converts between a document class and the mappings the driver reads and writes.

    Args:
        document_class: ``dict`` (or another mapping type) or a pydantic model class
        codec_registry: Codecs applied to every value on the way out
    """

    def __init__(self, document_class: Type[DocumentType], codec_registry: Optional[CodecRegistry] = None) -> None:
        self.document_class = document_class
        self.codec_registry = codec_registry if codec_registry is not None else CodecRegistry()
        self.is_model = isinstance(document_class, type) and issubclass(document_class, BaseModel)

    def encode(self, document: Any) -> Dict[str, Any]:
        """Turn a model or mapping into a document ready for the driver."""
        if isinstance(document, BaseModel):
            data = document.model_dump(by_alias=True)
            if data.get(ID_FIELD, ...) is None:
                # Let the driver generate an _id
                del data[ID_FIELD]
        elif isinstance(document, Mapping):
            data = dict(document)
        else:
            raise TypeError(f"Cannot store {type(document).__name__}; expected a pydantic model or a mapping")
        return self.codec_registry.encode(data)

    def encode_bson(self, bson: Optional[Mapping]) -> Optional[Dict[str, Any]]:
        """Apply codecs to a filter or update document."""
        return None if bson is None else self.codec_registry.encode(bson)

    def decode(self, raw: Optional[Mapping]) -> Optional[DocumentType]:
        """Turn a stored document into an instance of the document class."""
        if raw is None:
            return None
        if self.is_model:
            return self.document_class.model_validate(dict(raw))
        return raw

    def assign_id(self, document: Any, inserted_id: Any) -> None:
        """Write a driver generated id back onto a document that had none."""
        if isinstance(document, MutableMapping):
            document.setdefault(ID_FIELD, inserted_id)
            return
        if not isinstance(document, BaseModel):
            return
        name = id_field_name(type(document))
        if name is not None and getattr(document, name) is None:
            setattr(document, name, inserted_id)
