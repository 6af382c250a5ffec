"""
MagicCollection: a typed wrapper around a pymongo collection.

This module provides the collection level operations of magic-mongo. A
MagicCollection is bound to one document class; reads are decoded into that
class and writes accept instances of it. Every filter, update, sort,
projection and index argument accepts either a mapping or one of the
builders from :mod:`magic_mongo.builders`.

Besides the typed driver surface it adds the convenience helpers
``find_one_by``, ``find_many``, ``insert_one_return_id``, ``upsert_one``,
``find_one_and_update_return``, ``find_one_and_upsert`` and
``delete_one_by``. Anything not wrapped here is delegated to the underlying
pymongo collection.
"""

from __future__ import annotations

import itertools
from collections.abc import Mapping
from typing import Any, Generic, Iterable, Iterator, List, Optional, Sequence, Type, Union

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.command_cursor import CommandCursor
from pymongo.cursor import Cursor
from pymongo.results import (
    BulkWriteResult,
    DeleteResult,
    InsertManyResult,
    InsertOneResult,
    UpdateResult,
)

from magic_mongo.builders import filters, resolve_bson
from magic_mongo.builders.base import BsonLike
from magic_mongo.codecs import CodecRegistry
from magic_mongo.core.errors import DocumentNotFoundError
from magic_mongo.core.logging_config import get_logger

from .document import DocumentMapper, DocumentType

logger = get_logger(__name__)

UpdateLike = Union[BsonLike, Sequence[BsonLike]]


def _key_list(keys: Optional[BsonLike]) -> Optional[list]:
    """Sort and index specifications as the ``(key, direction)`` pairs pymongo expects."""
    bson = resolve_bson(keys)
    return None if bson is None else list(bson.items())


class MagicCursor(Generic[DocumentType]):
    """Iterates a pymongo cursor, decoding each document into the collection's document class."""

    def __init__(self, cursor: Cursor, mapper: DocumentMapper[DocumentType]) -> None:
        self.cursor = cursor
        self.mapper = mapper

    def __iter__(self) -> Iterator[DocumentType]:
        for raw in self.cursor:
            yield self.mapper.decode(raw)

    def __enter__(self) -> "MagicCursor[DocumentType]":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def sort(self, sort: BsonLike) -> "MagicCursor[DocumentType]":
        self.cursor.sort(_key_list(sort))
        return self

    def limit(self, limit: int) -> "MagicCursor[DocumentType]":
        self.cursor.limit(limit)
        return self

    def skip(self, skip: int) -> "MagicCursor[DocumentType]":
        self.cursor.skip(skip)
        return self

    def first(self) -> Optional[DocumentType]:
        """The first matching document, or None. Does not advance this cursor."""
        for raw in self.cursor.clone().limit(1):
            return self.mapper.decode(raw)
        return None

    def to_list(self, length: Optional[int] = None) -> List[DocumentType]:
        """Decode up to ``length`` documents; the rest stay in the cursor."""
        return list(itertools.islice(self, length))

    def close(self) -> None:
        self.cursor.close()


class MagicCollection(Generic[DocumentType]):
    """A MongoDB collection bound to a document class.

    Args:
        database: A pymongo ``Database`` or a MagicDatabase
        name: Name of the collection
        document_class: ``dict`` or a pydantic model class documents are decoded into
        codec_registry: Codecs applied to documents, filters and updates
    """

    def __init__(
        self,
        database: Any,
        name: str,
        document_class: Type[DocumentType],
        codec_registry: Optional[CodecRegistry] = None,
    ) -> None:
        self.collection: Collection = database.get_collection(name)
        self.name = name
        self.document_class = document_class
        self.mapper: DocumentMapper[DocumentType] = DocumentMapper(document_class, codec_registry)

    @property
    def codec_registry(self) -> CodecRegistry:
        return self.mapper.codec_registry

    def __getattr__(self, item: str) -> Any:
        # Only reached for attributes the wrapper does not define
        collection = self.__dict__.get("collection")
        if collection is None or item.startswith("_"):
            raise AttributeError(item)
        return getattr(collection, item)

    def __repr__(self) -> str:
        return f"MagicCollection(name={self.name!r}, document_class={getattr(self.document_class, '__name__', self.document_class)})"

    # =====================================================================
    # Argument conversion
    # =====================================================================

    def _filter(self, filter: Optional[BsonLike]) -> dict:
        return self.mapper.encode_bson(resolve_bson(filter)) or {}

    def _update(self, update: UpdateLike) -> Union[dict, list]:
        # A list is an aggregation pipeline update
        if isinstance(update, (list, tuple)):
            return [self.mapper.encode_bson(resolve_bson(stage)) for stage in update]
        return self.mapper.encode_bson(resolve_bson(update))

    @staticmethod
    def _projection(projection: Optional[BsonLike]) -> Optional[dict]:
        return resolve_bson(projection)

    # =====================================================================
    # Convenience helpers
    # =====================================================================

    def find_one(
        self,
        filter: Optional[BsonLike] = None,
        projection: Optional[BsonLike] = None,
        sort: Optional[BsonLike] = None,
        **kwargs: Any,
    ) -> Optional[DocumentType]:
        """Find the first document matching ``filter``.

        Returns:
            The decoded document or None if nothing matches
        """
        raw = self.collection.find_one(
            self._filter(filter), projection=self._projection(projection), sort=_key_list(sort), **kwargs
        )
        return self.mapper.decode(raw)

    def find_one_by(self, field: str, value: Any, **kwargs: Any) -> Optional[DocumentType]:
        """Find the first document whose ``field`` equals ``value``."""
        return self.find_one(filters.eq(field, value), **kwargs)

    def find_many(self, filter: Optional[BsonLike] = None, **kwargs: Any) -> List[DocumentType]:
        """Find every document matching ``filter`` and return them as a list."""
        return self.find(filter, **kwargs).to_list()

    def insert_one_return_id(self, document: DocumentType, **kwargs: Any) -> ObjectId:
        """Insert ``document`` and return its ObjectId.

        Raises:
            TypeError: If the inserted id is not an ObjectId
        """
        inserted_id = self.insert_one(document, **kwargs).inserted_id
        if not isinstance(inserted_id, ObjectId):
            raise TypeError(f"Inserted id {inserted_id!r} is not an ObjectId")
        logger.debug(f"Inserted document {inserted_id} into {self.name}")
        return inserted_id

    def upsert_one(self, filter: BsonLike, update: UpdateLike, **kwargs: Any) -> UpdateResult:
        """Update the first matching document, inserting one if nothing matches."""
        result = self.update_one(filter, update, upsert=True, **kwargs)
        if result.upserted_id is not None:
            logger.debug(f"Upserted document {result.upserted_id} into {self.name}")
        return result

    def find_one_and_update_return(
        self, filter: BsonLike, update: UpdateLike, **kwargs: Any
    ) -> Optional[DocumentType]:
        """Update the first matching document and return it as it is after the update."""
        return self.find_one_and_update(filter, update, return_document=ReturnDocument.AFTER, **kwargs)

    def find_one_and_upsert(self, filter: BsonLike, update: UpdateLike, **kwargs: Any) -> DocumentType:
        """Update or insert the first matching document and return it after the write.

        Raises:
            DocumentNotFoundError: If the server returned no document
        """
        document = self.find_one_and_update(
            filter, update, upsert=True, return_document=ReturnDocument.AFTER, **kwargs
        )
        if document is None:
            raise DocumentNotFoundError(self.name, "find_one_and_upsert")
        logger.debug(f"find_one_and_upsert returned a document from {self.name}")
        return document

    def delete_one_by(self, field: str, value: Any, **kwargs: Any) -> DeleteResult:
        """Delete the first document whose ``field`` equals ``value``."""
        return self.delete_one(filters.eq(field, value), **kwargs)

    # =====================================================================
    # Reads
    # =====================================================================

    def find(
        self,
        filter: Optional[BsonLike] = None,
        projection: Optional[BsonLike] = None,
        sort: Optional[BsonLike] = None,
        **kwargs: Any,
    ) -> MagicCursor[DocumentType]:
        cursor = self.collection.find(
            self._filter(filter), projection=self._projection(projection), sort=_key_list(sort), **kwargs
        )
        return MagicCursor(cursor, self.mapper)

    def count_documents(self, filter: Optional[BsonLike] = None, **kwargs: Any) -> int:
        return self.collection.count_documents(self._filter(filter), **kwargs)

    def estimated_document_count(self, **kwargs: Any) -> int:
        return self.collection.estimated_document_count(**kwargs)

    def distinct(self, key: str, filter: Optional[BsonLike] = None, **kwargs: Any) -> list:
        return self.collection.distinct(key, self._filter(filter) if filter is not None else None, **kwargs)

    def aggregate(self, pipeline: Sequence[BsonLike], **kwargs: Any) -> CommandCursor:
        """Run an aggregation pipeline. Results are raw documents, as their shape rarely matches the model."""
        stages = [self.mapper.encode_bson(resolve_bson(stage)) for stage in pipeline]
        return self.collection.aggregate(stages, **kwargs)

    def watch(self, pipeline: Optional[Sequence[BsonLike]] = None, **kwargs: Any):
        stages = None if pipeline is None else [self.mapper.encode_bson(resolve_bson(stage)) for stage in pipeline]
        return self.collection.watch(stages, **kwargs)

    # =====================================================================
    # Writes
    # =====================================================================

    def insert_one(self, document: DocumentType, **kwargs: Any) -> InsertOneResult:
        result = self.collection.insert_one(self.mapper.encode(document), **kwargs)
        self.mapper.assign_id(document, result.inserted_id)
        return result

    def insert_many(self, documents: Iterable[DocumentType], **kwargs: Any) -> InsertManyResult:
        documents = list(documents)
        result = self.collection.insert_many([self.mapper.encode(document) for document in documents], **kwargs)
        for document, inserted_id in zip(documents, result.inserted_ids):
            self.mapper.assign_id(document, inserted_id)
        return result

    def replace_one(self, filter: BsonLike, replacement: DocumentType, **kwargs: Any) -> UpdateResult:
        return self.collection.replace_one(self._filter(filter), self.mapper.encode(replacement), **kwargs)

    def update_one(self, filter: BsonLike, update: UpdateLike, **kwargs: Any) -> UpdateResult:
        return self.collection.update_one(self._filter(filter), self._update(update), **kwargs)

    def update_many(self, filter: BsonLike, update: UpdateLike, **kwargs: Any) -> UpdateResult:
        return self.collection.update_many(self._filter(filter), self._update(update), **kwargs)

    def delete_one(self, filter: BsonLike, **kwargs: Any) -> DeleteResult:
        return self.collection.delete_one(self._filter(filter), **kwargs)

    def delete_many(self, filter: BsonLike, **kwargs: Any) -> DeleteResult:
        return self.collection.delete_many(self._filter(filter), **kwargs)

    def bulk_write(self, requests: Sequence[Any], **kwargs: Any) -> BulkWriteResult:
        return self.collection.bulk_write(list(requests), **kwargs)

    def find_one_and_update(
        self,
        filter: BsonLike,
        update: UpdateLike,
        projection: Optional[BsonLike] = None,
        sort: Optional[BsonLike] = None,
        **kwargs: Any,
    ) -> Optional[DocumentType]:
        raw = self.collection.find_one_and_update(
            self._filter(filter),
            self._update(update),
            projection=self._projection(projection),
            sort=_key_list(sort),
            **kwargs,
        )
        return self.mapper.decode(raw)

    def find_one_and_replace(
        self,
        filter: BsonLike,
        replacement: DocumentType,
        projection: Optional[BsonLike] = None,
        sort: Optional[BsonLike] = None,
        **kwargs: Any,
    ) -> Optional[DocumentType]:
        raw = self.collection.find_one_and_replace(
            self._filter(filter),
            self.mapper.encode(replacement),
            projection=self._projection(projection),
            sort=_key_list(sort),
            **kwargs,
        )
        return self.mapper.decode(raw)

    def find_one_and_delete(
        self,
        filter: BsonLike,
        projection: Optional[BsonLike] = None,
        sort: Optional[BsonLike] = None,
        **kwargs: Any,
    ) -> Optional[DocumentType]:
        raw = self.collection.find_one_and_delete(
            self._filter(filter), projection=self._projection(projection), sort=_key_list(sort), **kwargs
        )
        return self.mapper.decode(raw)

    # =====================================================================
    # Indexes and collection management
    # =====================================================================

    def create_index(self, keys: BsonLike, **kwargs: Any) -> str:
        name = self.collection.create_index(_key_list(keys), **kwargs)
        logger.debug(f"Created index {name} on collection {self.name}")
        return name

    def create_indexes(self, indexes: Sequence[Any], **kwargs: Any) -> List[str]:
        return self.collection.create_indexes(list(indexes), **kwargs)

    def drop_index(self, index_or_name: Union[str, BsonLike], **kwargs: Any) -> None:
        if not isinstance(index_or_name, str):
            index_or_name = _key_list(index_or_name)
        self.collection.drop_index(index_or_name, **kwargs)

    def drop_indexes(self, **kwargs: Any) -> None:
        self.collection.drop_indexes(**kwargs)

    def list_indexes(self, **kwargs: Any) -> CommandCursor:
        return self.collection.list_indexes(**kwargs)

    def rename(self, new_name: str, **kwargs: Any) -> Mapping:
        """Rename the collection. This wrapper keeps pointing at the new name."""
        result = self.collection.rename(new_name, **kwargs)
        logger.info(f"Renamed collection {self.name} to {new_name}")
        self.collection = self.collection.database.get_collection(new_name)
        self.name = new_name
        return result

    def drop(self, **kwargs: Any) -> None:
        self.collection.drop(**kwargs)
        logger.info(f"Dropped collection {self.name}")
