"""
MagicDatabase: a wrapper around a pymongo database.

A MagicDatabase keeps a registry of loaded MagicCollections keyed by their
document class, plus a name to class map so collections can also be looked
up by name. Everything else is delegated to the wrapped pymongo database.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Type

from pymongo.database import Database

from magic_mongo.codecs import CodecRegistry
from magic_mongo.core.errors import CollectionNotLoadedError
from magic_mongo.core.logging_config import get_logger

from .collection import MagicCollection
from .document import DocumentType

logger = get_logger(__name__)


class MagicDatabase:
    """A MongoDB database with a registry of typed collections.

    Args:
        database: The pymongo database to wrap
        codec_registry: Codecs handed to every collection created from this database
    """

    def __init__(self, database: Database, codec_registry: Optional[CodecRegistry] = None) -> None:
        self.database = database
        self.codec_registry = codec_registry if codec_registry is not None else CodecRegistry()
        self.name_to_class: Dict[str, type] = {}
        self.collections: Dict[type, MagicCollection[Any]] = {}

    @property
    def name(self) -> str:
        return self.database.name

    @property
    def client(self):
        return self.database.client

    def __getattr__(self, item: str) -> Any:
        # Only reached for attributes the wrapper does not define
        database = self.__dict__.get("database")
        if database is None or item.startswith("_"):
            raise AttributeError(item)
        return getattr(database, item)

    def __repr__(self) -> str:
        return f"MagicDatabase(name={self.name!r}, collections={sorted(self.name_to_class)!r})"

    def new_magic_collection(self, name: str, document_class: Type[DocumentType]) -> MagicCollection[DocumentType]:
        """Construct, but don't load, a MagicCollection.

        Useful to store collections your own way, e.g. when one class is used
        for several collections.

        Args:
            name: Name of the collection
            document_class: Class documents are decoded into

        Returns:
            The new MagicCollection
        """
        return MagicCollection(self.database, name, document_class, self.codec_registry)

    def load_magic_collection(self, name: str, document_class: Type[DocumentType]) -> MagicCollection[DocumentType]:
        """Construct a MagicCollection and register it under its name and class.

        Loading another collection for an already loaded class replaces the
        class entry.

        Args:
            name: Name of the collection
            document_class: Class documents are decoded into

        Returns:
            The new MagicCollection
        """
        collection = self.new_magic_collection(name, document_class)
        self.name_to_class[name] = document_class
        self.collections[document_class] = collection
        logger.debug(f"Loaded collection {self.name}.{name} for {getattr(document_class, '__name__', document_class)}")
        return collection

    def load_magic_collections(self, to_load: Mapping[str, type]) -> "MagicDatabase":
        """Load several collections from a mapping of names to classes.

        Returns:
            This MagicDatabase, for chaining
        """
        for name, document_class in to_load.items():
            self.load_magic_collection(name, document_class)
        return self

    def get_magic_collection(self, document_class: Type[DocumentType]) -> MagicCollection[DocumentType]:
        """Get the loaded MagicCollection for a document class.

        Raises:
            CollectionNotLoadedError: If no collection was loaded for the class
        """
        collection = self.collections.get(document_class)
        if collection is None:
            raise CollectionNotLoadedError(document_class=document_class)
        return collection

    def get_magic_collection_by_name(self, name: str) -> MagicCollection[Any]:
        """Get a loaded MagicCollection by name.

        Prefer :meth:`get_magic_collection`, which keeps the document type.

        Raises:
            CollectionNotLoadedError: If no collection was loaded under the name
        """
        document_class = self.name_to_class.get(name)
        if document_class is None:
            raise CollectionNotLoadedError(name=name)
        return self.get_magic_collection(document_class)

    def with_codec_registry(self, codec_registry: CodecRegistry) -> "MagicDatabase":
        """A new MagicDatabase over the same database using ``codec_registry``, with no collections loaded."""
        return MagicDatabase(self.database, codec_registry)

    def get_collection(self, name: str, **kwargs: Any):
        return self.database.get_collection(name, **kwargs)

    def drop(self, **kwargs: Any) -> None:
        """Drop the whole database and forget loaded collections."""
        self.database.client.drop_database(self.database.name, **kwargs)
        self.name_to_class.clear()
        self.collections.clear()
        logger.info(f"Dropped database {self.name}")
