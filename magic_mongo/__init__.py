"""magic-mongo.

A common framework for MongoDB management, built on pymongo.

High-level architecture
-----------------------

- ``MagicMongo`` owns a ``MongoClient`` and creates ``MagicDatabase``
  instances. ``SingleMongo`` holds the one database named in the connection
  URL; ``MultiMongo`` loads any number of databases by name.
- ``MagicDatabase`` keeps a registry of ``MagicCollection`` instances keyed
  by document class (and by name).
- ``MagicCollection`` is a collection bound to a document class, usually a
  ``MagicDocument`` pydantic model. Reads decode into the class, writes accept
  it, and the codec registry converts values such as ``uuid.UUID`` on the way
  out.
- ``magic_mongo.builders`` provides filter, sort, projection, index and update
  builders.

Typical workflow
----------------

1. ``mongo = SingleMongo("mongodb://localhost:27017/shop")``
2. ``users = mongo.database.load_magic_collection("users", User)``
3. ``users.insert_one(User(name="srnyx"))``
4. ``users.find_one_by("name", "srnyx")``

Logging is not configured on import; call
``magic_mongo.core.setup_logging()`` from the application.
"""

from magic_mongo.builders import (
    FilterBuilder,
    IndexBuilder,
    MongoBsonBuilder,
    ProjectionBuilder,
    SortBuilder,
    UpdateBuilder,
)
from magic_mongo.codecs import Codec, CodecRegistry, UUIDCodec, default_codec_registry
from magic_mongo.core.errors import (
    CodecConfigurationError,
    CollectionNotLoadedError,
    DatabaseNotLoadedError,
    DocumentNotFoundError,
    EmptyBuilderError,
    MagicMongoError,
    MissingDatabaseNameError,
)
from magic_mongo.database import (
    MagicCollection,
    MagicCursor,
    MagicDatabase,
    MagicDocument,
    MagicMongo,
    MultiMongo,
    SingleMongo,
)

__version__ = "1.2.2"

__all__ = [
    "Codec",
    "CodecConfigurationError",
    "CodecRegistry",
    "CollectionNotLoadedError",
    "DatabaseNotLoadedError",
    "DocumentNotFoundError",
    "EmptyBuilderError",
    "FilterBuilder",
    "IndexBuilder",
    "MagicCollection",
    "MagicCursor",
    "MagicDatabase",
    "MagicDocument",
    "MagicMongo",
    "MagicMongoError",
    "MissingDatabaseNameError",
    "MongoBsonBuilder",
    "MultiMongo",
    "ProjectionBuilder",
    "SortBuilder",
    "UUIDCodec",
    "UpdateBuilder",
    "__version__",
    "default_codec_registry",
]
