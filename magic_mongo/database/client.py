"""
MagicMongo: manages a MongoClient and creates MagicDatabases from it.

See :mod:`magic_mongo.database.single` and :mod:`magic_mongo.database.multi`
for the two ready-made ways of holding databases.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pymongo import MongoClient
from pymongo.errors import ConfigurationError
from pymongo.uri_parser import parse_uri

from magic_mongo.codecs import CodecRegistry, default_codec_registry
from magic_mongo.core.config import Settings, client_kwargs_with_defaults, get_settings
from magic_mongo.core.errors import redact_url
from magic_mongo.core.logging_config import get_logger

from .database import MagicDatabase

logger = get_logger(__name__)


class MagicMongo:
    """Manage MongoDB through MagicDatabases and MagicCollections.

    Driver options are resolved in this order: ``client_kwargs``, then options
    written in the connection URL, then ``client_defaults``.

    Args:
        connection_url: MongoDB connection URL, optionally naming a database in its path
        codec_registry: Codecs applied by every database and collection created
            from this mongo; ``default_codec_registry()`` when omitted
        client_defaults: Fallback ``MongoClient`` options; taken from the shared
            settings when omitted
        **client_kwargs: Extra options for ``pymongo.MongoClient``; they take
            precedence over the URL and the defaults
    """

    def __init__(
        self,
        connection_url: str,
        codec_registry: Optional[CodecRegistry] = None,
        client_defaults: Optional[Dict[str, Any]] = None,
        **client_kwargs: Any,
    ) -> None:
        self.connection_url = connection_url
        self.codec_registry = codec_registry if codec_registry is not None else default_codec_registry()
        if client_defaults is None:
            client_defaults = get_settings().client.to_client_kwargs()
        # MongoClient keyword arguments override URL options, so defaults must not be passed for those
        url_options = {key.lower() for key in parse_uri(connection_url)["options"]}
        defaults = {key: value for key, value in client_defaults.items() if key.lower() not in url_options}
        self.client: MongoClient = MongoClient(connection_url, **client_kwargs_with_defaults(client_kwargs, defaults))
        self.connection_database: Optional[str] = self._default_database_name()
        logger.info(f"Created MongoClient for {redact_url(connection_url)}")

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        codec_registry: Optional[CodecRegistry] = None,
        **client_kwargs: Any,
    ):
        """Create an instance from :mod:`magic_mongo.core.config` settings.

        Args:
            settings: Settings to use; the shared settings when omitted
            codec_registry: Codecs to use
            **client_kwargs: Extra options for ``pymongo.MongoClient``
        """
        settings = settings or get_settings()
        return cls(settings.mongo_url, codec_registry, client_defaults=settings.client.to_client_kwargs(), **client_kwargs)

    def _default_database_name(self) -> Optional[str]:
        try:
            return self.client.get_default_database().name
        except ConfigurationError:
            return None

    def new_magic_database(self, name: str) -> MagicDatabase:
        """Construct a MagicDatabase using this mongo's codec registry.

        Args:
            name: Name of the database

        Returns:
            The new MagicDatabase
        """
        logger.debug(f"Creating MagicDatabase {name}")
        return MagicDatabase(self.client.get_database(name), self.codec_registry)

    def ping(self) -> bool:
        """Check that the server answers; driver errors propagate."""
        response = self.client.admin.command("ping")
        return response.get("ok") == 1

    def close(self) -> None:
        self.client.close()
        logger.info(f"Closed MongoClient for {redact_url(self.connection_url)}")

    def __enter__(self):
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({redact_url(self.connection_url)!r})"
