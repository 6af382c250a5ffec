"""MultiMongo: a MagicMongo holding any number of named MagicDatabases."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Union

from magic_mongo.codecs import CodecRegistry
from magic_mongo.core.errors import DatabaseNotLoadedError
from magic_mongo.core.logging_config import get_logger

from .client import MagicMongo
from .database import MagicDatabase

logger = get_logger(__name__)


class MultiMongo(MagicMongo):
    """A MagicMongo with several MagicDatabases that can be loaded and looked up by name.

    The database named in the connection URL, if any, is loaded on construction.
    """

    def __init__(
        self,
        connection_url: str,
        codec_registry: Optional[CodecRegistry] = None,
        **client_kwargs: Any,
    ) -> None:
        super().__init__(connection_url, codec_registry, **client_kwargs)
        self.databases: Dict[str, MagicDatabase] = {}

        if self.connection_database is not None:
            self.load_magic_database(self.connection_database)

    def load_magic_database(self, name: str) -> MagicDatabase:
        """Construct a MagicDatabase and load it, replacing one already loaded under ``name``."""
        database = self.new_magic_database(name)
        self.databases[name] = database
        logger.debug(f"Loaded database {name}")
        return database

    def load_magic_databases(self, to_load: Union[str, Iterable[str]]) -> "MultiMongo":
        """Load several databases by name.

        Returns:
            This MultiMongo, for chaining
        """
        names = [to_load] if isinstance(to_load, str) else to_load
        for name in names:
            self.load_magic_database(name)
        return self

    def get_magic_database(self, name: str) -> MagicDatabase:
        """Get a loaded MagicDatabase by name.

        Raises:
            DatabaseNotLoadedError: If no database was loaded under ``name``
        """
        database = self.databases.get(name)
        if database is None:
            raise DatabaseNotLoadedError(name)
        return database
