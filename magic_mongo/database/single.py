"""SingleMongo: a MagicMongo holding the one database named in its connection URL."""

from __future__ import annotations

from typing import Any, Optional

from magic_mongo.codecs import CodecRegistry
from magic_mongo.core.errors import MissingDatabaseNameError

from .client import MagicMongo
from .database import MagicDatabase


class SingleMongo(MagicMongo):
    """A MagicMongo with a single MagicDatabase, taken from the connection URL.

    Raises:
        MissingDatabaseNameError: If the connection URL names no database
    """

    def __init__(
        self,
        connection_url: str,
        codec_registry: Optional[CodecRegistry] = None,
        **client_kwargs: Any,
    ) -> None:
        super().__init__(connection_url, codec_registry, **client_kwargs)

        if self.connection_database is None:
            self.client.close()
            raise MissingDatabaseNameError(connection_url)
        self.database: MagicDatabase = self.new_magic_database(self.connection_database)
