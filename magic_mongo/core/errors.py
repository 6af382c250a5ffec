"""Error types for the magic-mongo package.

Defines a small hierarchy of exceptions raised by the database wrappers,
builders and codec registry. Each also derives from the builtin exception a
caller would naturally catch (``KeyError`` for failed lookups, ``ValueError``
for bad input), so generic handlers keep working.

Errors raised by the driver itself (``pymongo.errors``) are not wrapped.
"""

from __future__ import annotations

import re
from typing import Any, Optional

_CREDENTIALS = re.compile(r"^(?P<scheme>[a-z0-9+.-]+://)(?P<user>[^:@/]*):(?P<password>[^@/]*)@", re.IGNORECASE)


def redact_url(url: str) -> str:
    """Mask the password of a connection URL so it can be logged or raised."""
    return _CREDENTIALS.sub(lambda m: f"{m.group('scheme')}{m.group('user')}:***@", url, count=1)


class MagicMongoError(Exception):
    """Base error for all magic-mongo exceptions."""


class MissingDatabaseNameError(MagicMongoError, ValueError):
    """Raised when a connection URL must name a database but does not."""

    def __init__(self, connection_url: str) -> None:
        super().__init__(f"No database name found in connection URL: {redact_url(connection_url)}")
        self.connection_url = redact_url(connection_url)


class DatabaseNotLoadedError(MagicMongoError, KeyError):
    """Raised when no MagicDatabase has been loaded under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No MagicDatabase found with name {name}")
        self.name = name

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class CollectionNotLoadedError(MagicMongoError, KeyError):
    """Raised when no MagicCollection has been loaded for a document class or name.

    Args:
        document_class: The class that was looked up, if any.
        name: The collection name that was looked up, if any.
    """

    def __init__(self, *, document_class: Optional[type] = None, name: Optional[str] = None) -> None:
        if name is not None:
            message = f"No MagicCollection found with name {name}"
        else:
            message = f"No MagicCollection found for class {document_class}"
        super().__init__(message)
        self.document_class = document_class
        self.name = name

    def __str__(self) -> str:
        return str(self.args[0])


class EmptyBuilderError(MagicMongoError, ValueError):
    """Raised by ``build()`` on a builder that holds nothing and has no default."""

    def __init__(self, builder: Any) -> None:
        super().__init__(f"{type(builder).__name__}: bson cannot be None!")


class CodecConfigurationError(MagicMongoError, LookupError):
    """Raised when the codec registry has no codec for a type."""

    def __init__(self, python_type: type) -> None:
        super().__init__(f"Can't find a codec for {python_type!r}")
        self.python_type = python_type


class DocumentNotFoundError(MagicMongoError):
    """Raised when an operation that must yield a document returned nothing."""

    def __init__(self, collection_name: str, operation: str) -> None:
        super().__init__(f"{operation} on collection '{collection_name}' returned no document")
        self.collection_name = collection_name
        self.operation = operation
