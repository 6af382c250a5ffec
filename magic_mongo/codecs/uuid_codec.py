"""Codec storing ``uuid.UUID`` values as their canonical string form."""

from __future__ import annotations

import uuid
from typing import Any

from .base import Codec


class UUIDCodec(Codec[uuid.UUID]):
    """Encode UUIDs to strings and decode strings back into UUIDs.

    Storing the string keeps documents readable in shells and tools that do
    not render binary subtype 4 values.
    """

    python_type = uuid.UUID

    def encode(self, value: uuid.UUID) -> str:
        return str(value)

    def decode(self, value: Any) -> uuid.UUID:
        if isinstance(value, uuid.UUID):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Expected a UUID string, got {type(value).__name__}")
        return uuid.UUID(value)
