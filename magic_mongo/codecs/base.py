"""
Value codecs and the registry that applies them.

A codec converts one Python type to a value BSON can store and back. The
registry holds codecs keyed by Python type and walks documents, filters and
updates to encode every leaf value that has a registered codec.

BSON's own type hooks (``bson.codec_options.TypeRegistry``) cannot change how
types that BSON already knows are written, ``uuid.UUID`` among them, so the
conversion happens here before a document reaches the driver.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Dict, Generic, Optional, Type, TypeVar

from magic_mongo.core.errors import CodecConfigurationError

PythonType = TypeVar("PythonType")


class Codec(ABC, Generic[PythonType]):
    """Converts values of ``python_type`` to and from a BSON compatible value."""

    python_type: Type[PythonType]

    @abstractmethod
    def encode(self, value: PythonType) -> Any:
        """Convert a Python value into a value BSON can store."""

    @abstractmethod
    def decode(self, value: Any) -> PythonType:
        """Convert a stored value back into ``python_type``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(python_type={self.python_type.__name__})"


class CodecRegistry:
    """An ordered collection of codecs keyed by the Python type they handle."""

    def __init__(self, *codecs: Codec) -> None:
        self._codecs: Dict[type, Codec] = {}
        for codec in codecs:
            self.register(codec)

    @classmethod
    def from_codecs(cls, *codecs: Codec) -> "CodecRegistry":
        return cls(*codecs)

    @classmethod
    def from_registries(cls, *registries: "CodecRegistry") -> "CodecRegistry":
        """Merge several registries; a later registry wins for a shared type."""
        merged = cls()
        for registry in registries:
            for codec in registry:
                merged.register(codec)
        return merged

    def register(self, codec: Codec) -> "CodecRegistry":
        self._codecs[codec.python_type] = codec
        return self

    def __iter__(self):
        return iter(self._codecs.values())

    def __len__(self) -> int:
        return len(self._codecs)

    def __contains__(self, python_type: object) -> bool:
        return isinstance(python_type, type) and self.find(python_type) is not None

    def find(self, python_type: type) -> Optional[Codec]:
        """Return the codec for the most specific registered base of ``python_type``."""
        for candidate in python_type.__mro__:
            codec = self._codecs.get(candidate)
            if codec is not None:
                return codec
        return None

    def get(self, python_type: type) -> Codec:
        codec = self.find(python_type)
        if codec is None:
            raise CodecConfigurationError(python_type)
        return codec

    def encode(self, value: Any) -> Any:
        """Recursively encode ``value``; types without a codec pass through unchanged."""
        if isinstance(value, Mapping):
            return {key: self.encode(item) for key, item in value.items()}
        if isinstance(value, (list, tuple, set, frozenset)):
            return [self.encode(item) for item in value]
        if not self._codecs:
            return value
        codec = self.find(type(value))
        return value if codec is None else codec.encode(value)

    def decode(self, python_type: Type[PythonType], value: Any) -> PythonType:
        return self.get(python_type).decode(value)

    def __repr__(self) -> str:
        return f"CodecRegistry({', '.join(repr(codec) for codec in self)})"
