"""
Value codecs for magic-mongo.

Modules:
- base: the Codec interface and CodecRegistry
- uuid_codec: UUIDCodec, storing uuid.UUID values as strings
"""

from .base import Codec, CodecRegistry
from .uuid_codec import UUIDCodec


def default_codec_registry() -> CodecRegistry:
    """The registry used when a mongo is created without an explicit one."""
    return CodecRegistry(UUIDCodec())


__all__ = [
    "Codec",
    "CodecRegistry",
    "UUIDCodec",
    "default_codec_registry",
]
