"""
Base builder for MongoDB bson documents.

In the Python driver every filter, sort, projection, index specification and
update is a plain mapping. The builders here accumulate such a mapping step
by step, combining each new piece with the current one using the operation
that fits the builder kind (``$and`` for filters, per-operator merging for
updates, and so on).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Optional, Sequence, TypeVar, Union

from magic_mongo.core.errors import EmptyBuilderError

Bson = Dict[str, Any]
BuilderType = TypeVar("BuilderType", bound="MongoBsonBuilder")
BsonLike = Union[Mapping, "MongoBsonBuilder"]


class MongoBsonBuilder:
    """A simple builder for MongoDB bson documents.

    Subclasses provide :meth:`combine`, used both when the builder is created
    from several documents and by their ``add`` methods, and may override
    :meth:`if_null` to give :meth:`build` a default.

    Args:
        *bsons: Nothing, a single document, several documents (or one list of
            them) to combine, or another builder of the same kind to copy.
    """

    def __init__(self, *bsons: Any) -> None:
        self.bson: Optional[Bson] = None
        if len(bsons) == 1 and isinstance(bsons[0], (list, tuple)):
            bsons = tuple(bsons[0])
        if not bsons:
            return
        if len(bsons) == 1:
            only = bsons[0]
            if isinstance(only, MongoBsonBuilder):
                self.bson = None if only.bson is None else dict(only.bson)
            else:
                self.bson = dict(only)
            return
        self.bson = self.combine(*(resolve_bson(bson) for bson in bsons))

    @staticmethod
    def combine(*bsons: Mapping) -> Bson:
        """Combine several documents into one."""
        raise NotImplementedError

    def if_null(self) -> Optional[Bson]:
        """The document :meth:`build` returns when nothing has been added."""
        return None

    def set(self: BuilderType, bson: Optional[Mapping]) -> BuilderType:
        """Replace the current document and return this builder for chaining."""
        self.bson = None if bson is None else dict(bson)
        return self

    def add(self: BuilderType, new_bson: BsonLike) -> BuilderType:
        """Combine ``new_bson`` with the current document."""
        new_bson = resolve_bson(new_bson)
        return self.set(new_bson if self.bson is None else self.combine(self.bson, new_bson))

    def build(self) -> Bson:
        """Return the built document.

        Raises:
            EmptyBuilderError: If nothing was added and the builder has no default
        """
        if self.bson is not None:
            return dict(self.bson)
        default = self.if_null()
        if default is None:
            raise EmptyBuilderError(self)
        return default

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MongoBsonBuilder):
            return NotImplemented
        return type(self) is type(other) and self.bson == other.bson

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.bson!r})"


def resolve_bson(value: Optional[BsonLike]) -> Optional[Bson]:
    """Turn a builder into its document; mappings become plain dicts."""
    if value is None:
        return None
    if isinstance(value, MongoBsonBuilder):
        return value.build()
    if isinstance(value, Mapping):
        return dict(value)
    raise TypeError(f"Expected a mapping or a MongoBsonBuilder, got {type(value).__name__}")


def merge_documents(bsons: Sequence[Mapping], *, move_to_end: bool = False) -> Bson:
    """Merge top-level keys of ``bsons``; a later value for the same key wins."""
    merged: Bson = {}
    for bson in bsons:
        for key, value in resolve_bson(bson).items():
            if move_to_end:
                merged.pop(key, None)
            merged[key] = value
    return merged
