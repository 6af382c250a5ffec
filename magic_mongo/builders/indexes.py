"""Index key helpers and IndexBuilder."""

from __future__ import annotations

from collections.abc import Mapping

from .base import Bson, MongoBsonBuilder, merge_documents


def ascending(*fields: str) -> Bson:
    return {field: 1 for field in fields}


def descending(*fields: str) -> Bson:
    return {field: -1 for field in fields}


def text(field: str = "$**") -> Bson:
    return {field: "text"}


def hashed(field: str) -> Bson:
    return {field: "hashed"}


def geo2dsphere(*fields: str) -> Bson:
    return {field: "2dsphere" for field in fields}


def compound_index(*indexes: Mapping) -> Bson:
    return merge_documents(indexes)


class IndexBuilder(MongoBsonBuilder):
    """A simple builder for MongoDB index keys."""

    @staticmethod
    def combine(*bsons: Mapping) -> Bson:
        return compound_index(*bsons)
