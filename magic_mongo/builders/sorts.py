"""Sort specification helpers and SortBuilder."""

from __future__ import annotations

from collections.abc import Mapping

from .base import Bson, MongoBsonBuilder, merge_documents

ASCENDING = 1
DESCENDING = -1


def ascending(*fields: str) -> Bson:
    return {field: ASCENDING for field in fields}


def descending(*fields: str) -> Bson:
    return {field: DESCENDING for field in fields}


def meta_text_score(field: str) -> Bson:
    """Sort by the relevance score of a ``$text`` query."""
    return {field: {"$meta": "textScore"}}


def order_by(*sorts: Mapping) -> Bson:
    """Combine sort specifications, keeping the order in which fields first appear."""
    return merge_documents(sorts)


class SortBuilder(MongoBsonBuilder):
    """A simple builder for MongoDB sort specifications."""

    @staticmethod
    def combine(*bsons: Mapping) -> Bson:
        return order_by(*bsons)
