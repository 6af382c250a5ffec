"""
Query filter helpers and FilterBuilder.

The helpers return plain filter documents, e.g. ``gt("age", 18)`` gives
``{"age": {"$gt": 18}}``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Iterable, Optional

from .base import Bson, BsonLike, MongoBsonBuilder, resolve_bson


def empty() -> Bson:
    """A filter matching every document."""
    return {}


def eq(field: str, value: Any) -> Bson:
    return {field: value}


def _operator(field: str, operator: str, value: Any) -> Bson:
    return {field: {operator: value}}


def ne(field: str, value: Any) -> Bson:
    return _operator(field, "$ne", value)


def gt(field: str, value: Any) -> Bson:
    return _operator(field, "$gt", value)


def gte(field: str, value: Any) -> Bson:
    return _operator(field, "$gte", value)


def lt(field: str, value: Any) -> Bson:
    return _operator(field, "$lt", value)


def lte(field: str, value: Any) -> Bson:
    return _operator(field, "$lte", value)


def in_(field: str, values: Iterable[Any]) -> Bson:
    return _operator(field, "$in", list(values))


def nin(field: str, values: Iterable[Any]) -> Bson:
    return _operator(field, "$nin", list(values))


def exists(field: str, present: bool = True) -> Bson:
    return _operator(field, "$exists", present)


def regex(field: str, pattern: str, options: Optional[str] = None) -> Bson:
    condition: Bson = {"$regex": pattern}
    if options:
        condition["$options"] = options
    return {field: condition}


def _logical(operator: str, filters: Iterable[BsonLike]) -> Bson:
    return {operator: [resolve_bson(item) for item in filters]}


def and_(*filters: BsonLike) -> Bson:
    return _logical("$and", filters)


def or_(*filters: BsonLike) -> Bson:
    return _logical("$or", filters)


def nor(*filters: BsonLike) -> Bson:
    return _logical("$nor", filters)


def not_(query: BsonLike) -> Bson:
    """Match documents that do not match ``query``.

    A filter on a single field is negated in place: ``not_(gt("age", 18))``
    gives ``{"age": {"$not": {"$gt": 18}}}`` and a plain equality becomes
    ``{"$not": {"$eq": value}}``. Any other filter, such as one on several
    fields or a top-level ``$or``, becomes ``{"$nor": [query]}``.
    """
    query = resolve_bson(query)
    if len(query) != 1:
        return nor(query)
    field, condition = next(iter(query.items()))
    if field.startswith("$"):
        return nor(query)
    if isinstance(condition, Mapping) and condition and all(key.startswith("$") for key in condition):
        return {field: {"$not": dict(condition)}}
    return {field: {"$not": {"$eq": condition}}}


FilterOperator = Callable[[Bson, Bson], Bson]


class FilterBuilder(MongoBsonBuilder):
    """A simple builder for MongoDB query filters.

    The first filter added becomes the current filter as-is; each later one is
    combined with it using the given logical operator.
    """

    @staticmethod
    def combine(*bsons: Mapping) -> Bson:
        return and_(*bsons)

    def if_null(self) -> Bson:
        return empty()

    def add(self, new_filter: BsonLike, filter_function: FilterOperator = and_) -> "FilterBuilder":
        """Add ``new_filter`` to the current filter using ``filter_function``.

        Args:
            new_filter: The filter to add
            filter_function: Combines the current filter with the new one

        Returns:
            This FilterBuilder
        """
        new_filter = resolve_bson(new_filter)
        return self.set(new_filter if self.bson is None else filter_function(self.bson, new_filter))

    def and_(self, new_filter: BsonLike) -> "FilterBuilder":
        return self.add(new_filter, and_)

    def or_(self, new_filter: BsonLike) -> "FilterBuilder":
        return self.add(new_filter, or_)

    def nor(self, new_filter: BsonLike) -> "FilterBuilder":
        return self.add(new_filter, nor)
