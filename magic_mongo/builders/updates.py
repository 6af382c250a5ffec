"""
Update document helpers and UpdateBuilder.

``combine`` merges update documents operator by operator, so
``combine(set_("a", 1), set_("b", 2), inc("n"))`` gives
``{"$set": {"a": 1, "b": 2}, "$inc": {"n": 1}}``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, Union

from .base import Bson, MongoBsonBuilder, resolve_bson


def _update(operator: str, field: str, value: Any) -> Bson:
    return {operator: {field: value}}


def set_(field: str, value: Any) -> Bson:
    return _update("$set", field, value)


def unset(field: str) -> Bson:
    return _update("$unset", field, "")


def set_on_insert(field: str, value: Any) -> Bson:
    return _update("$setOnInsert", field, value)


def inc(field: str, number: Union[int, float] = 1) -> Bson:
    return _update("$inc", field, number)


def mul(field: str, number: Union[int, float]) -> Bson:
    return _update("$mul", field, number)


def min_(field: str, value: Any) -> Bson:
    return _update("$min", field, value)


def max_(field: str, value: Any) -> Bson:
    return _update("$max", field, value)


def push(field: str, value: Any) -> Bson:
    return _update("$push", field, value)


def push_each(field: str, values: Iterable[Any]) -> Bson:
    return _update("$push", field, {"$each": list(values)})


def pull(field: str, value: Any) -> Bson:
    return _update("$pull", field, value)


def add_to_set(field: str, value: Any) -> Bson:
    return _update("$addToSet", field, value)


def rename(field: str, new_field: str) -> Bson:
    return _update("$rename", field, new_field)


def current_date(field: str) -> Bson:
    return _update("$currentDate", field, True)


def combine(*updates: Mapping) -> Bson:
    """Merge update documents per operator; a later value for the same field wins."""
    combined: Bson = {}
    for update in updates:
        for operator, body in resolve_bson(update).items():
            existing = combined.get(operator)
            if isinstance(existing, dict) and isinstance(body, Mapping):
                existing.update(body)
            else:
                combined[operator] = dict(body) if isinstance(body, Mapping) else body
    return combined


class UpdateBuilder(MongoBsonBuilder):
    """A simple builder for MongoDB update documents."""

    @staticmethod
    def combine(*bsons: Mapping) -> Bson:
        return combine(*bsons)
