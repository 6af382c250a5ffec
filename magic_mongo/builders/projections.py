"""Projection helpers and ProjectionBuilder."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Optional

from .base import Bson, MongoBsonBuilder, merge_documents


def include(*fields: str) -> Bson:
    return {field: 1 for field in fields}


def exclude(*fields: str) -> Bson:
    return {field: 0 for field in fields}


def exclude_id() -> Bson:
    return exclude("_id")


def slice_(field: str, limit: int, skip: Optional[int] = None) -> Bson:
    """Project at most ``limit`` elements of an array field, optionally after ``skip``."""
    return {field: {"$slice": limit if skip is None else [skip, limit]}}


def fields(*projections: Mapping) -> Bson:
    """Combine projections; a field given twice takes its last value and position."""
    return merge_documents(projections, move_to_end=True)


class ProjectionBuilder(MongoBsonBuilder):
    """A simple builder for MongoDB projections.

    With nothing added the projection includes only ``_id``.
    """

    @staticmethod
    def combine(*bsons: Mapping) -> Bson:
        return fields(*bsons)

    def if_null(self) -> Bson:
        return include("_id")
