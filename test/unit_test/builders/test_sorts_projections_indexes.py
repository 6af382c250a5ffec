"""Unit tests for sort, projection and index builders."""

from __future__ import annotations

import pytest

from magic_mongo.builders import IndexBuilder, ProjectionBuilder, SortBuilder, indexes, projections, sorts
from magic_mongo.core.errors import EmptyBuilderError


class TestSorts:
    def test_helpers(self) -> None:
        assert sorts.ascending("a", "b") == {"a": 1, "b": 1}
        assert sorts.descending("c") == {"c": -1}
        assert sorts.meta_text_score("score") == {"score": {"$meta": "textScore"}}

    def test_order_by_keeps_first_position(self) -> None:
        ordered = sorts.order_by(sorts.ascending("a", "b"), sorts.descending("a"))

        assert list(ordered.items()) == [("a", -1), ("b", 1)]

    def test_builder(self) -> None:
        builder = SortBuilder(sorts.descending("created")).add(sorts.ascending("name"))

        assert list(builder.build().items()) == [("created", -1), ("name", 1)]

    def test_empty_builder_raises(self) -> None:
        with pytest.raises(EmptyBuilderError):
            SortBuilder().build()


class TestProjections:
    def test_helpers(self) -> None:
        assert projections.include("a", "b") == {"a": 1, "b": 1}
        assert projections.exclude("c") == {"c": 0}
        assert projections.exclude_id() == {"_id": 0}
        assert projections.slice_("comments", 5) == {"comments": {"$slice": 5}}
        assert projections.slice_("comments", 5, skip=10) == {"comments": {"$slice": [10, 5]}}

    def test_fields_last_wins_and_moves_to_end(self) -> None:
        combined = projections.fields(projections.include("a", "b"), projections.exclude("a"))

        assert list(combined.items()) == [("b", 1), ("a", 0)]

    def test_empty_builder_includes_only_id(self) -> None:
        assert ProjectionBuilder().build() == {"_id": 1}

    def test_builder(self) -> None:
        builder = ProjectionBuilder(projections.include("name")).add(projections.exclude_id())

        assert builder.build() == {"name": 1, "_id": 0}


class TestIndexes:
    def test_helpers(self) -> None:
        assert indexes.ascending("a") == {"a": 1}
        assert indexes.descending("a", "b") == {"a": -1, "b": -1}
        assert indexes.text() == {"$**": "text"}
        assert indexes.text("body") == {"body": "text"}
        assert indexes.hashed("shard") == {"shard": "hashed"}
        assert indexes.geo2dsphere("location") == {"location": "2dsphere"}

    def test_compound_index_keeps_order(self) -> None:
        compound = indexes.compound_index(indexes.ascending("user"), indexes.descending("created"))

        assert list(compound.items()) == [("user", 1), ("created", -1)]

    def test_builder(self) -> None:
        builder = IndexBuilder(indexes.ascending("user"), indexes.hashed("shard"))

        assert builder.build() == {"user": 1, "shard": "hashed"}

    def test_empty_builder_raises(self) -> None:
        with pytest.raises(EmptyBuilderError, match="IndexBuilder"):
            IndexBuilder().build()
