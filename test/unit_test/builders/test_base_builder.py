"""Unit tests for the shared MongoBsonBuilder behaviour."""

from __future__ import annotations

from collections import OrderedDict

import pytest

from magic_mongo.builders import FilterBuilder, MongoBsonBuilder, SortBuilder, resolve_bson
from magic_mongo.builders.base import merge_documents
from magic_mongo.core.errors import EmptyBuilderError


class TestConstruction:
    def test_no_arguments_holds_nothing(self) -> None:
        assert SortBuilder().bson is None

    def test_single_document_is_copied(self) -> None:
        source = {"name": 1}

        builder = SortBuilder(source)
        source["age"] = 1

        assert builder.bson == {"name": 1}

    def test_copy_of_builder(self) -> None:
        original = SortBuilder({"name": 1})

        copy = SortBuilder(original)
        original.add({"age": -1})

        assert copy.bson == {"name": 1}
        assert copy == SortBuilder({"name": 1})

    def test_copy_of_empty_builder(self) -> None:
        assert SortBuilder(SortBuilder()).bson is None

    def test_several_documents_are_combined(self) -> None:
        assert SortBuilder({"a": 1}, {"b": -1}).build() == {"a": 1, "b": -1}

    def test_list_of_documents_is_combined(self) -> None:
        assert FilterBuilder([{"a": 1}, {"b": 2}]).build() == {"$and": [{"a": 1}, {"b": 2}]}

    def test_base_class_cannot_combine(self) -> None:
        with pytest.raises(NotImplementedError):
            MongoBsonBuilder({"a": 1}, {"b": 2})


class TestBuild:
    def test_empty_builder_without_default_raises(self) -> None:
        with pytest.raises(EmptyBuilderError, match="SortBuilder: bson cannot be None!"):
            SortBuilder().build()

    def test_empty_builder_uses_default(self) -> None:
        assert FilterBuilder().build() == {}

    def test_built_document_is_a_copy(self) -> None:
        builder = SortBuilder({"a": 1})

        built = builder.build()
        built["b"] = -1

        assert builder.build() == {"a": 1}
        assert builder.bson == {"a": 1}

    def test_set_replaces_and_chains(self) -> None:
        builder = SortBuilder({"a": 1})

        assert builder.set({"b": 1}) is builder
        assert builder.build() == {"b": 1}
        assert builder.set(None).bson is None

    def test_add_to_empty_takes_document_as_is(self) -> None:
        assert SortBuilder().add({"a": 1}).build() == {"a": 1}

    def test_add_accepts_builder(self) -> None:
        builder = SortBuilder({"a": 1}).add(SortBuilder({"b": -1}))

        assert builder.build() == {"a": 1, "b": -1}


class TestEquality:
    def test_different_builder_kinds_are_not_equal(self) -> None:
        assert SortBuilder({"a": 1}) != FilterBuilder({"a": 1})

    def test_repr(self) -> None:
        assert repr(SortBuilder({"a": 1})) == "SortBuilder({'a': 1})"


class TestResolveBson:
    def test_none(self) -> None:
        assert resolve_bson(None) is None

    def test_mapping_becomes_dict(self) -> None:
        resolved = resolve_bson(OrderedDict(a=1))

        assert type(resolved) is dict
        assert resolved == {"a": 1}

    def test_builder_is_built(self) -> None:
        assert resolve_bson(FilterBuilder()) == {}

    def test_rejects_other_values(self) -> None:
        with pytest.raises(TypeError, match="got list"):
            resolve_bson([("a", 1)])


def test_merge_documents_move_to_end() -> None:
    merged = merge_documents([{"a": 1, "b": 1}, {"a": 0}], move_to_end=True)

    assert list(merged.items()) == [("b", 1), ("a", 0)]


def test_merge_documents_keeps_first_position() -> None:
    merged = merge_documents([{"a": 1, "b": 1}, {"a": -1}])

    assert list(merged.items()) == [("a", -1), ("b", 1)]
