"""Tests for descriptor value objects."""

import dataclasses

import pytest

from dosatag.enums.etl_state import ETLState
from dosatag.keys.parser import parse_primary_key
from dosatag.schema import (
    NO_TTL,
    ClusteringKey,
    EntityDescriptor,
    IndexDescriptor,
    PrimaryKey,
)


class TestPrimaryKey:
    def test_lists_are_frozen_to_tuples(self) -> None:
        key = PrimaryKey(["a", "b"], [ClusteringKey("c")])
        assert key.partition_keys == ("a", "b")
        assert key.clustering_keys == (ClusteringKey("c"),)

    def test_immutable(self) -> None:
        key = PrimaryKey(("a",))
        with pytest.raises(dataclasses.FrozenInstanceError):
            key.partition_keys = ("b",)

    def test_key_sets(self) -> None:
        key = parse_primary_key("((a, b), c, d desc)")
        assert key.partition_key_set() == {"a", "b"}
        assert key.clustering_key_set() == {"c", "d"}
        assert key.primary_key_set() == {"a", "b", "c", "d"}

    @pytest.mark.parametrize(
        "expression,rendered",
        [
            ("pk1", "((pk1))"),
            ("(pk1, pk2 desc)", "((pk1), pk2 DESC)"),
            ("((pk1, pk2), pk3 ASC, pk4 DeSc,)", "((pk1, pk2), pk3, pk4 DESC)"),
        ],
    )
    def test_str_reparses_to_equal_key(self, expression: str,
                                       rendered: str) -> None:
        key = parse_primary_key(expression)
        assert str(key) == rendered
        assert parse_primary_key(str(key)) == key


class TestDescriptors:
    def test_entity_defaults(self) -> None:
        entity = EntityDescriptor("t", PrimaryKey(("a",)))
        assert entity.etl == ETLState.OFF
        assert entity.ttl == NO_TTL
        assert not entity.has_ttl()

    def test_index_columns_frozen(self) -> None:
        index = IndexDescriptor("I", PrimaryKey(("a",)), ["b"])
        assert index.columns == ("b",)

    def test_etl_state_from_tag_value(self) -> None:
        assert ETLState.from_tag_value("On") == ETLState.ON
        assert ETLState.from_tag_value("OFF") == ETLState.OFF
        assert ETLState.from_tag_value("") is None
        assert str(ETLState.ON) == "ON"
