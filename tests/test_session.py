"""Tests for ForestSession."""

import pytest

from dazzleforest import (
    CacheConfig,
    ForestSession,
    InvalidArgumentError,
    make_node,
)
from dazzleforest.testing import menu_forest


def names(result):
    return [n["name"] for n in result]


class TestForestSession:

    def test_empty_session(self):
        session = ForestSession()
        assert session.forest == []
        assert len(session) == 0
        assert session.depth() == 0
        assert session.width() == 0
        assert repr(session) == "ForestSession(roots=0, cached=0)"

    def test_rejects_non_forest(self):
        with pytest.raises(InvalidArgumentError):
            ForestSession({"name": "a"})

    def test_wraps_given_forest(self):
        forest = menu_forest()
        session = ForestSession(forest)

        assert session.forest is forest
        assert len(session) == 3
        assert session.depth() == 2
        assert session.width() == 3

    def test_edits_invalidate_cache(self):
        session = ForestSession(menu_forest())
        assert session.search("pepperoni") == []
        assert len(session.cache) == 1

        session.insert("pizza", make_node("pepperoni pizza"))

        assert len(session.cache) == 0
        assert names(session.search("pepperoni")) == ["pepperoni pizza"]

    def test_remove_and_replace_invalidate_cache(self):
        session = ForestSession(menu_forest())
        assert names(session.search("^go$")) == ["go"]

        session.remove("go")
        assert session.search("^go$") == []

        session.replace("rob2", make_node("go"))
        assert names(session.search("^go$")) == ["go"]

    def test_edits_chain(self):
        session = ForestSession(menu_forest())
        result = (
            session.insert("bob", make_node("extra"))
            .remove("pob", preserve_subtree=True)
            .replace("extra", make_node("bonus"))
        )

        assert result is session
        assert names(session.forest[1]["sub"]) == ["rob2", "bonus", "go"]

    def test_search_served_from_cache(self):
        session = ForestSession(menu_forest())
        session.search("bob")
        session.search("bob")

        stats = session.cache.get_stats()
        assert stats["hits"] == 1
        assert stats["misses"] == 1

    def test_cache_config(self):
        session = ForestSession(menu_forest(), CacheConfig(enabled=False))
        session.search("bob")
        assert len(session.cache) == 0

    def test_find_key(self):
        session = ForestSession(menu_forest())
        assert session.find_key("pob") == {"name": "pob", "sub": None, "id": 3}
        assert session.find_key("pob", include_subtree=True) is session.forest[1]["sub"][0]
        assert session.find_key("ghost") is None

    def test_snapshot_is_independent(self):
        session = ForestSession(menu_forest())
        copy = session.snapshot()

        session.remove("pob")

        assert copy == menu_forest()
        assert copy != session.forest
