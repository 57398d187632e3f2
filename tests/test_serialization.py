"""Tests for the plain-data and JSON boundary."""

import json

import pytest

from dazzleforest import (
    DecodeError,
    InvalidArgumentError,
    from_json,
    from_plain,
    to_json,
    to_plain,
)
from dazzleforest.testing import filesystem_forest, menu_forest


class TestPlain:

    def test_to_plain_rebuilds_nodes(self):
        forest = menu_forest()
        plain = to_plain(forest)

        assert plain == forest
        assert plain[1] is not forest[1]
        assert plain[1]["sub"][0] is not forest[1]["sub"][0]

    def test_transform_applied_to_every_node(self):
        plain = to_plain(menu_forest(), lambda node: {**node, "label": node["name"].upper()})

        assert plain[1]["label"] == "BOB"
        assert plain[1]["sub"][0]["sub"][0]["label"] == "GO"

    def test_transform_sees_node_before_children(self):
        plain = to_plain(menu_forest(), lambda node: {**node, "sub": None})
        assert all(node["sub"] is None for node in plain)

    def test_from_plain_normalizes_children(self):
        forest = from_plain([{"name": "a", "sub": []}, {"name": "b"}])
        assert forest == [{"name": "a", "sub": None}, {"name": "b", "sub": None}]

    def test_from_plain_requires_list(self):
        with pytest.raises(InvalidArgumentError):
            from_plain({"name": "a"})
        with pytest.raises(InvalidArgumentError):
            from_plain(["not a node"])

    def test_non_list_sub_rejected(self):
        with pytest.raises(InvalidArgumentError, match="must be null or a list"):
            from_plain([{"name": "a", "sub": "oops"}])
        with pytest.raises(InvalidArgumentError):
            from_plain([{"name": "a", "sub": [{"name": "b", "sub": {"name": "c"}}]}])
        with pytest.raises(InvalidArgumentError):
            to_plain([{"name": "a", "sub": 5}])

    def test_invalid_transform(self):
        with pytest.raises(InvalidArgumentError):
            to_plain(menu_forest(), transform="upper")


class TestJson:

    def test_round_trip(self):
        forest = filesystem_forest()
        assert from_json(to_json(forest)) == forest

    def test_json_layout(self):
        decoded = json.loads(to_json(menu_forest(), indent=None))
        assert decoded[0] == {"name": "pasta's", "sub": None, "id": 1}

    def test_from_json_transform(self):
        forest = from_json('[{"name": "a", "sub": [{"name": "b", "sub": null}]}]',
                           lambda node: {**node, "seen": True})
        assert forest[0]["seen"] is True
        assert forest[0]["sub"][0]["seen"] is True

    def test_malformed_text(self):
        with pytest.raises(DecodeError) as excinfo:
            from_json("[{bad json")
        assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)

    def test_document_must_be_list(self):
        with pytest.raises(InvalidArgumentError):
            from_json('{"name": "a"}')

    def test_non_list_sub_in_document(self):
        with pytest.raises(InvalidArgumentError):
            from_json('[{"name": "a", "sub": "oops"}]')

    def test_text_must_be_string(self):
        with pytest.raises(InvalidArgumentError):
            from_json(b"[]")
