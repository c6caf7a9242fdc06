# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

import pytest

from jsonpatch_cli import patch
from jsonpatch_cli.errors import (
    ApplyError, ParseError, PathNotFound, IndexOutOfBounds, InvalidMove, TestFailed)
from jsonpatch_cli.patch_format import (
    op_add, op_remove, op_replace, op_move, op_copy, op_test)


def test_patch_add_dict():
    assert patch({}, [op_add("/d", 4)]) == {"d": 4}
    assert patch({"a": 1}, [op_add("/d", 4)]) == {"a": 1, "d": 4}
    # Add overwrites an existing key in place
    result = patch({"d": 1, "e": 2}, [op_add("/d", 4)])
    assert result == {"d": 4, "e": 2}
    assert list(result) == ["d", "e"]
    assert patch({"a": {}}, [op_add("/a/b", [1])]) == {"a": {"b": [1]}}
    assert patch({}, [op_add("/", 1)]) == {"": 1}


def test_patch_add_list():
    assert patch([], [op_add("/0", 3)]) == [3]
    assert patch([], [op_add("/-", 3), op_add("/-", 4)]) == [3, 4]
    assert patch([1, 2], [op_add("/1", 5)]) == [1, 5, 2]
    assert patch([1, 2], [op_add("/2", 5)]) == [1, 2, 5]
    with pytest.raises(IndexOutOfBounds):
        patch([1, 2], [op_add("/3", 5)])
    with pytest.raises(PathNotFound):
        patch([1, 2], [op_add("/x", 5)])
    with pytest.raises(PathNotFound):
        patch([1, 2], [op_add("/01", 5)])


def test_patch_add_root():
    assert patch({"a": 1}, [op_add("", [1, 2])]) == [1, 2]


def test_patch_add_missing_parent():
    with pytest.raises(PathNotFound):
        patch({}, [op_add("/a/b", 1)])
    with pytest.raises(PathNotFound):
        patch({"a": 1}, [op_add("/a/b", 1)])
    with pytest.raises(PathNotFound):
        patch({"a": "text"}, [op_add("/a/0", 1)])
    with pytest.raises(IndexOutOfBounds):
        patch({"a": [{}]}, [op_add("/a/1/b", 1)])


def test_patch_remove():
    assert patch({"a": 1}, [op_remove("/a")]) == {}
    assert patch({"a": 1, "b": 2}, [op_remove("/a")]) == {"b": 2}
    assert patch([5, 6, 7], [op_remove("/0")]) == [6, 7]
    assert patch([5, 6, 7], [op_remove("/2")]) == [5, 6]
    # Indices refer to the document as left by the previous operation
    assert patch([5, 6, 7], [op_remove("/0"), op_remove("/1")]) == [6]
    with pytest.raises(PathNotFound):
        patch({"a": 1}, [op_remove("/b")])
    with pytest.raises(IndexOutOfBounds):
        patch([5], [op_remove("/1")])
    with pytest.raises(PathNotFound):
        patch([5], [op_remove("/-")])
    with pytest.raises(PathNotFound):
        patch({"a": 1}, [op_remove("")])


def test_patch_replace():
    result = patch({"a": 1, "b": 2}, [op_replace("/a", 3)])
    assert result == {"a": 3, "b": 2}
    assert list(result) == ["a", "b"]
    assert patch([1, 2], [op_replace("/1", {"x": 1})]) == [1, {"x": 1}]
    assert patch({"a": 1}, [op_replace("", "all")]) == "all"
    with pytest.raises(PathNotFound):
        patch({"a": 1}, [op_replace("/b", 3)])
    with pytest.raises(IndexOutOfBounds):
        patch([1], [op_replace("/1", 3)])


def test_patch_move():
    assert patch({"a": 1}, [op_move("/a", "/b")]) == {"b": 1}
    assert patch({"a": {"b": 1}, "c": {}}, [op_move("/a/b", "/c/d")]) == {"a": {}, "c": {"d": 1}}
    assert patch([1, 2, 3], [op_move("/0", "/2")]) == [2, 3, 1]
    assert patch([1, 2, 3], [op_move("/2", "/0")]) == [3, 1, 2]
    assert patch({"a": 1}, [op_move("/a", "/a")]) == {"a": 1}
    with pytest.raises(PathNotFound):
        patch({"a": 1}, [op_move("/b", "/c")])
    with pytest.raises(PathNotFound):
        patch({"a": 1}, [op_move("/b", "/b")])


def test_patch_move_into_own_child():
    with pytest.raises(InvalidMove):
        patch({"a": {"b": 1}}, [op_move("/a", "/a/b")])
    with pytest.raises(InvalidMove):
        patch({"a": {"b": 1}}, [op_move("", "/a")])
    # Sibling with a common name prefix is not a child
    assert patch({"a": 1, "ab": {}}, [op_move("/a", "/ab/x")]) == {"ab": {"x": 1}}


def test_patch_copy():
    doc = {"a": {"b": [1]}}
    result = patch(doc, [op_copy("/a", "/c")])
    assert result == {"a": {"b": [1]}, "c": {"b": [1]}}
    assert result["a"] is not result["c"]
    assert patch([1, 2], [op_copy("/0", "/-")]) == [1, 2, 1]
    with pytest.raises(PathNotFound):
        patch(doc, [op_copy("/x", "/c")])


def test_patch_test_gate():
    ops = [op_test("/x", 1), op_replace("/x", 2)]
    assert patch({"x": 1}, ops) == {"x": 2}
    doc = {"x": 9}
    with pytest.raises(TestFailed) as excinfo:
        patch(doc, ops)
    err = excinfo.value
    assert err.expected == 1
    assert err.actual == 9
    assert err.index == 0
    assert str(err.path) == "/x"
    assert doc == {"x": 9}


def test_patch_test_deep_equality():
    assert patch({"a": {"x": [1, 2], "y": None}}, [op_test("/a", {"y": None, "x": [1, 2]})])
    with pytest.raises(TestFailed):
        patch({"a": 1}, [op_test("/a", True)])
    with pytest.raises(PathNotFound):
        patch({"a": 1}, [op_test("/b", 1)])


def test_patch_remove_then_add_index_shift():
    assert patch(["a", "b"], [op_remove("/0"), op_add("/0", "z")]) == ["z", "b"]


def test_patch_add_then_remove_restores():
    for doc, path, value in [
            ({"a": 1}, "/b", 2),
            ([1, 2, 3], "/1", 9),
            ([1, 2, 3], "/3", 9),
            ({"a": {"b": []}}, "/a/b/0", {"c": None}),
            ]:
        added = patch(doc, [op_add(path, value)])
        assert patch(added, [op_remove(path)]) == doc


def test_patch_does_not_modify_input():
    doc = {"a": [1, 2], "b": {"c": 3}}
    before = copy.deepcopy(doc)
    value = {"new": []}
    result = patch(doc, [
        op_add("/a/-", 3), op_remove("/b/c"), op_add("/v", value),
        ])
    assert doc == before
    assert result == {"a": [1, 2, 3], "b": {}, "v": {"new": []}}
    # Inserted values are copies
    assert result["v"] is not value


def test_patch_failure_is_transactional():
    doc = {"a": [1, 2]}
    with pytest.raises(ApplyError) as excinfo:
        patch(doc, [op_add("/a/-", 3), op_remove("/missing")])
    assert doc == {"a": [1, 2]}
    err = excinfo.value
    assert isinstance(err, PathNotFound)
    assert err.index == 1
    assert err.op == op_remove("/missing")
    assert "remove" in str(err)
    assert "/missing" in str(err)


def test_patch_accepts_plain_dicts():
    assert patch({"a": 1}, [{"op": "move", "from": "/a", "path": "/b"}]) == {"b": 1}


def test_patch_rejects_malformed_entries():
    with pytest.raises(ParseError):
        patch({}, [{"op": "add", "path": "/a"}])
    with pytest.raises(ParseError):
        patch({}, [{"op": "frobnicate", "path": "/a"}])
    with pytest.raises(ParseError):
        patch({}, [{"op": "add", "path": "a", "value": 1}])


def test_patch_index_must_be_exact():
    # A trailing newline does not make a token an index
    with pytest.raises(PathNotFound):
        patch([1, 2], [op_remove("/0\n")])
    with pytest.raises(PathNotFound):
        patch([1, 2], [op_add("/1\n", 3)])
