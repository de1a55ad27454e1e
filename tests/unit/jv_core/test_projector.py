"""Tests for the JSON-to-tree projection."""

from __future__ import annotations

import pytest

from jv_core.models import ROOT, ArrayIndex, ObjectKey
from jv_core.projector import iter_paths, project, render_scalar

pytestmark = pytest.mark.unit_core


def _labels(nodes) -> list[str]:
    return [node.label for node in nodes]


def test_object_entries_become_top_level_rows() -> None:
    hierarchy = project({"a": 1, "b": [2, 3]})

    assert _labels(hierarchy) == ["a: 1", "b"]
    assert hierarchy[0].address == ObjectKey("a")
    assert hierarchy[1].address == ObjectKey("b")
    assert _labels(hierarchy[1].children) == ["0: 2", "1: 3"]


def test_object_order_is_preserved() -> None:
    doc = {"zeta": 1, "alpha": 2, "mid": 3}

    assert _labels(project(doc)) == ["zeta: 1", "alpha: 2", "mid: 3"]


def test_array_root_uses_index_addresses() -> None:
    hierarchy = project(["x", {"k": None}, [True]])

    assert [node.address for node in hierarchy] == [
        ArrayIndex(0),
        ArrayIndex(1),
        ArrayIndex(2),
    ]
    assert _labels(hierarchy) == ['0: "x"', "1", "2"]
    assert _labels(hierarchy[1].children) == ["k: null"]
    assert _labels(hierarchy[2].children) == ["0: true"]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (42, "42"),
        ("text", '"text"'),
        (None, "null"),
        (False, "false"),
        (1.5, "1.5"),
    ],
)
def test_root_scalar_is_single_root_leaf(value: object, expected: str) -> None:
    hierarchy = project(value)

    assert len(hierarchy) == 1
    assert hierarchy[0].address == ROOT
    assert hierarchy[0].label == expected
    assert hierarchy[0].children == ()
    assert not hierarchy[0].is_container


def test_empty_containers_project_to_no_rows() -> None:
    assert project({}) == ()
    assert project([]) == ()


def test_nested_empty_container_is_container_without_children() -> None:
    (node,) = project({"empty": {}})

    assert node.label == "empty"
    assert node.is_container
    assert not node.expandable


def test_leaf_label_is_address_and_json_text() -> None:
    hierarchy = project({"name": "Zoë \"Z\"", "n": -3, "ok": True})

    assert _labels(hierarchy) == ['name: "Zoë \\"Z\\""', "n: -3", "ok: true"]


def test_sibling_addresses_are_distinct() -> None:
    doc = {"a": [1, 1, 1], "b": {"x": 1, "y": 1}, "c": [[], [], {}]}

    for _, node in iter_paths(project(doc)):
        addresses = [child.address for child in node.children]
        assert len(addresses) == len(set(addresses))


def test_iter_paths_is_preorder() -> None:
    paths = [path for path, _ in iter_paths(project({"a": {"b": [7]}, "c": 0}))]

    assert paths == [
        (ObjectKey("a"),),
        (ObjectKey("a"), ObjectKey("b")),
        (ObjectKey("a"), ObjectKey("b"), ArrayIndex(0)),
        (ObjectKey("c"),),
    ]


def test_non_json_value_raises_type_error() -> None:
    with pytest.raises(TypeError):
        project({"bad": {1, 2}})
    with pytest.raises(TypeError):
        render_scalar(object())


def _nested_arrays(depth: int) -> list:
    doc: list = []
    for _ in range(depth - 1):
        doc = [doc]
    return doc


def test_deeply_nested_document_projects_without_recursion() -> None:
    depth = 2000
    hierarchy = project(_nested_arrays(depth + 1))

    node = hierarchy[0]
    for _ in range(depth - 1):
        assert node.is_container
        assert len(node.children) == 1
        node = node.children[0]
    assert node.is_container and node.children == ()

    paths = [path for path, _ in iter_paths(hierarchy)]
    assert len(paths) == depth
    assert paths[-1] == (ArrayIndex(0),) * depth


def test_projection_keeps_order_among_mixed_nesting() -> None:
    hierarchy = project({"a": [{"b": 1}, 2], "c": {"d": [3]}, "e": 4})

    labels = [node.label for _, node in iter_paths(hierarchy)]
    assert labels == ["a", "0", "b: 1", "1: 2", "c", "d", "0: 3", "e: 4"]
