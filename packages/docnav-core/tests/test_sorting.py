from __future__ import annotations

from docnav.core.items import CategoryNode, DocNode, SidebarItemCategory, SidebarItemDoc
from docnav.core.sorting import sort_sidebar_items


def _tree():
    return [
        DocNode(id="no-pos-1"),
        CategoryNode(
            label="cat",
            collapsed=True,
            position=2,
            items=[DocNode(id="c-none"), DocNode(id="c-5", position=5), DocNode(id="c-1", position=1)],
        ),
        DocNode(id="pos-1", position=1),
        DocNode(id="no-pos-2"),
        DocNode(id="pos-1-bis", position=1),
    ]


def test_ascending_stable_and_missing_last():
    out = sort_sidebar_items(_tree())
    assert [getattr(it, "id", None) or it.label for it in out] == ["pos-1", "pos-1-bis", "cat", "no-pos-1", "no-pos-2"]
    cat = out[2]
    assert [it.id for it in cat.items] == ["c-1", "c-5", "c-none"]


def test_defined_position_sorts_before_undefined_whatever_the_input_order():
    a = [DocNode(id="undefined"), DocNode(id="defined", position=100)]
    b = [DocNode(id="defined", position=100), DocNode(id="undefined")]
    assert [it.id for it in sort_sidebar_items(a)] == ["defined", "undefined"]
    assert [it.id for it in sort_sidebar_items(b)] == ["defined", "undefined"]


def test_float_and_negative_positions():
    items = [DocNode(id="b", position=1.5), DocNode(id="a", position=-1), DocNode(id="c", position=1)]
    assert [it.id for it in sort_sidebar_items(items)] == ["a", "c", "b"]


def test_positions_are_stripped():
    out = sort_sidebar_items(_tree())

    def walk(items):
        for it in items:
            assert isinstance(it, (SidebarItemDoc, SidebarItemCategory))
            assert not hasattr(it, "position")
            assert "position" not in it.as_dict()
            if isinstance(it, SidebarItemCategory):
                walk(it.items)

    walk(out)


def test_sort_is_idempotent():
    once = sort_sidebar_items(_tree())
    twice = sort_sidebar_items(once)
    assert twice == once


def test_sort_does_not_mutate_input_nodes():
    tree = _tree()
    sort_sidebar_items(tree)
    assert [it.id for it in tree[1].items] == ["c-none", "c-5", "c-1"]


def test_as_dict():
    out = sort_sidebar_items([CategoryNode(label="G", collapsed=False, items=[DocNode(id="g/a", label="A")])])
    assert [it.as_dict() for it in out] == [
        {"type": "category", "label": "G", "collapsed": False, "items": [{"type": "doc", "id": "g/a", "label": "A"}]}
    ]
