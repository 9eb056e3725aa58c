from __future__ import annotations

from typing import Any, List, Sequence

from docnav.core.items import CategoryNode, DocNode, Node, SidebarItem, SidebarItemCategory, SidebarItemDoc


def _position_key(item: Any) -> tuple:
    # ascending, items without a position last; sorted() is stable so ties keep insertion order
    position = getattr(item, "position", None)
    return (position is None, position if position is not None else 0)


def _to_public(node: Node | SidebarItem, items: Sequence[SidebarItem] = ()) -> SidebarItem:
    if isinstance(node, (CategoryNode, SidebarItemCategory)):
        return SidebarItemCategory(label=node.label, collapsed=node.collapsed, items=tuple(items))
    if isinstance(node, (DocNode, SidebarItemDoc)):
        return SidebarItemDoc(id=node.id, label=node.label)
    raise TypeError(f"unsupported sidebar item: {type(node).__name__}")


def sort_sidebar_items(items: Sequence[Node | SidebarItem]) -> List[SidebarItem]:
    """Recursively sort a sidebar tree and drop position hints.

    Positions only order items inside one autogenerated slice. The result is
    made of frozen public items; sorting it again returns an equal tree.
    """
    processed = []
    for item in items:
        if isinstance(item, (CategoryNode, SidebarItemCategory)):
            processed.append((item, sort_sidebar_items(item.items)))
        else:
            processed.append((item, ()))

    processed.sort(key=lambda pair: _position_key(pair[0]))
    return [_to_public(node, children) for node, children in processed]
