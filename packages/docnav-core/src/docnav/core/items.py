"""Sidebar item types.

Two families live here:

- DocNode / CategoryNode: mutable nodes used while the tree is being built.
  They carry an optional `position` used only by the sorter.
- SidebarItemDoc / SidebarItemCategory: the frozen public result. They have
  no position field; ordering is baked into the sequence order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

ITEM_DOC = "doc"
ITEM_CATEGORY = "category"


@dataclass
class DocNode:
    id: str
    label: Optional[str] = None
    position: Optional[float] = None

    type = ITEM_DOC


@dataclass(eq=False)
class CategoryNode:
    # eq=False: nodes are identified by instance, one per breadcrumb
    label: str
    collapsed: bool
    items: List["Node"] = field(default_factory=list)
    position: Optional[float] = None

    type = ITEM_CATEGORY


Node = Union[DocNode, CategoryNode]


@dataclass(frozen=True)
class SidebarItemDoc:
    id: str
    label: Optional[str] = None

    type = ITEM_DOC

    def as_dict(self) -> dict:
        out: dict = {"type": self.type, "id": self.id}
        if self.label is not None:
            out["label"] = self.label
        return out


@dataclass(frozen=True)
class SidebarItemCategory:
    label: str
    collapsed: bool
    items: Tuple["SidebarItem", ...] = ()

    type = ITEM_CATEGORY

    def as_dict(self) -> dict:
        return {
            "type": self.type,
            "label": self.label,
            "collapsed": self.collapsed,
            "items": [it.as_dict() for it in self.items],
        }


SidebarItem = Union[SidebarItemDoc, SidebarItemCategory]


__all__ = [
    "ITEM_DOC",
    "ITEM_CATEGORY",
    "DocNode",
    "CategoryNode",
    "Node",
    "SidebarItemDoc",
    "SidebarItemCategory",
    "SidebarItem",
]
