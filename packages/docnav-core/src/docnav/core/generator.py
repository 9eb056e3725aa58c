"""Autogenerated sidebar slices.

Documents are grouped by directory: every sub-directory of the autogenerated
dir becomes a category, created lazily the first time a document below it is
seen. Category label, position and collapsed state come from an optional
_category_ metadata file, falling back to the dir name (with its number
prefix stripped) and the configured collapsed default.

Documents are handled one at a time in `source` order. That order decides
both the tie-break between items without a position and the order in which
categories are first created, so it must not be parallelized.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from docnav.core.breadcrumb import (
    ROOT_DIR,
    breadcrumb_key,
    breadcrumb_of,
    is_in_autogenerated_dir,
    relative_dir,
    split_breadcrumb,
)
from docnav.core.category_metadata import read_category_metadata
from docnav.core.items import CategoryNode, DocNode, Node, SidebarItem
from docnav.core.number_prefix import extract_number_prefix
from docnav.core.observability import SliceObserver
from docnav.core.runtime.settings import Settings, load_settings
from docnav.core.sorting import sort_sidebar_items
from docnav.core.spec import AutogeneratedSpec, SidebarDoc

log = logging.getLogger("docnav.core.generator")


@dataclass
class SidebarBuildContext:
    """Mutable state of one generation call. Never shared between calls."""

    dir_name: str
    content_path: Path
    collapsed_default: bool
    observer: Optional[SliceObserver] = None
    items: List[Node] = field(default_factory=list)
    categories_by_breadcrumb: Dict[str, CategoryNode] = field(default_factory=dict)

    def category_dir(self, breadcrumb: Tuple[str, ...]) -> Path:
        base = self.content_path if self.dir_name == ROOT_DIR else self.content_path / self.dir_name
        return base.joinpath(*breadcrumb)

    def create_category(self, breadcrumb: Tuple[str, ...]) -> CategoryNode:
        metadata = read_category_metadata(self.category_dir(breadcrumb))
        prefix = extract_number_prefix(split_breadcrumb(breadcrumb).tail)

        label = prefix.filename
        position = prefix.number_prefix
        collapsed = self.collapsed_default
        if metadata is not None:
            if metadata.label is not None:
                label = metadata.label
            if metadata.position is not None:
                position = metadata.position
            if metadata.collapsed is not None:
                collapsed = metadata.collapsed

        node = CategoryNode(label=label, collapsed=collapsed, position=position)
        if self.observer is not None:
            self.observer.category_created(breadcrumb=breadcrumb_key(breadcrumb), label=label, position=position)
        return node

    def resolve_category(self, breadcrumb: Tuple[str, ...]) -> Optional[CategoryNode]:
        """Get or create the category of `breadcrumb`, creating its ancestors first.

        Returns None for the empty breadcrumb (the autogenerated dir itself).
        """
        if not breadcrumb:
            return None
        parent = self.resolve_category(split_breadcrumb(breadcrumb).parents)
        key = breadcrumb_key(breadcrumb)
        existing = self.categories_by_breadcrumb.get(key)
        if existing is not None:
            return existing

        category = self.create_category(breadcrumb)
        if parent is not None:
            parent.items.append(category)
        else:
            self.items.append(category)
        self.categories_by_breadcrumb[key] = category
        return category

    def breadcrumb_for(self, doc: SidebarDoc) -> Tuple[str, ...]:
        return breadcrumb_of(relative_dir(doc, self.dir_name))

    def attach_document(self, doc: SidebarDoc) -> DocNode:
        category = self.resolve_category(self.breadcrumb_for(doc))
        node = DocNode(id=doc.id, label=doc.sidebar_label, position=doc.sidebar_position)
        if category is not None:
            category.items.append(node)
        else:
            self.items.append(node)
        return node


def select_docs(docs: Iterable[SidebarDoc], dir_name: str) -> List[SidebarDoc]:
    """Docs inside the autogenerated dir, sorted by folder+filename at once."""
    return sorted((d for d in docs if is_in_autogenerated_dir(d, dir_name)), key=lambda d: d.source)


def build_sidebar_items(
    docs: List[SidebarDoc],
    *,
    dir_name: str,
    content_path: Path | str,
    collapsed_default: bool,
    observer: Optional[SliceObserver] = None,
) -> SidebarBuildContext:
    """Build the unsorted tree of `docs` (already selected and sorted)."""
    ctx = SidebarBuildContext(
        dir_name=dir_name,
        content_path=Path(content_path),
        collapsed_default=collapsed_default,
        observer=observer,
    )
    # sequential on purpose: order matters
    for doc in docs:
        ctx.attach_document(doc)
    return ctx


def generate_sidebar_slice(
    item: AutogeneratedSpec | str,
    docs: Iterable[SidebarDoc],
    *,
    content_path: Path | str,
    settings: Optional[Settings] = None,
) -> List[SidebarItem]:
    """Generate the sidebar items of one autogenerated slice.

    Raises CategoryMetadataError on an invalid _category_ file; nothing is
    returned in that case.
    """
    settings = settings or load_settings()
    if isinstance(item, str):
        item = AutogeneratedSpec(dir_name=item)

    selected = select_docs(docs, item.dir_name)
    observer = SliceObserver(settings=settings, logger=log, dir_name=item.dir_name)
    observer.start(doc_count=len(selected))
    if not selected:
        observer.empty()

    ctx = build_sidebar_items(
        selected,
        dir_name=item.dir_name,
        content_path=content_path,
        collapsed_default=settings.category_collapsed_default,
        observer=observer,
    )
    result = sort_sidebar_items(ctx.items)
    observer.end(top_level=len(result))
    return result
