from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from docnav.core.exception import StructuralError
from docnav.core.spec import SidebarDoc

BREADCRUMB_SEPARATOR = "/"
ROOT_DIR = "."


@dataclass(frozen=True)
class Breadcrumb:
    parents: Tuple[str, ...]
    tail: str


def _add_trailing_slash(p: str) -> str:
    return p if p.endswith(BREADCRUMB_SEPARATOR) else p + BREADCRUMB_SEPARATOR


def is_root_doc(doc: SidebarDoc, dir_name: str) -> bool:
    return doc.source_dir_name == dir_name


def is_category_doc(doc: SidebarDoc, dir_name: str) -> bool:
    if is_root_doc(doc, dir_name):
        return False
    # "api/myDoc" is inside "api", "api2/myDoc" is not
    return dir_name == ROOT_DIR or doc.source_dir_name.startswith(_add_trailing_slash(dir_name))


def is_in_autogenerated_dir(doc: SidebarDoc, dir_name: str) -> bool:
    return is_root_doc(doc, dir_name) or is_category_doc(doc, dir_name)


def relative_dir(doc: SidebarDoc, dir_name: str) -> str:
    """Dir of `doc` relative to the autogenerated dir.

    dir_name=a/b, doc dir=a/b/c/d -> c/d
    dir_name=a/b, doc dir=a/b     -> .
    """
    if not is_in_autogenerated_dir(doc, dir_name):
        raise StructuralError(
            f"relative_dir() can only be called for docs inside the autogenerated dir: doc={doc.id} dir={dir_name}"
        )
    if dir_name == doc.source_dir_name:
        return ROOT_DIR
    if dir_name == ROOT_DIR:
        return doc.source_dir_name
    return doc.source_dir_name[len(_add_trailing_slash(dir_name)):]


def breadcrumb_of(rel_dir: str) -> Tuple[str, ...]:
    if rel_dir == ROOT_DIR:
        return ()
    return tuple(seg for seg in rel_dir.split(BREADCRUMB_SEPARATOR) if seg)


def split_breadcrumb(breadcrumb: Tuple[str, ...]) -> Breadcrumb:
    """[...parents, tail]"""
    if not breadcrumb:
        raise StructuralError("cannot split an empty breadcrumb")
    return Breadcrumb(parents=tuple(breadcrumb[:-1]), tail=breadcrumb[-1])


def breadcrumb_key(breadcrumb: Tuple[str, ...]) -> str:
    return BREADCRUMB_SEPARATOR.join(breadcrumb)
