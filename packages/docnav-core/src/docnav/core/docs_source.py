from __future__ import annotations

import logging
import math
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from docnav.core.breadcrumb import BREADCRUMB_SEPARATOR, ROOT_DIR
from docnav.core.exception import SidebarError
from docnav.core.number_prefix import extract_number_prefix, strip_number_prefix
from docnav.core.runtime.settings import Settings, load_settings
from docnav.core.spec import SidebarDoc

log = logging.getLogger("docnav.core.docs_source")

FRONT_MATTER_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)(.*)\Z", re.DOTALL)


def parse_front_matter(text: str, *, path: str = "<string>") -> Tuple[Dict[str, Any], str]:
    """Split `---` fenced YAML front matter from a markdown body."""
    m = FRONT_MATTER_RE.match(text)
    if not m:
        return {}, text
    try:
        meta = yaml.safe_load(m.group(1))
    except yaml.YAMLError as e:
        raise SidebarError(f"invalid front matter in {path}: {e}") from e
    if meta is None:
        meta = {}
    if not isinstance(meta, dict):
        raise SidebarError(f"front matter must be a mapping in {path}, got {type(meta).__name__}")
    return meta, m.group(2)


def _explicit_position(meta: Dict[str, Any], *, path: str) -> Optional[float]:
    pos = meta.get("sidebar_position")
    if pos is None:
        return None
    if isinstance(pos, bool) or not isinstance(pos, (int, float)):
        raise SidebarError(f"sidebar_position must be a number in {path}, got {pos!r}")
    if not math.isfinite(pos):
        raise SidebarError(f"sidebar_position must be finite in {path}, got {pos!r}")
    return pos


def _doc_id(rel: Path, meta: Dict[str, Any]) -> str:
    # default id: dir + file name, number prefixes stripped from every segment
    parts = [strip_number_prefix(p) for p in rel.parent.parts]
    parts.append(str(meta["id"]) if meta.get("id") else strip_number_prefix(rel.stem))
    return BREADCRUMB_SEPARATOR.join(parts)


def load_doc(content_path: Path, file_path: Path, *, source_prefix: str = "@site/docs") -> SidebarDoc:
    rel = file_path.relative_to(content_path)
    meta, _ = parse_front_matter(file_path.read_text(encoding="utf-8"), path=rel.as_posix())

    position = _explicit_position(meta, path=rel.as_posix())
    if position is None:
        position = extract_number_prefix(rel.stem).number_prefix

    source_dir = rel.parent.as_posix()
    return SidebarDoc(
        id=_doc_id(rel, meta),
        source=f"{source_prefix.rstrip('/')}/{rel.as_posix()}",
        source_dir_name=ROOT_DIR if source_dir in ("", ".") else source_dir,
        front_matter=meta,
        sidebar_position=position,
    )


def load_docs(
    content_path: Path | str,
    *,
    settings: Optional[Settings] = None,
    source_prefix: str = "@site/docs",
) -> List[SidebarDoc]:
    """Load every doc file below content_path.

    Files and dirs whose name starts with "_" are skipped (partials and
    _category_ files).
    """
    settings = settings or load_settings()
    root = Path(content_path)
    if not root.is_dir():
        raise NotADirectoryError(str(root))
    exts = {e.lower() for e in settings.doc_extensions}

    docs: List[SidebarDoc] = []
    for p in sorted(root.rglob("*")):
        if not p.is_file() or p.suffix.lower() not in exts:
            continue
        if any(part.startswith("_") for part in p.relative_to(root).parts):
            continue
        docs.append(load_doc(root, p, source_prefix=source_prefix))
    log.debug(f"Loaded {len(docs)} docs from {root}")
    return docs
