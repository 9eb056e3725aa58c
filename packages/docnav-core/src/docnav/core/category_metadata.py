from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, List, Optional, Tuple

import yaml
from pydantic import ValidationError

from docnav.core.exception import CategoryMetadataError
from docnav.core.spec import CATEGORY_METADATA_FILENAME_BASE, CategoryMetadataSpec

log = logging.getLogger("docnav.core.category_metadata")


@dataclass(frozen=True)
class MetadataIssue:
    code: str
    loc: str
    msg: str

    def as_dict(self) -> dict:
        return {"code": self.code, "loc": self.loc, "msg": self.msg}


@dataclass(frozen=True)
class CategoryMetadataReport:
    """Tagged validation result: either `metadata` or a list of issues."""

    path: str
    ok: bool
    metadata: Optional[CategoryMetadataSpec] = None
    issues: List[MetadataIssue] = field(default_factory=list)

    def as_dict(self) -> dict:
        return {
            "path": self.path,
            "ok": self.ok,
            "metadata": self.metadata.model_dump(exclude_none=True) if self.metadata is not None else None,
            "issues": [i.as_dict() for i in self.issues],
        }


def _parse_json(text: str) -> Any:
    return json.loads(text)


def _parse_yaml(text: str) -> Any:
    data = yaml.safe_load(text)
    # an empty YAML document is an empty mapping, not "no metadata"
    return {} if data is None else data


# Priority order: the first existing file wins, no merge.
CATEGORY_METADATA_FILES: Tuple[Tuple[str, Callable[[str], Any]], ...] = (
    (f"{CATEGORY_METADATA_FILENAME_BASE}.json", _parse_json),
    (f"{CATEGORY_METADATA_FILENAME_BASE}.yml", _parse_yaml),
    (f"{CATEGORY_METADATA_FILENAME_BASE}.yaml", _parse_yaml),
)


def validate_category_metadata(raw: Any, *, path: str) -> CategoryMetadataReport:
    """Validate parsed _category_ content against CategoryMetadataSpec."""
    if not isinstance(raw, dict):
        issue = MetadataIssue(code="schema:not_a_mapping", loc="$", msg=f"expected a mapping, got {type(raw).__name__}")
        return CategoryMetadataReport(path=path, ok=False, issues=[issue])
    try:
        spec = CategoryMetadataSpec.model_validate(raw)
    except ValidationError as e:
        issues = [
            MetadataIssue(
                code=f"schema:{err.get('type')}",
                loc=".".join(str(p) for p in err.get("loc", ())) or "$",
                msg=str(err.get("msg")),
            )
            for err in e.errors()
        ]
        return CategoryMetadataReport(path=path, ok=False, issues=issues)
    return CategoryMetadataReport(path=path, ok=True, metadata=spec)


def find_category_metadata_file(category_dir: Path) -> Optional[Tuple[Path, Callable[[str], Any]]]:
    for filename, parse in CATEGORY_METADATA_FILES:
        p = category_dir / filename
        if p.is_file():
            return p, parse
    return None


def check_category_metadata_file(file_path: Path, parse: Callable[[str], Any]) -> CategoryMetadataReport:
    # Posix paths keep diagnostics stable across platforms
    path = file_path.as_posix()
    try:
        raw = parse(file_path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        issue = MetadataIssue(code="parse:error", loc="$", msg=str(e).splitlines()[0] if str(e) else type(e).__name__)
        return CategoryMetadataReport(path=path, ok=False, issues=[issue])
    return validate_category_metadata(raw, path=path)


def read_category_metadata(category_dir: Path | str) -> Optional[CategoryMetadataSpec]:
    """Read the _category_ metadata file of a category dir.

    Returns None when no metadata file exists. Raises CategoryMetadataError
    when the file exists but is invalid.
    """
    found = find_category_metadata_file(Path(category_dir))
    if found is None:
        return None
    file_path, parse = found
    report = check_category_metadata_file(file_path, parse)
    if not report.ok:
        log.error(f"The docs sidebar category metadata file looks invalid! path={report.path}")
        raise CategoryMetadataError(path=report.path, issues=report.issues)
    return report.metadata


def validate_category_tree(content_path: Path | str) -> List[CategoryMetadataReport]:
    """Validate the effective _category_ file of every dir under content_path."""
    root = Path(content_path)
    dirs = [root] + sorted(p for p in root.rglob("*") if p.is_dir())
    reports: List[CategoryMetadataReport] = []
    for d in dirs:
        found = find_category_metadata_file(d)
        if found is not None:
            reports.append(check_category_metadata_file(*found))
    return reports
