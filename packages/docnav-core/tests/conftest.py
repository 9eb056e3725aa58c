import sys
from pathlib import Path

# Allow running tests without installing the package.
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

import pytest
from docnav.core.runtime.settings import Settings
from docnav.core.spec import SidebarDoc


def make_doc(source_path: str, *, id: str | None = None, label: str | None = None, position=None) -> SidebarDoc:
    """Build a SidebarDoc from a path relative to the content root, e.g. "guides/intro.md"."""
    parent, _, filename = source_path.rpartition("/")
    front_matter = {"sidebar_label": label} if label else {}
    return SidebarDoc(
        id=id or source_path.rsplit(".", 1)[0],
        source=f"@site/docs/{source_path}",
        source_dir_name=parent or ".",
        front_matter=front_matter,
        sidebar_position=position,
    )


@pytest.fixture()
def content_dir(tmp_path):
    d = tmp_path / "docs"
    d.mkdir()
    return d


@pytest.fixture()
def settings():
    return Settings(category_collapsed_default=True, log_level="INFO", log_format="text")
