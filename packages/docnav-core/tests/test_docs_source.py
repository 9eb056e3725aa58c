from __future__ import annotations

import textwrap

import pytest

from docnav.core.docs_source import load_docs, parse_front_matter
from docnav.core.exception import SidebarError
from docnav.core.generator import generate_sidebar_slice


def _write(root, rel: str, text: str = "# title\n") -> None:
    p = root / rel
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")


def test_parse_front_matter():
    meta, body = parse_front_matter("---\nsidebar_label: Hi\nsidebar_position: 3\n---\n# Body\n")
    assert meta == {"sidebar_label": "Hi", "sidebar_position": 3}
    assert body == "# Body\n"

    meta, body = parse_front_matter("# No front matter\n")
    assert meta == {}
    assert body == "# No front matter\n"


def test_parse_front_matter_rejects_non_mapping():
    with pytest.raises(SidebarError):
        parse_front_matter("---\n- a\n- b\n---\nbody\n", path="x.md")


def test_load_docs(content_dir, settings):
    _write(content_dir, "intro.md")
    _write(content_dir, "02-guides/01-setup.md")
    _write(
        content_dir,
        "02-guides/05-faq.mdx",
        """
        ---
        id: questions
        sidebar_label: FAQ
        sidebar_position: 0.5
        ---
        body
        """,
    )
    _write(content_dir, "_partials/snippet.md")
    _write(content_dir, "notes.txt")

    docs = {d.id: d for d in load_docs(content_dir, settings=settings)}
    assert set(docs) == {"intro", "guides/setup", "guides/questions"}

    assert docs["intro"].source_dir_name == "."
    assert docs["intro"].sidebar_position is None
    assert docs["guides/setup"].source_dir_name == "02-guides"
    assert docs["guides/setup"].sidebar_position == 1
    assert docs["guides/setup"].source == "@site/docs/02-guides/01-setup.md"
    # front matter position beats the filename prefix
    assert docs["guides/questions"].sidebar_position == 0.5
    assert docs["guides/questions"].sidebar_label == "FAQ"


def test_invalid_sidebar_position(content_dir, settings):
    _write(content_dir, "a.md", "---\nsidebar_position: first\n---\n")
    with pytest.raises(SidebarError):
        load_docs(content_dir, settings=settings)


def test_load_then_generate(content_dir, settings):
    _write(content_dir, "guides/intro.md")
    _write(content_dir, "guides/01-setup.md")
    _write(content_dir, "api/ref.md")
    _write(content_dir, "api/_category_.json", '{"label": "API Reference"}')

    items = generate_sidebar_slice(".", load_docs(content_dir, settings=settings), content_path=content_dir, settings=settings)
    assert [it.as_dict() for it in items] == [
        {"type": "category", "label": "API Reference", "collapsed": True, "items": [{"type": "doc", "id": "api/ref"}]},
        {
            "type": "category",
            "label": "guides",
            "collapsed": True,
            "items": [{"type": "doc", "id": "guides/setup"}, {"type": "doc", "id": "guides/intro"}],
        },
    ]


def test_non_finite_sidebar_position(content_dir, settings):
    _write(content_dir, "a.md", "---\nsidebar_position: .nan\n---\n")
    with pytest.raises(SidebarError):
        load_docs(content_dir, settings=settings)
