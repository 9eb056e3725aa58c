from __future__ import annotations

import pytest

from docnav.core.number_prefix import NumberPrefix, extract_number_prefix, strip_number_prefix


@pytest.mark.parametrize(
    "name, expected",
    [
        ("01-setup", NumberPrefix("setup", 1)),
        ("1-setup", NumberPrefix("setup", 1)),
        ("007_bond", NumberPrefix("bond", 7)),
        ("10.api", NumberPrefix("api", 10)),
        ("2 - getting started", NumberPrefix("getting started", 2)),
        ("3 faq", NumberPrefix("faq", 3)),
        ("0-zero", NumberPrefix("zero", 0)),
    ],
)
def test_extract_number_prefix(name, expected):
    assert extract_number_prefix(name) == expected


@pytest.mark.parametrize(
    "name",
    [
        "intro",
        "01",  # digits only, no separator
        "2intro",  # no separator
        "01-",  # nothing left after the prefix
        "2021-01-01-release",  # date-like
        "1.2.3",  # version-like
        "setup-01",
    ],
)
def test_no_number_prefix_returns_name_unchanged(name):
    res = extract_number_prefix(name)
    assert res.filename == name
    assert res.number_prefix is None


def test_strip_number_prefix():
    assert strip_number_prefix("05-guides") == "guides"
    assert strip_number_prefix("guides") == "guides"
