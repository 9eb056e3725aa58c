from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

# "01-intro", "2 . setup", "10_api", "3 faq"; a separator is required after the digits
NUMBER_PREFIX_RE = re.compile(r"^(?P<number>\d+)(?:\s*[-_.]+\s*|\s+)(?P<suffix>.*)$")


@dataclass(frozen=True)
class NumberPrefix:
    filename: str
    number_prefix: Optional[int] = None


def extract_number_prefix(name: str) -> NumberPrefix:
    """Split a leading ordering number off a file or directory name.

    `"01-setup"` -> `NumberPrefix("setup", 1)`. Names without a prefix, or
    whose remainder is empty or starts with a digit (dates, versions such as
    `2021-01-01-post` or `1.2.3`), are returned unchanged.
    """
    m = NUMBER_PREFIX_RE.match(name)
    if not m:
        return NumberPrefix(filename=name)
    suffix = m.group("suffix")
    if not suffix or suffix[0].isdigit():
        return NumberPrefix(filename=name)
    return NumberPrefix(filename=suffix, number_prefix=int(m.group("number")))


def strip_number_prefix(name: str) -> str:
    return extract_number_prefix(name).filename
