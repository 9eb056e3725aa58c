"""Centralized customized exceptions for docnav.

All project-specific exceptions live in this module. Internal code should
prefer explicit imports:

    from docnav.core.exception import CategoryMetadataError
"""

from __future__ import annotations

from typing import Any, List

__all__ = [
    "SidebarError",
    "CategoryMetadataError",
    "StructuralError",
]


class SidebarError(ValueError):
    """Base error for sidebar generation failures."""


class CategoryMetadataError(SidebarError):
    """Raised when a _category_ metadata file exists but is invalid."""

    def __init__(self, *, path: str, issues: List[Any]):
        details = "; ".join(f"{i.loc}: {i.msg}" for i in issues) or "invalid content"
        super().__init__(f"The docs sidebar category metadata file looks invalid! path={path} ({details})")
        self.path = path
        self.issues = list(issues)


class StructuralError(SidebarError):
    """Raised when an internal invariant of the tree builder is violated."""
