"""docnav core package.

Public entrypoints:
- docnav.core.api: stable API surface for integrations
- docnav.core.generator.generate_sidebar_slice: build one autogenerated sidebar slice

Internal modules may change without notice.
"""

from __future__ import annotations

from docnav.core.generator import generate_sidebar_slice

__all__ = ["generate_sidebar_slice"]
