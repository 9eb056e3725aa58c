"""Public, stable API surface for docnav.

If you're integrating docnav into a site generator, import from
**`docnav.core.api`**.

Everything outside this package is considered internal and may change without
notice, even in minor releases.
"""

from __future__ import annotations

# Metadata files
from docnav.core.category_metadata import (
    CategoryMetadataReport,
    read_category_metadata,
    validate_category_metadata,
)
# Common exceptions
from docnav.core.exception import CategoryMetadataError, SidebarError, StructuralError
# Document source
from docnav.core.docs_source import load_docs
# Generation
from docnav.core.generator import generate_sidebar_slice
# Result items
from docnav.core.items import SidebarItem, SidebarItemCategory, SidebarItemDoc
from docnav.core.number_prefix import extract_number_prefix
# Settings
from docnav.core.runtime.settings import Settings, load_settings
from docnav.core.sorting import sort_sidebar_items
# Specs
from docnav.core.spec import AutogeneratedSpec, CategoryMetadataSpec, SidebarDoc

__all__ = [
    # generation
    "generate_sidebar_slice",
    "sort_sidebar_items",
    "extract_number_prefix",
    "load_docs",
    # items
    "SidebarItem",
    "SidebarItemDoc",
    "SidebarItemCategory",
    # spec
    "AutogeneratedSpec",
    "CategoryMetadataSpec",
    "SidebarDoc",
    # metadata
    "CategoryMetadataReport",
    "read_category_metadata",
    "validate_category_metadata",
    # settings
    "Settings",
    "load_settings",
    # errors
    "SidebarError",
    "CategoryMetadataError",
    "StructuralError",
]
