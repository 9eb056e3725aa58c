from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, StrictBool, StrictFloat, StrictInt, StrictStr
from pydantic.config import ConfigDict

# ---------------------------------------------------------------------------
# Category metadata (_category_.json / _category_.yml / _category_.yaml)
# ---------------------------------------------------------------------------

CATEGORY_METADATA_FILENAME_BASE = "_category_"


class CategoryMetadataSpec(BaseModel):
    """_category_ file schema.

    Notes:
      - every key is optional; an empty file is valid.
      - unknown keys are tolerated, only the three recognized keys are type-checked.
    """

    model_config = ConfigDict(extra="allow", frozen=True, allow_inf_nan=False)

    label: Optional[StrictStr] = None
    position: Optional[Union[StrictInt, StrictFloat]] = None
    collapsed: Optional[StrictBool] = None


# ---------------------------------------------------------------------------
# Autogenerated sidebar slice
# ---------------------------------------------------------------------------


class AutogeneratedSpec(BaseModel):
    """An `{type: autogenerated, dirName: ...}` sidebar item."""

    model_config = ConfigDict(extra="forbid")

    dir_name: str = "."


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SidebarDoc:
    """A document as seen by the sidebar generator.

    - source: storage path, also the sort key (e.g. "@site/docs/guides/intro.md")
    - source_dir_name: containing dir relative to the content root ("." for the root)
    - sidebar_position: explicit position (front matter or filename prefix)
    """

    id: str
    source: str
    source_dir_name: str
    front_matter: Dict[str, Any] = field(default_factory=dict)
    sidebar_position: Optional[float] = None

    @property
    def sidebar_label(self) -> Optional[str]:
        return self.front_matter.get("sidebar_label") or None


__all__ = [
    "CATEGORY_METADATA_FILENAME_BASE",
    "CategoryMetadataSpec",
    "AutogeneratedSpec",
    "SidebarDoc",
]
