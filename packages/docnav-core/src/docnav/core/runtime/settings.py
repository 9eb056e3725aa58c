from __future__ import annotations

import os
from importlib import import_module
from typing import List, Literal

from pydantic import BaseModel, Field

# Categories are collapsed unless their _category_ file says otherwise.
DEFAULT_CATEGORY_COLLAPSED = True


class Settings(BaseModel):
    # Defaults are static. Use load_settings(env=...) to read from an env snapshot.
    category_collapsed_default: bool = DEFAULT_CATEGORY_COLLAPSED
    log_level: str = "INFO"

    # - log_format: "text" (default) or "json". When json, docnav logs emit a single JSON
    #   object per line, suitable for log aggregation.
    log_format: Literal["text", "json"] = "text"

    # File extensions picked up by docs_source.load_docs
    doc_extensions: List[str] = Field(default_factory=lambda: [".md", ".mdx"])

    @classmethod
    def from_env(cls, env: dict[str, str], overrides: dict | None = None) -> "Settings":
        """Build Settings from an explicit env snapshot (does not read os.environ)."""
        def g(key: str, default: str | None = None) -> str | None:
            return env.get(key, default)  # type: ignore[return-value]

        data = {
            "category_collapsed_default": (g("DOCNAV_CATEGORY_COLLAPSED", "true") or "true").lower() == "true",
            "log_level": g("DOCNAV_LOG_LEVEL", "INFO"),
            "log_format": g("DOCNAV_LOG_FORMAT", "text"),
            "doc_extensions": [e.strip() for e in (g("DOCNAV_DOC_EXTENSIONS", ".md,.mdx") or "").split(",") if e.strip()],
        }
        if overrides:
            data.update(overrides)
        return cls(**data)


def load_settings(overrides: dict | None = None, *, env: dict[str, str] | None = None) -> Settings:
    """Load settings from (1) env snapshot, (2) optional settings module, (3) explicit overrides.

    If env is not provided, we build a snapshot from os.environ.
    """
    env2 = {k: str(v) for k, v in os.environ.items()} if env is None else env
    s = Settings.from_env(env2)
    mod = env2.get("DOCNAV_SETTINGS_MODULE")
    if mod:
        m = import_module(mod)
        data = getattr(m, "SETTINGS", {})
        if not isinstance(data, dict):
            raise TypeError("DOCNAV_SETTINGS_MODULE must expose SETTINGS: dict")
        s = s.model_copy(update=data)
    if overrides:
        s = s.model_copy(update=overrides)
    return s
