from __future__ import annotations

import json
import logging
import time
from typing import Any

from docnav.core.runtime.settings import Settings


def _now_ms() -> int:
    return int(time.time() * 1000)


def _dur_ms(t0: float, t1: float) -> int:
    return int((t1 - t0) * 1000)


def log_event(logger: logging.Logger, *, settings: Settings, level: int, event: str, **fields: Any) -> None:
    """Emit an event log.

    - text format: one-liner `event key=value ...`
    - json format: one JSON object per line
    """
    if settings.log_format.lower() == "json":
        payload = {"ts_ms": _now_ms(), "event": event, **fields}
        logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))
        return

    # text
    parts = [event]
    for k, v in fields.items():
        parts.append(f"{k}={v}")
    logger.log(level, " ".join(parts))


class SliceObserver:
    """Times one sidebar slice generation and emits start/end events."""

    def __init__(self, *, settings: Settings, logger: logging.Logger, dir_name: str):
        self.settings = settings
        self.logger = logger
        self.dir_name = dir_name
        self._t0: float | None = None
        self.categories_created = 0

    def start(self, *, doc_count: int) -> None:
        self._t0 = time.perf_counter()
        log_event(self.logger, settings=self.settings, level=logging.INFO, event="sidebar_start", dir=self.dir_name, docs=doc_count)

    def category_created(self, *, breadcrumb: str, label: str, position: Any) -> None:
        self.categories_created += 1
        log_event(self.logger, settings=self.settings, level=logging.DEBUG, event="category_created", dir=self.dir_name, breadcrumb=breadcrumb, label=label, position=position)

    def empty(self) -> None:
        log_event(
            self.logger,
            settings=self.settings,
            level=logging.WARNING,
            event="sidebar_empty",
            dir=self.dir_name,
            msg=f"No docs found in dir {self.dir_name}: can't auto-generate a sidebar",
        )

    def end(self, *, top_level: int) -> None:
        t0 = self._t0
        dur = _dur_ms(t0, time.perf_counter()) if t0 is not None else 0
        log_event(
            self.logger,
            settings=self.settings,
            level=logging.INFO,
            event="sidebar_end",
            dir=self.dir_name,
            top_level=top_level,
            categories=self.categories_created,
            duration_ms=dur,
        )
