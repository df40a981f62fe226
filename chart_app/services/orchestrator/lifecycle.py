"""
ChartLifecycle — one-shot state machine for a single chart load.

    idle ──start()──▶ loading ──succeed(options)──▶ ready
                         └──────fail(message)─────▶ failed

No retries and no re-entry: any other transition raises ``RuntimeError``.
``render()`` projects a lifecycle onto what the page should display,
independent of any UI framework.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

LOADING_MESSAGE = "Loading chart..."
EMPTY_MESSAGE = "No chart configuration available"
FAILURE_MESSAGE = "Failed to load chart data"

# How the browser should paint the options (ECharts init + setOption flags)
DEFAULT_RENDER_OPTS: Dict[str, Any] = {
    "height": "400px",
    "width": "100%",
    "renderer": "canvas",
    "notMerge": True,
    "lazyUpdate": True,
}


class ChartStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


_TRANSITIONS = {
    ChartStatus.IDLE: {ChartStatus.LOADING},
    ChartStatus.LOADING: {ChartStatus.READY, ChartStatus.FAILED},
    ChartStatus.READY: set(),
    ChartStatus.FAILED: set(),
}


class ChartLifecycle:
    """Owned by the caller; holds the outcome of exactly one pipeline run."""

    __slots__ = ("status", "options", "error")

    def __init__(self) -> None:
        self.status = ChartStatus.IDLE
        self.options: Optional[Dict[str, Any]] = None
        self.error: Optional[str] = None

    def start(self) -> None:
        self._move(ChartStatus.LOADING)
        self.options = None
        self.error = None

    def succeed(self, options: Optional[Dict[str, Any]]) -> None:
        self._move(ChartStatus.READY)
        self.options = options

    def fail(self, message: str) -> None:
        self._move(ChartStatus.FAILED)
        self.error = message

    @property
    def is_done(self) -> bool:
        return self.status in (ChartStatus.READY, ChartStatus.FAILED)

    def _move(self, target: ChartStatus) -> None:
        if target not in _TRANSITIONS[self.status]:
            raise RuntimeError(
                f"Invalid chart lifecycle transition: "
                f"{self.status.value} → {target.value}"
            )
        self.status = target

    def __repr__(self) -> str:
        return f"ChartLifecycle(status={self.status.value!r}, error={self.error!r})"


@dataclass(frozen=True)
class ChartView:
    """What to display for a lifecycle: a message, or options to paint."""
    status: str
    message: Optional[str] = None
    options: Optional[Dict[str, Any]] = None
    render_opts: Dict[str, Any] = field(default_factory=dict)

    @property
    def has_chart(self) -> bool:
        return self.options is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "message": self.message,
            "options": self.options,
            "render_opts": self.render_opts,
        }


def render(lifecycle: ChartLifecycle) -> ChartView:
    """Pure projection of a lifecycle onto a ``ChartView``."""
    status = lifecycle.status

    if status in (ChartStatus.IDLE, ChartStatus.LOADING):
        return ChartView(status=ChartStatus.LOADING.value, message=LOADING_MESSAGE)

    if status == ChartStatus.FAILED:
        return ChartView(
            status=status.value,
            message=lifecycle.error or FAILURE_MESSAGE,
        )

    if not lifecycle.options:
        return ChartView(status=status.value, message=EMPTY_MESSAGE)

    return ChartView(
        status=status.value,
        options=lifecycle.options,
        render_opts=dict(DEFAULT_RENDER_OPTS),
    )
