"""
ChartConfig — YAML/JSON loader for chart definitions.

Single Responsibility: parse the chart definitions file into typed
dataclasses. No HTTP calls, no transformation.

Accepted shapes::

    # Many charts, keyed by chart_id
    sales:
      graph_type: stacked_area_chart
      query_id: "..."
      echart_config: {...}

    # A single chart (legacy chart_config.json) → registered as "default"
    {"graph_type": "...", "query_id": "...", "echart_config": {...}}

JSON is valid YAML, so ``yaml.safe_load`` handles both.

Usage::

    from chart_app.services.broker.chart_config import chart_config_loader

    definition = chart_config_loader.get("sales")   # ChartDefinition | None
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from chart_app.core.config import settings

logger = logging.getLogger(__name__)

DEFAULT_CHART_ID = "default"

_SINGLE_CHART_KEYS = ("echart_config", "query_id", "graph_type")


# ── Dataclass ────────────────────────────────────────────────────

@dataclass(frozen=True)
class ChartDefinition:
    """
    Immutable definition of a single chart.

    ``echart_config`` is the base ECharts option; ``series[0]`` names the
    pivot fields for stacked graph types.
    """
    chart_id: str
    query_id: str
    graph_type: str
    echart_config: Dict[str, Any] = field(default_factory=dict)
    title: str = ""

    @property
    def original_series(self) -> Union[List[Any], Dict[str, Any]]:
        """``echart_config.series`` as written: usually a list, ECharts also takes one mapping."""
        return self.echart_config.get("series") or []


# ── Loader ───────────────────────────────────────────────────────

class ChartConfigLoader:
    """
    Loads and caches the parsed chart definitions.

    The file is read once on first access and cached in memory.
    Call ``reload()`` to re-read after manual edits.
    """

    def __init__(self, config_path: Optional[Path] = None):
        self._config_path = Path(config_path or settings.CHART_CONFIG_PATH)
        self._charts: Dict[str, ChartDefinition] = {}
        self._loaded = False

    @property
    def config_path(self) -> Path:
        return self._config_path

    def get_all(self) -> Dict[str, ChartDefinition]:
        """Return all chart definitions (keyed by chart_id)."""
        self._ensure_loaded()
        return dict(self._charts)

    def get(self, chart_id: str) -> Optional[ChartDefinition]:
        """Return a single definition by its chart_id, or ``None``."""
        self._ensure_loaded()
        return self._charts.get(chart_id)

    def list_ids(self) -> List[str]:
        self._ensure_loaded()
        return list(self._charts.keys())

    def reload(self) -> None:
        """Force re-read of the definitions file."""
        self._loaded = False
        self._charts.clear()
        self._ensure_loaded()

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    # ── Internal ─────────────────────────────────────────────

    def _ensure_loaded(self) -> None:
        if self._loaded:
            return
        self._load()

    def _load(self) -> None:
        """Parse the file into ChartDefinition dataclasses."""
        if not self._config_path.exists():
            logger.warning(
                f"[ChartConfig] Config file not found: {self._config_path}"
            )
            self._loaded = True
            return

        try:
            raw = yaml.safe_load(self._config_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            logger.error(f"[ChartConfig] Parse error in {self._config_path}: {exc}")
            self._loaded = True
            return

        if not raw or not isinstance(raw, dict):
            logger.info("[ChartConfig] No charts configured")
            self._loaded = True
            return

        if any(key in raw for key in _SINGLE_CHART_KEYS):
            raw = {DEFAULT_CHART_ID: raw}

        for chart_id, definition in raw.items():
            if not isinstance(definition, dict):
                continue
            try:
                self._charts[str(chart_id)] = _parse_definition(str(chart_id), definition)
            except (KeyError, ValueError, TypeError) as exc:
                logger.error(
                    f"[ChartConfig] Skipping invalid entry '{chart_id}': {exc}"
                )

        self._loaded = True
        logger.info(
            f"[ChartConfig] Loaded {len(self._charts)} chart definition(s)"
        )


def _parse_definition(chart_id: str, definition: Dict[str, Any]) -> ChartDefinition:
    echart_config = definition.get("echart_config") or {}
    if not isinstance(echart_config, dict):
        raise TypeError("echart_config must be a mapping")

    return ChartDefinition(
        chart_id=chart_id,
        query_id=str(definition["query_id"]),
        graph_type=str(definition.get("graph_type", "")),
        echart_config=echart_config,
        title=definition.get("title") or chart_id,
    )


# ── Singleton ────────────────────────────────────────────────────
chart_config_loader = ChartConfigLoader()
