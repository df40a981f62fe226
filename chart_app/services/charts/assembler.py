"""
OptionsAssembler — merges chart config, dataset and series into the
final ECharts ``option`` object.

Every key of ``echart_config`` except ``dataset`` and ``series`` is
copied as-is; the input dict is never mutated. No validation — ECharts
owns the interpretation of the result.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Sequence

_REPLACED_KEYS = ("dataset", "series")


def assemble_options(
    echart_config: Mapping[str, Any],
    dataset: Sequence[Mapping[str, Any]],
    series: List[Any],
) -> Dict[str, Any]:
    """Return a new option dict with ``dataset.source`` and ``series`` set."""
    options: Dict[str, Any] = {
        key: value
        for key, value in echart_config.items()
        if key not in _REPLACED_KEYS
    }
    options["dataset"] = {"source": dataset}
    options["series"] = series
    return options
