"""
PivotTransformer — long (row-oriented) records → wide records.

Given ``series[0] = {x, y, category}``, every distinct x-value becomes
one output row and every distinct category value becomes one column::

    [{month: Jan, region: East, sales: 10},      [{month: Jan, East: 10, West: 5},
     {month: Jan, region: West, sales: 5},   →    {month: Feb, East: 7,  West: 0}]
     {month: Feb, region: East, sales: 7}]

Rules:
  - x-values and categories keep first-seen order.
  - A missing (x, category) pair is zero-filled with ``0``.
  - Duplicate (x, category) pairs are NOT aggregated: the first record
    in the dataset wins, later ones are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterable, List, Mapping, Sequence, Tuple

from chart_app.core.exceptions import ConfigurationError

Scalar = Any
Record = Dict[str, Scalar]

# Value written when no record matches an (x, category) pair
ZERO_FILL = 0

_REQUIRED_FIELDS = ("x", "y", "category")


@dataclass(frozen=True)
class SeriesConfig:
    """Field names that drive the pivot (from ``echart_config.series[0]``)."""
    x: str
    y: str
    category: str

    @classmethod
    def from_series(cls, original_series: Any) -> "SeriesConfig":
        """
        Read the pivot fields from the first series entry.

        Raises:
            ConfigurationError: series absent, empty or not a list (a single
                mapping included), entry 0 falsy or not a mapping, or one of
                ``x``/``y``/``category`` missing.
        """
        if not _is_series_list(original_series) or not original_series[0]:
            raise ConfigurationError(
                "Original series configuration is required for stacked charts"
            )

        first = original_series[0]
        if not isinstance(first, Mapping):
            raise ConfigurationError(
                f"series[0] must be a mapping, got {type(first).__name__}"
            )

        missing = [name for name in _REQUIRED_FIELDS if not first.get(name)]
        if missing:
            raise ConfigurationError(
                f"series[0] is missing pivot field(s): {', '.join(missing)}"
            )

        return cls(x=first["x"], y=first["y"], category=first["category"])


@dataclass
class PivotResult:
    """Wide rows plus the ordered keys they were built from."""
    rows: List[Record] = field(default_factory=list)
    categories: List[Scalar] = field(default_factory=list)
    x_values: List[Scalar] = field(default_factory=list)


def ordered_unique(values: Iterable[Hashable]) -> List[Hashable]:
    """Distinct values in first-seen order."""
    seen = set()
    ordered: List[Hashable] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        ordered.append(value)
    return ordered


def pivot_records(dataset: Sequence[Mapping[str, Scalar]], config: SeriesConfig) -> PivotResult:
    """Pivot ``dataset`` on ``config.category``; one row per distinct x-value."""
    categories = ordered_unique(record.get(config.category) for record in dataset)
    x_values = ordered_unique(record.get(config.x) for record in dataset)
    index = _index_first_match(dataset, config)

    rows = [
        _wide_record(
            config.x,
            x_value,
            [(category, index.get((x_value, category), ZERO_FILL)) for category in categories],
        )
        for x_value in x_values
    ]
    return PivotResult(rows=rows, categories=categories, x_values=x_values)


# ── Private helpers ──────────────────────────────────────────────

def _is_series_list(value: Any) -> bool:
    """True for a non-empty list-like series; a lone mapping does not count."""
    return (
        isinstance(value, Sequence)
        and not isinstance(value, (str, bytes))
        and len(value) > 0
    )


def _index_first_match(
    dataset: Sequence[Mapping[str, Scalar]],
    config: SeriesConfig,
) -> Dict[Tuple[Scalar, Scalar], Scalar]:
    """(x, category) → y of the first record carrying that pair."""
    index: Dict[Tuple[Scalar, Scalar], Scalar] = {}
    for record in dataset:
        key = (record.get(config.x), record.get(config.category))
        if key not in index:
            index[key] = record.get(config.y)
    return index


def _wide_record(
    x_field: str,
    x_value: Scalar,
    cells: List[Tuple[Scalar, Scalar]],
) -> Record:
    """Build one wide row: the x field first, then one field per category."""
    row: Record = {x_field: x_value}
    for category, value in cells:
        row[category] = value
    return row
