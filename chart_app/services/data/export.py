"""
Export — dataset serialization to CSV.

Single Responsibility: convert record lists to downloadable text.
No business logic, no HTTP.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

import pandas as pd


def records_to_frame(records: Sequence[Mapping[str, Any]]) -> pd.DataFrame:
    """Build a DataFrame keeping the column order of the first records."""
    return pd.DataFrame.from_records(list(records))


def to_csv(records: Sequence[Mapping[str, Any]]) -> str:
    """Export records to a CSV string (empty string when there are none)."""
    if not records:
        return ""
    return records_to_frame(records).to_csv(index=False)
