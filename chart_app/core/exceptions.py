"""
Error kinds raised by the chart pipeline.

The core never catches these; ``ChartPipeline.run`` is the only place
where they are turned into a failed lifecycle state.
"""

from __future__ import annotations

from typing import Optional


class ChartAppError(Exception):
    """Base class for all chart_app errors."""


class FetchError(ChartAppError):
    """The dataset API call did not succeed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ConfigurationError(ChartAppError):
    """A pivot chart type has no usable series configuration."""
