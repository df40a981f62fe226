"""
Data Broker — chart definitions and dataset fetching.

Modules:
  chart_config   : YAML/JSON loader + dataclass for chart definitions.
  dataset_client : Async HTTP client for the dataset API.

Public API::

    from chart_app.services.broker import chart_config_loader, dataset_client
"""

from chart_app.services.broker.chart_config import (
    ChartDefinition,
    chart_config_loader,
)
from chart_app.services.broker.dataset_client import DatasetClient, dataset_client

__all__ = ["ChartDefinition", "DatasetClient", "chart_config_loader", "dataset_client"]
