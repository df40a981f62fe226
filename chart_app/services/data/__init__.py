"""
Data helpers — dataset export.

Public API::

    from chart_app.services.data import to_csv
"""

from chart_app.services.data.export import records_to_frame, to_csv

__all__ = ["records_to_frame", "to_csv"]
