"""
Chart core — dataset reshaping and ECharts option assembly.

Modules:
  classifier : ChartTypeClassifier (pivot decision + rendering hints).
  pivot      : PivotTransformer (long → wide records).
  series     : SeriesSynthesizer (one series per category).
  assembler  : OptionsAssembler (final ECharts option dict).
  transform  : ``transform_data`` — classifier-gated pivot + series.
"""

from chart_app.services.charts.assembler import assemble_options
from chart_app.services.charts.classifier import ChartClassification, classify
from chart_app.services.charts.pivot import SeriesConfig, ordered_unique, pivot_records
from chart_app.services.charts.series import SeriesDefinition, synthesize_series
from chart_app.services.charts.transform import TransformResult, transform_data

__all__ = [
    "ChartClassification",
    "SeriesConfig",
    "SeriesDefinition",
    "TransformResult",
    "assemble_options",
    "classify",
    "ordered_unique",
    "pivot_records",
    "synthesize_series",
    "transform_data",
]
