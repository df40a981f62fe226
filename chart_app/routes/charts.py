"""
Chart routes — Renders one chart page.

The route runs the chart pipeline server-side, projects the finished
lifecycle with ``render()`` and turns the resulting ``ChartView`` into
HTML: a centered message for loading / error / empty states, or an
ECharts container plus the ``setOption`` call for a ready chart.
"""

import asyncio
import json
import logging
from html import escape

from flask import Blueprint, abort

from chart_app.services.broker.chart_config import chart_config_loader
from chart_app.services.orchestrator.lifecycle import ChartStatus, ChartView, render
from chart_app.services.orchestrator.pipeline import chart_pipeline

logger = logging.getLogger(__name__)

charts_bp = Blueprint("charts", __name__, url_prefix="/charts")

ECHARTS_CDN = "https://cdn.jsdelivr.net/npm/echarts@5/dist/echarts.min.js"


@charts_bp.route("/<chart_id>")
def show(chart_id: str):
    """Load the chart and render its page."""
    definition = chart_config_loader.get(chart_id)
    if definition is None:
        abort(404)

    lifecycle = asyncio.run(chart_pipeline.run(definition))
    view = render(lifecycle)
    status = 502 if view.status == ChartStatus.FAILED.value else 200
    return _page(definition.title, view_html(view)), status


def view_html(view: ChartView) -> str:
    """HTML fragment for a ``ChartView``."""
    if not view.has_chart:
        css = "text-red-500" if view.status == ChartStatus.FAILED.value else ""
        return (
            f'<div class="w-full h-64 flex items-center justify-center {css}">'
            f"{escape(view.message or '')}</div>"
        )

    opts = view.render_opts
    init_opts = json.dumps({"renderer": opts.get("renderer", "canvas")})
    set_opts = json.dumps({
        "notMerge": opts.get("notMerge", True),
        "lazyUpdate": opts.get("lazyUpdate", True),
    })
    options = json.dumps(view.options, default=str).replace("</", "<\\/")

    return f"""<div class="w-full h-full">
  <div id="chart" style="height: {opts.get('height', '400px')}; width: {opts.get('width', '100%')};"></div>
</div>
<script>
  const chart = echarts.init(document.getElementById("chart"), null, {init_opts});
  chart.setOption({options}, {set_opts});
  window.addEventListener("resize", () => chart.resize());
</script>"""


def _page(title: str, body: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width,initial-scale=1">
  <title>{escape(title)}</title>
  <script src="https://cdn.tailwindcss.com"></script>
  <script src="{ECHARTS_CDN}"></script>
</head>
<body class="p-6">
{body}
</body>
</html>"""
