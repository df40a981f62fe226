"""
Flask application factory.

Responsibilities:
- Server-side rendering of chart pages.
- Loading / error / empty / chart states come from ``render()``;
  the browser paints the options with ECharts.
"""

from flask import Flask, redirect, url_for

from chart_app.core.config import settings
from chart_app.core.logging import configure_logging
from chart_app.services.broker.chart_config import DEFAULT_CHART_ID


def create_flask_app() -> Flask:
    """Application factory for Flask."""
    configure_logging(settings)

    app = Flask(__name__)

    app.config["SECRET_KEY"] = settings.FLASK_SECRET_KEY
    app.config["DEBUG"] = settings.DEBUG

    # ── Blueprints ───────────────────────────────────────────
    from chart_app.routes.charts import charts_bp

    app.register_blueprint(charts_bp)

    # ── Root redirect ────────────────────────────────────────
    @app.route("/")
    def index():
        return redirect(url_for("charts.show", chart_id=DEFAULT_CHART_ID))

    # ── Error handlers ───────────────────────────────────────
    @app.errorhandler(404)
    def not_found(e):
        return _render_error(404, "Page not found"), 404

    @app.errorhandler(500)
    def server_error(e):
        return _render_error(500, "Internal server error"), 500

    return app


def _render_error(code: int, message: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width,initial-scale=1">
  <title>Error {code}</title>
  <script src="https://cdn.tailwindcss.com"></script>
</head>
<body class="bg-gray-900 min-h-screen flex items-center justify-center">
  <div class="text-center">
    <h1 class="text-6xl font-bold text-white">{code}</h1>
    <p class="mt-4 text-xl text-gray-400">{message}</p>
  </div>
</body>
</html>"""
