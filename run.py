"""
Chart App — serve the JSON API or the chart pages.

Usage:
    python run.py api [--port N]   → FastAPI via uvicorn (default API_PORT)
    python run.py web [--port N]   → Flask chart pages (default FLASK_PORT)

The two targets are independent: the Flask page runs the chart
pipeline in-process and does not call the API.
"""

import argparse

from chart_app.core.config import settings


def serve_api(host: str, port: int) -> None:
    import uvicorn

    uvicorn.run("chart_app.main:app", host=host, port=port, reload=settings.DEBUG)


def serve_web(host: str, port: int) -> None:
    from chart_app.flask_app import create_flask_app

    create_flask_app().run(host=host, port=port, debug=settings.DEBUG)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description=f"{settings.APP_NAME} runner")
    parser.add_argument("target", choices=("api", "web"))
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=None)
    args = parser.parse_args(argv)

    if args.target == "api":
        serve_api(args.host, args.port or settings.API_PORT)
    else:
        serve_web(args.host, args.port or settings.FLASK_PORT)


if __name__ == "__main__":
    main()
