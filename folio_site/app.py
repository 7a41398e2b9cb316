"""The web application: the page shell, request routing and the command entry point."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from flask import Flask, jsonify, request

from folio_site.components import (
    _el,
    echo_server,
    fetch_github_repos,
    maintenance_banner,
    resource_not_found,
)
from folio_site.models import ServerFnError
from folio_site.routes import Route, RouteKind
from folio_site.views import (
    admin,
    blog,
    get_blog_model,
    home,
    navbar,
    projects,
    validate_login,
)

logger = logging.getLogger(__name__)

FAVICON = "/assets/favicon.ico"
MAIN_CSS = "/assets/styling/main.css"
TAILWIND_CSS = "/assets/tailwind.css"
ROOT_ID = "app"
MAINTENANCE_MODE = False

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080


def render_app(content: str = "", maintenance_mode: bool = MAINTENANCE_MODE) -> str:
    """Wrap routed page content with the site's stylesheets and icon.

    In maintenance mode the content is replaced by the maintenance banner.
    """
    if maintenance_mode:
        logger.error("Maintenance mode is enabled. The site will not be accessible.")
        return maintenance_banner()
    return _el(
        "div",
        _el("link", rel="icon", href=FAVICON),
        _el("link", rel="stylesheet", href=MAIN_CSS),
        _el("link", rel="stylesheet", href=TAILWIND_CSS),
        content,
    )


def _document(body: str) -> str:
    return (
        "<!DOCTYPE html>"
        '<html><head><meta charset="utf-8"></head>'
        f'<body><div id="{ROOT_ID}">{body}</div></body></html>'
    )


def _render_route(route: Route, database_url: str | None) -> str:
    if route.kind is RouteKind.HOME:
        return home()
    if route.kind is RouteKind.BLOG:
        assert route.id is not None
        return blog(route.id, get_blog_model(route.id, database_url))
    if route.kind is RouteKind.PROJECTS:
        try:
            repos = fetch_github_repos()
        except ServerFnError as exc:
            return projects(exc)
        return projects(repos)
    return admin(False)


def create_app(
    maintenance_mode: bool = MAINTENANCE_MODE,
    database_url: str | None = None,
) -> Flask:
    """Build the Flask application serving every route of the site.

    The database location defaults to the DATABASE_URL environment variable.
    """
    app = Flask(__name__)

    def page(path: str):
        if maintenance_mode:
            return _document(render_app("", maintenance_mode=True))
        try:
            route = Route.parse(path)
        except ValueError:
            return _document(render_app(navbar(resource_not_found()))), 404
        content = _render_route(route, database_url)
        return _document(render_app(navbar(content)))

    @app.get("/")
    def index():
        return page("/")

    @app.get("/<path:subpath>")
    def any_page(subpath: str):
        return page("/" + subpath)

    @app.post("/api/echo")
    def echo_endpoint():
        payload = request.get_json(silent=True) or {}
        text = payload.get("input", "")
        if not isinstance(text, str):
            return jsonify(error="field 'input' must be a string"), 400
        return jsonify(result=echo_server(text))

    @app.post("/api/login")
    def login_endpoint():
        payload = request.get_json(silent=True) or {}
        username = payload.get("username", "")
        secret_value = payload.get("password", "")
        if not isinstance(username, str) or not isinstance(secret_value, str):
            return jsonify(error="username and password must be strings"), 400
        return jsonify(result=validate_login(username, secret_value))

    return app


def main(argv: Sequence[str] | None = None) -> int:
    """Start the web server."""
    parser = argparse.ArgumentParser(description="Serve the personal website.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument(
        "--maintenance",
        action="store_true",
        help="show the maintenance banner instead of the site",
    )
    parser.add_argument(
        "--database-url",
        default=None,
        help="SQLite database location (defaults to $DATABASE_URL)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG)
    logger.debug("Logger initialized successfully")

    app = create_app(
        maintenance_mode=args.maintenance, database_url=args.database_url
    )
    app.run(host=args.host, port=args.port)
    return 0