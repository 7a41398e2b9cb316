"""Shared page components rendered as HTML fragments, and their server functions."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Sequence
from html import escape

import requests

from folio_site.models import Repository, ServerFnError

logger = logging.getLogger(__name__)

ECHO_CSS = "/assets/styling/echo.css"
GITHUB_TOKEN_ENV = "GITHUB_TOKEN"
GITHUB_REPOS_URL = "https://api.github.com/user/repos?sort=pushed&direction=desc"
USER_AGENT = "folio-site"

_VOID_ELEMENTS = frozenset({"br", "input", "link", "meta", "img", "hr"})

_BIO_TEXT = " ".join(
    """
    Hello! I'm a fullstack software engineer with nearly a decade in
    building high performant web applications, services, and tooling for
    nearly a decade. The page you're viewing right now is built from
    the ground up with Rust and Dioxus, a modern web framework that
    allows for building fast and efficient web applications with
    the power of WASM
    """.split()
)

_MAINTENANCE_NOTICE = (
    "The site is currently undergoing maintenance. Please check back later."
)


def _attributes(attrs: dict[str, object]) -> str:
    parts = []
    for key, value in attrs.items():
        name = key.rstrip("_").replace("_", "-")
        if value is True:
            parts.append(f" {name}")
        elif value is None or value is False:
            continue
        else:
            parts.append(f' {name}="{escape(str(value), quote=True)}"')
    return "".join(parts)


def _el(tag: str, *children: str, **attrs: object) -> str:
    """Render an element; children must already be HTML."""
    opening = f"<{tag}{_attributes(attrs)}>"
    if tag in _VOID_ELEMENTS:
        return opening
    return f"{opening}{''.join(children)}</{tag}>"


def _text(value: str) -> str:
    return escape(value, quote=False)


def bio() -> str:
    """The short introduction shown on the home page."""
    return _el(
        "div",
        _el("h2", _text("About Me")),
        _el("p", _text(_BIO_TEXT)),
        class_="bio",
    )


def maintenance_banner() -> str:
    """The banner shown in place of the site while it is under maintenance."""
    return _el(
        "div",
        _el("h2", _text("Maintenance Mode")),
        _el("p", _text(_MAINTENANCE_NOTICE)),
        _el("p", _text("Thank you for your patience!")),
        class_="maintenance-banner",
    )


def maintenance_settings() -> str:
    """The admin form for switching maintenance mode."""
    form = _el(
        "form",
        _el(
            "input",
            type_="checkbox",
            name="maintenance_mode",
            id="maintenance_mode",
        ),
        _el("button", _text("Return to Home"), type_="submit"),
    )
    return _el(
        "div",
        _el("h1", _text("Maintenance Mode")),
        _el("p", _text(_MAINTENANCE_NOTICE)),
        form,
        class_="maintenance-mode",
    )


def unexpected_error() -> str:
    """A generic error page."""
    return _el(
        "div",
        _el("h1", _text("Error")),
        _el("p", _text("An unexpected error has occurred.")),
        _el(
            "p",
            _text("Please try again later or contact support if the issue persists."),
        ),
        class_="error-page",
    )


def resource_not_found() -> str:
    """The page shown when a requested resource does not exist."""
    return _el(
        "div",
        _el("h1", _text("Error")),
        _el("p", _text("the resource you're looking for could not be found")),
        class_="resouce-not-found",
    )


def new_edit_blog() -> str:
    """The form for writing or editing a blog post."""
    form = _el(
        "form",
        _el("label", _text("Post Title:")),
        _el("br"),
        _el("input", type_="text", placeholder="Title", name="title", required=True),
        _el("br"),
        _el("label", _text("Post Content:")),
        _el("br"),
        _el("textarea", placeholder="Content", name="content", required=True),
        _el("br"),
        _el("button", _text("Save"), type_="submit"),
    )
    return _el(
        "div",
        _el("h1", _text("New/Edit Blog Post")),
        form,
        class_="new-edit-blog",
    )


def admin_view() -> str:
    """The admin page body: maintenance settings and the blog editor."""
    return _el(
        "div",
        _el("h1", _text("Admin Page")),
        _el("p", _text("This is the admin page for managing the application.")),
        maintenance_settings(),
        new_edit_blog(),
        class_="admin-page",
    )


def admin_login() -> str:
    """The admin login form."""
    form = _el(
        "form",
        _el("label", _text("Username:")),
        _el("br"),
        _el(
            "input",
            type_="text",
            placeholder="Username",
            name="username",
            required=True,
        ),
        _el("br"),
        _el("br"),
        _el("label", _text("Password:")),
        _el("br"),
        _el(
            "input",
            type_="password",
            placeholder="Password",
            name="password",
            required=True,
        ),
        _el("br"),
        _el("button", _text("Login"), type_="submit"),
    )
    return _el(
        "div",
        _el("h1", _text("Admin Login")),
        form,
        class_="admin-login",
    )


def echo(response: str = "") -> str:
    """The echo widget; shows the last server response when there is one."""
    children = [
        _el("h4", _text("ServerFn Echo")),
        _el("input", placeholder="Type here to echo..."),
    ]
    if response:
        children.append(
            _el("p", _text("Server echoed: "), _el("i", _text(response)))
        )
    return _el("link", rel="stylesheet", href=ECHO_CSS) + _el(
        "div", *children, id="echo"
    )


def echo_server(text: str) -> str:
    """Return the input unchanged."""
    return text


def _repository_row(repo: Repository) -> str:
    description = (
        repo.description
        if repo.description is not None
        else "No description available"
    )
    return _el(
        "tr",
        _el("td", _text(repo.name)),
        _el("td", _text(description)),
        _el("td", _text(repo.pushed_at)),
        class_="repo-row",
    )


def projects_table_body(
    repos: Iterable[Repository] | Exception | None = None,
) -> str:
    """Render the repository rows, an error message, or a loading notice.

    ``None`` means the repositories are still loading; an exception means
    fetching them failed.
    """
    if repos is None:
        return _el("p", _text("Loading . . ."))
    if isinstance(repos, Exception):
        return _el("p", _text(f"Error: {repos}"))
    return _el("tbody", *(_repository_row(repo) for repo in repos))


def project_table(
    repos: Iterable[Repository] | Exception | None = None,
) -> str:
    """The projects table with its header and body."""
    head = _el(
        "thead",
        _el(
            "tr",
            _el("th", _text("Name")),
            _el("th", _text("Description")),
            _el("th", _text("Last Updated")),
        ),
    )
    return _el(
        "div",
        _el("h2", _text("Projects")),
        _el("table", head, projects_table_body(repos)),
        class_="projects-table",
    )


def fetch_github_repos(
    token: str | None = None,
    session: requests.Session | None = None,
) -> list[Repository]:
    """Fetch the authenticated user's repositories, most recently pushed first.

    The token defaults to the GITHUB_TOKEN environment variable.
    """
    if token is None:
        token = os.environ.get(GITHUB_TOKEN_ENV)
        if token is None:
            raise ServerFnError("environment variable not found")

    headers = {
        "User-Agent": USER_AGENT,
        "Authorization": f"Bearer {token}",
    }
    http = session if session is not None else requests.Session()
    try:
        response = http.get(GITHUB_REPOS_URL, headers=headers)
    except requests.RequestException as exc:
        raise ServerFnError(str(exc)) from exc
    finally:
        if session is None:
            http.close()

    if not response.ok:
        status = f"{response.status_code} {response.reason or ''}".rstrip()
        logger.error("Failed to fetch repositories: %s", status)
        raise ServerFnError(f"Failed to fetch repositories: {status}")

    try:
        payload = response.json()
    except ValueError as exc:
        raise ServerFnError(str(exc)) from exc
    if not isinstance(payload, Sequence) or isinstance(payload, (str, bytes)):
        raise ServerFnError("expected a list of repositories")
    try:
        return [Repository.from_dict(item) for item in payload]
    except ValueError as exc:
        raise ServerFnError(str(exc)) from exc