"""Page views for each route, the navbar layout and admin server functions."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum

from folio_site.components import (
    _el,
    _text,
    admin_login,
    admin_view,
    bio,
    project_table,
    resource_not_found,
)
from folio_site.models import BlogPostModel, Repository, ServerFnError, get_post_by_id
from folio_site.routes import Route, RouteKind

logger = logging.getLogger(__name__)

NAVBAR_CSS = "/assets/styling/navbar.css"

_ADMIN_USERNAME = "admin"
_ADMIN_PASSWORD = "password"


class _Pending(Enum):
    PENDING = "pending"


PENDING = _Pending.PENDING
"""Marks a blog post that has not finished loading."""


def validate_login(username: str, password: str) -> bool:
    """Check the admin credentials."""
    if username == _ADMIN_USERNAME and password == _ADMIN_PASSWORD:
        logger.info("Admin login successful")
        return True
    logger.warning("Admin login failed for user: %s", username)
    return False


def validate_session() -> bool:
    """Report whether the admin session is valid; always true for now."""
    return True


def not_working_notice() -> str:
    """A notice that the admin page has no working logic yet."""
    return _el(
        "p",
        _text(
            "This page does not yet have working logic and the button does "
            "nothing. More features will be implemented as time goes forth"
        ),
    )


def admin(session_valid: bool | None = False) -> str:
    """The admin page: the login form, the admin view, or a validating notice."""
    if session_valid is None:
        return _el("p", _text("Validating admin session . . ."))
    if not session_valid:
        logger.warning("Admin session is not valid, redirecting to login page")
        return not_working_notice() + admin_login()
    logger.info("Admin session is valid, rendering admin view")
    return not_working_notice() + admin_view()


def get_blog_model(
    post_id: int, database_url: str | None = None
) -> BlogPostModel | None:
    """Load a blog post for display; failures are logged and give None."""
    try:
        post = get_post_by_id(post_id, database_url)
    except ServerFnError as exc:
        logger.error("Error fetching blog post with id %s: %s", post_id, exc)
        return None
    if post is None:
        logger.warning("Blog post with id %s not found", post_id)
        return None
    logger.debug("Blog post with id %s found: %r", post_id, post)
    return post.to_model()


def blog(id: int, post: BlogPostModel | None | _Pending = PENDING) -> str:
    """The blog page for a post.

    ``PENDING`` shows a loading notice and ``None`` the not-found page. The
    post content is inserted as HTML.
    """
    logger.debug("Rendering blog post with id: %s", id)
    if post is PENDING:
        logger.debug("Loading blog post with id %s", id)
        return _el("div", _el("p", _text("Loading blog post...")), class_="loading")
    if post is None:
        logger.warning("Blog post with id %s not found", id)
        return resource_not_found()
    return _el(
        "div",
        _el(
            "h1",
            _text(post.title),
            class_="blog-post-title",
            id=f"blog-post-title-{id}",
        ),
        _el("p", post.content, class_="blog-post-content"),
        class_="blog-post",
        id=f"blog-post-{id}",
    )


def home() -> str:
    """The home page."""
    return bio()


def _nav_link(route: Route, label: str) -> str:
    return _el("a", _text(label), href=route.path())


def navbar(content: str = "") -> str:
    """The layout shared by every page: the navbar followed by the page content."""
    left = _el(
        "div",
        _nav_link(Route(RouteKind.HOME), "Home"),
        _nav_link(Route(RouteKind.BLOG, 1), "Blog"),
        _nav_link(Route(RouteKind.PROJECTS), "Projects List"),
        id="left-nav",
        class_="left-nav",
    )
    right = _el(
        "div",
        _nav_link(Route(RouteKind.ADMIN), "Admin"),
        id="right-nav",
        class_="right-nav",
    )
    return (
        _el("link", rel="stylesheet", href=NAVBAR_CSS)
        + _el("div", left, right, id="navbar")
        + content
    )


def projects(repos: Iterable[Repository] | Exception | None = None) -> str:
    """The projects page."""
    return project_table(repos)