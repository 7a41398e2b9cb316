"""Data models for repositories and blog posts, and blog post storage."""

from __future__ import annotations

import logging
import os
import sqlite3
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

DATABASE_URL_ENV = "DATABASE_URL"

_BLOG_POSTS_SCHEMA = """
CREATE TABLE IF NOT EXISTS blog_posts (
    id INTEGER PRIMARY KEY,
    title TEXT NOT NULL,
    content TEXT NOT NULL
)
"""


class ServerFnError(Exception):
    """Raised when a server-side operation fails."""


@dataclass(frozen=True)
class Repository:
    """A source repository as listed by the hosting service's API."""

    name: str
    description: str | None
    pushed_at: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Repository:
        """Build a repository from a decoded JSON object; extra keys are ignored."""
        if not isinstance(data, Mapping):
            raise ValueError(f"expected an object, got {type(data).__name__}")
        try:
            name = data["name"]
            pushed_at = data["pushed_at"]
        except KeyError as exc:
            raise ValueError(f"missing field {exc.args[0]!r}") from None
        description = data.get("description")
        if not isinstance(name, str):
            raise ValueError("field 'name' must be a string")
        if not isinstance(pushed_at, str):
            raise ValueError("field 'pushed_at' must be a string")
        if description is not None and not isinstance(description, str):
            raise ValueError("field 'description' must be a string or null")
        return cls(name=name, description=description, pushed_at=pushed_at)


@dataclass(frozen=True)
class BlogPostModel:
    """A blog post as presented to the front end; always has an id."""

    id: int
    title: str
    content: str


@dataclass(frozen=True)
class BlogPost:
    """A blog post as stored in the database; the id may be unset."""

    id: int | None
    title: str
    content: str

    def to_model(self) -> BlogPostModel:
        """Return the presentation model, using 0 for a missing id."""
        return BlogPostModel(
            id=self.id if self.id is not None else 0,
            title=self.title,
            content=self.content,
        )


def init_schema(connection: sqlite3.Connection) -> None:
    """Create the blog_posts table if it does not exist yet."""
    with connection:
        connection.execute(_BLOG_POSTS_SCHEMA)


def _connect(database_url: str) -> sqlite3.Connection:
    if database_url.startswith("file:"):
        return sqlite3.connect(database_url, uri=True)
    return sqlite3.connect(database_url)


def get_post_by_id(post_id: int, database_url: str | None = None) -> BlogPost | None:
    """Load the blog post with the given id, or None if there is none.

    The database location defaults to the DATABASE_URL environment variable.
    """
    if database_url is None:
        database_url = os.environ.get(DATABASE_URL_ENV)
        if database_url is None:
            raise ServerFnError(f"{DATABASE_URL_ENV} must be set")

    try:
        connection = _connect(database_url)
    except sqlite3.Error:
        raise ServerFnError(
            "Database connection error: Failed to connect to the database"
        ) from None

    try:
        logger.info("Successfully connected to the database")
        try:
            row = connection.execute(
                "SELECT id, title, content FROM blog_posts WHERE id = ? LIMIT 1",
                (post_id,),
            ).fetchone()
        except sqlite3.Error as exc:
            raise ServerFnError(f"Error loading blog post: {exc}") from exc
    finally:
        connection.close()

    if row is None:
        logger.info("No post found with id: %s", post_id)
        return None

    logger.info("Post found with id: %s", post_id)
    post_id_value, title, content = row
    return BlogPost(id=post_id_value, title=title, content=content)