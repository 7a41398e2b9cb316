"""The site's routes and their URL patterns."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


class RouteKind(Enum):
    """The pages the site can show."""

    HOME = "home"
    BLOG = "blog"
    PROJECTS = "projects"
    ADMIN = "admin"


_STATIC_PATHS = {
    RouteKind.HOME: "/",
    RouteKind.PROJECTS: "/projects",
    RouteKind.ADMIN: "/admin",
}
_PATH_TO_KIND = {path: kind for kind, path in _STATIC_PATHS.items()}


@dataclass(frozen=True)
class Route:
    """A resolved route; blog routes carry the id of the post."""

    kind: RouteKind
    id: int | None = None

    def __post_init__(self) -> None:
        if self.kind is RouteKind.BLOG:
            if not isinstance(self.id, int) or isinstance(self.id, bool):
                raise ValueError("a blog route needs an integer id")
            if not _I32_MIN <= self.id <= _I32_MAX:
                raise ValueError(f"blog id {self.id} is out of range")
        elif self.id is not None:
            raise ValueError(f"the {self.kind.value} route takes no id")

    def path(self) -> str:
        """Return the URL path for this route."""
        if self.kind is RouteKind.BLOG:
            return f"/blog/{self.id}"
        return _STATIC_PATHS[self.kind]

    @classmethod
    def parse(cls, path: str) -> Route:
        """Match a URL path against the site's routes.

        Query strings and fragments are ignored. Raises ValueError when no
        route matches.
        """
        bare = path.split("#", 1)[0].split("?", 1)[0]
        if not bare.startswith("/"):
            raise ValueError(f"not an absolute path: {path!r}")
        if len(bare) > 1:
            bare = bare.rstrip("/") or "/"

        kind = _PATH_TO_KIND.get(bare)
        if kind is not None:
            return cls(kind)

        segments = bare[1:].split("/")
        if len(segments) == 2 and segments[0] == "blog":
            raw_id = segments[1]
            if not _ID_PATTERN.fullmatch(raw_id):
                raise ValueError(f"invalid blog id: {raw_id!r}")
            post_id = int(raw_id)
            if not _I32_MIN <= post_id <= _I32_MAX:
                raise ValueError(f"blog id {raw_id} is out of range")
            return cls(RouteKind.BLOG, post_id)

        raise ValueError(f"no route matches {path!r}")