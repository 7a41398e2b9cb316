"""Personal portfolio web site served with Flask: a home page, SQLite-backed blog posts, a project list and an admin area."""

__version__ = "0.1.0"