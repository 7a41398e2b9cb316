import dataclasses
import sqlite3

import pytest

from folio_site.models import (
    BlogPost,
    BlogPostModel,
    Repository,
    ServerFnError,
    get_post_by_id,
    init_schema,
)


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "blog.db"
    connection = sqlite3.connect(path)
    init_schema(connection)
    with connection:
        connection.executemany(
            "INSERT INTO blog_posts (id, title, content) VALUES (?, ?, ?)",
            [
                (1, "First", "<b>hello</b>"),
                (2, "Second", "more text"),
            ],
        )
    connection.close()
    return str(path)


def test_repository_from_dict_full():
    repo = Repository.from_dict(
        {"name": "site", "description": "a web site", "pushed_at": "2024-01-01T00:00:00Z", "extra": 1}
    )
    assert repo == Repository("site", "a web site", "2024-01-01T00:00:00Z")


def test_repository_from_dict_null_description():
    repo = Repository.from_dict({"name": "tool", "description": None, "pushed_at": "x"})
    assert repo.description is None
    assert repo.name == "tool"


def test_repository_from_dict_absent_description():
    repo = Repository.from_dict({"name": "tool", "pushed_at": "x"})
    assert repo.description is None


def test_repository_round_trip_through_dict():
    repo = Repository("lib", "desc", "2023-05-05")
    assert Repository.from_dict(dataclasses.asdict(repo)) == repo


@pytest.mark.parametrize(
    "data",
    [
        {"description": "d", "pushed_at": "x"},
        {"name": "n", "description": "d"},
        {"name": 5, "pushed_at": "x"},
        {"name": "n", "pushed_at": "x", "description": 3},
        ["not", "a", "dict"],
    ],
)
def test_repository_from_dict_rejects_bad_data(data):
    with pytest.raises(ValueError):
        Repository.from_dict(data)


def test_blog_post_to_model_keeps_id():
    post = BlogPost(id=7, title="T", content="C")
    assert post.to_model() == BlogPostModel(id=7, title="T", content="C")


def test_blog_post_to_model_missing_id_becomes_zero():
    post = BlogPost(id=None, title="T", content="C")
    assert post.to_model().id == 0


def test_init_schema_is_idempotent(tmp_path):
    connection = sqlite3.connect(tmp_path / "x.db")
    init_schema(connection)
    init_schema(connection)
    columns = [row[1] for row in connection.execute("PRAGMA table_info(blog_posts)")]
    connection.close()
    assert columns == ["id", "title", "content"]


def test_get_post_by_id_found(db_path):
    post = get_post_by_id(1, db_path)
    assert post == BlogPost(id=1, title="First", content="<b>hello</b>")


def test_get_post_by_id_other_post(db_path):
    post = get_post_by_id(2, db_path)
    assert post is not None
    assert post.title == "Second"
    assert post.to_model().id == 2


def test_get_post_by_id_missing_returns_none(db_path):
    assert get_post_by_id(99, db_path) is None


def test_get_post_by_id_uses_environment(db_path, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", db_path)
    assert get_post_by_id(1).title == "First"


def test_get_post_by_id_requires_database_url(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(ServerFnError, match="DATABASE_URL must be set"):
        get_post_by_id(1)


def test_get_post_by_id_without_table(tmp_path):
    empty = str(tmp_path / "empty.db")
    with pytest.raises(ServerFnError, match="^Error loading blog post: "):
        get_post_by_id(1, empty)


def test_get_post_by_id_unreachable_database(tmp_path):
    missing = str(tmp_path / "no" / "such" / "dir" / "blog.db")
    with pytest.raises(ServerFnError, match="Database connection error"):
        get_post_by_id(1, missing)


def test_get_post_by_id_accepts_file_uri(db_path):
    post = get_post_by_id(1, f"file:{db_path}")
    assert post.content == "<b>hello</b>"