import sqlite3
from unittest import mock

import pytest
import responses

from folio_site.app import (
    FAVICON,
    MAIN_CSS,
    TAILWIND_CSS,
    create_app,
    main,
    render_app,
)
from folio_site.components import (
    GITHUB_REPOS_URL,
    bio,
    maintenance_banner,
    resource_not_found,
)
from folio_site.models import init_schema
from folio_site.views import admin


@pytest.fixture
def database(tmp_path):
    path = tmp_path / "blog.db"
    connection = sqlite3.connect(path)
    init_schema(connection)
    with connection:
        connection.execute(
            "INSERT INTO blog_posts (id, title, content) VALUES (?, ?, ?)",
            (1, "First Post", "<b>bold words</b>"),
        )
    connection.close()
    return str(path)


@pytest.fixture
def client(database):
    return create_app(database_url=database).test_client()


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


def test_render_app_maintenance_returns_banner():
    assert render_app("<p>page</p>", maintenance_mode=True) == maintenance_banner()


def test_render_app_includes_assets_and_content():
    html = render_app("<p>page</p>")
    assert "<p>page</p>" in html
    assert f'href="{FAVICON}"' in html
    assert f'href="{MAIN_CSS}"' in html
    assert f'href="{TAILWIND_CSS}"' in html


def test_home_page(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert bio() in resp.get_data(as_text=True)


def test_unknown_path_is_not_found(client):
    resp = client.get("/nowhere/at/all")
    assert resp.status_code == 404
    assert resource_not_found() in resp.get_data(as_text=True)


def test_invalid_blog_id_is_not_found(client):
    resp = client.get("/blog/abc")
    assert resp.status_code == 404


def test_blog_post_rendered(client):
    resp = client.get("/blog/1")
    text = resp.get_data(as_text=True)
    assert resp.status_code == 200
    assert "First Post" in text
    assert "<b>bold words</b>" in text


def test_missing_blog_post(client):
    resp = client.get("/blog/2")
    assert resource_not_found() in resp.get_data(as_text=True)


def test_admin_page_shows_login(client):
    resp = client.get("/admin")
    assert admin(False) in resp.get_data(as_text=True)


def test_maintenance_mode_hides_pages(database):
    app_client = create_app(maintenance_mode=True, database_url=database).test_client()
    text = app_client.get("/").get_data(as_text=True)
    assert maintenance_banner() in text
    assert bio() not in text


def test_projects_page_lists_repositories(client, mocked, monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "token")
    mocked.add(
        responses.GET,
        GITHUB_REPOS_URL,
        json=[{"name": "demo-repo", "description": None, "pushed_at": "2024-01-01"}],
    )
    text = client.get("/projects").get_data(as_text=True)
    assert "demo-repo" in text
    assert "No description available" in text
    assert mocked.calls[0].request.headers["Authorization"] == "Bearer token"


def test_projects_page_shows_error(client, mocked, monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "token")
    mocked.add(responses.GET, GITHUB_REPOS_URL, status=500)
    text = client.get("/projects").get_data(as_text=True)
    assert "Error: Failed to fetch repositories: 500" in text


def test_echo_endpoint_round_trip(client):
    resp = client.post("/api/echo", json={"input": "hello there"})
    assert resp.get_json() == {"result": "hello there"}


def test_login_endpoint(client):
    password = "password"
    good = client.post("/api/login", json={"username": "admin", "password": password})
    bad = client.post("/api/login", json={"username": "guest", "password": password})
    assert good.get_json() == {"result": True}
    assert bad.get_json() == {"result": False}


def test_main_runs_server():
    with mock.patch("flask.Flask.run") as run:
        result = main(["--host", "0.0.0.0", "--port", "9000"])
    assert result == 0
    assert run.call_args.kwargs == {"host": "0.0.0.0", "port": 9000}