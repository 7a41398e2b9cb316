# folio-site

A small personal portfolio web site served with Flask. Pages are rendered
as plain HTML strings and wrapped in a minimal document. The site has:

- a home page (`/`) with a short bio,
- blog posts read from an SQLite database (`/blog/<id>`, where the id is a
  32-bit signed integer),
- a projects page (`/projects`) listing repositories fetched from the GitHub
  API, most recently pushed first,
- an admin page (`/admin`) showing a login form,
- a navbar on every page linking to Home, Blog (post 1), Projects List and Admin,
- an optional maintenance mode that replaces every page with a notice.

Any other path gets the "resource not found" page with status 404.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the site

```
folio-site
```

Options:

- `--host` – address to listen on (default `127.0.0.1`),
- `--port` – port to listen on (default `8080`),
- `--maintenance` – show the maintenance banner instead of the site,
- `--database-url` – SQLite database location (defaults to `$DATABASE_URL`).

Logging is set to the DEBUG level when the server starts.

The server reads its settings from the environment:

- `DATABASE_URL` – path of the SQLite database holding the `blog_posts` table
  (columns `id`, `title`, `content`), used when `--database-url` is not given.
  A value beginning with `file:` is opened as an SQLite URI.
- `GITHUB_TOKEN` – token sent as a bearer token when listing repositories for
  the projects page. If it is missing or the request fails, the projects page
  shows the error message in place of the table.

If a blog post cannot be found, or the database cannot be read, the blog page
shows the "resource not found" page. Post content is inserted into the page
as HTML; titles are escaped.

### JSON endpoints

- `POST /api/echo` with `{"input": "..."}` returns `{"result": "..."}` holding
  the same text.
- `POST /api/login` with `{"username": "...", "password": "..."}` returns
  `{"result": true}` or `{"result": false}` after checking them against the
  fixed admin credentials.

Both answer 400 when a field is not a string.

## Using it as a library

```python
from folio_site.app import create_app

app = create_app(maintenance_mode=False, database_url="blog.db")
app.run()
```

Blog posts can be looked up directly:

```python
import sqlite3
from folio_site.models import init_schema, get_post_by_id

with sqlite3.connect("blog.db") as connection:
    init_schema(connection)

post = get_post_by_id(1, "blog.db")   # BlogPost or None
model = post.to_model() if post else None
```

`get_post_by_id` raises `folio_site.models.ServerFnError` when the database
cannot be opened or read, or when no location is given and `DATABASE_URL` is
unset.

Repositories come from `folio_site.components.fetch_github_repos(token=None,
session=None)`, which returns a list of `Repository` objects and raises
`ServerFnError` on failure.

Routes are described by `folio_site.routes.Route`; `Route.parse("/blog/3")`
gives the blog route for post 3 and `route.path()` turns it back into a URL.
`Route.parse` raises `ValueError` for paths that match no route.

Page fragments can be rendered on their own with the functions in
`folio_site.views` (`home`, `blog`, `projects`, `admin`, `navbar`) and
`folio_site.components`, and wrapped with `folio_site.app.render_app`.

## What it does not do

- The forms on the admin area (login, maintenance settings, new/edit blog
  post) are rendered but not wired to anything: submitting them does not log
  in, switch maintenance mode or save a post. The `/admin` page always shows
  the login form, and there are no sessions.
- Nothing writes blog posts; the database must be filled by other means.
- The stylesheets and favicon linked from every page (`/assets/...`) are not
  shipped or served by the package.