[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "folio-site"
version = "0.1.0"
description = "A small personal portfolio web site: a home page, blog posts read from SQLite, a project list and an admin area."
requires-python = ">=3.10"
keywords = ["portfolio", "blog", "flask", "website", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]
dependencies = [
    "flask",
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
folio-site = "folio_site.app:main"

[tool.hatch.build.targets.wheel]
packages = ["folio_site"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
