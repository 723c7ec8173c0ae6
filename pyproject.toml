[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "surkl"
version = "0.3.0"
description = "Toolkit-independent core of a circular file-system browser: n-gon layout geometry, scene bookmarks, splitter trees and SQLite-backed layout state"
requires-python = ">=3.10"
dependencies = []
keywords = ["file manager", "layout", "splitter", "bookmarks", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: File Managers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["surkl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
