"""Toolkit-independent core of a circular file-system browser: layout geometry, bookmarks, splitter trees and SQLite-backed layout state."""

__version__ = "0.3.0"