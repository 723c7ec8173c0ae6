"""Scene bookmarks kept in memory and mirrored to the database."""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass, field
from typing import Iterable

from surkl import stmt
from surkl.db import table_exists

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SceneBookmarkData:
    """A named position in the scene; two bookmarks are equal when their positions are."""

    pos: tuple[int, int]
    name: str = field(default="", compare=False)


class BookmarkManager:
    """Holds the scene bookmarks and keeps the bookmarks table in step with them."""

    def __init__(self, conn: sqlite3.Connection | None = None) -> None:
        self._conn = conn
        self._scene_bms: dict[tuple[int, int], SceneBookmarkData] = {}

    def configure(self) -> None:
        """Load bookmarks from the database, or create the table and store the current ones."""
        conn = self._conn
        if conn is None:
            return

        if table_exists(conn, stmt.BM_TABLE_NAME):
            try:
                cursor = conn.execute(stmt.BM_SELECT_ALL)
            except sqlite3.Error as exc:
                log.warning("%s", exc)
                return
            columns = [description[0] for description in cursor.description]
            x_idx = columns.index(stmt.BM_POSITION_X_COL)
            y_idx = columns.index(stmt.BM_POSITION_Y_COL)
            name_idx = columns.index(stmt.BM_NAME_COL)
            for row in cursor:
                bm = SceneBookmarkData((int(row[x_idx]), int(row[y_idx])), str(row[name_idx]))
                self._scene_bms.setdefault(bm.pos, bm)
        else:
            try:
                with conn:
                    conn.execute(stmt.BM_CREATE_TABLE)
                    self._insert_rows(self.scene_bookmarks_as_list())
            except sqlite3.Error as exc:
                log.warning("BookmarkManager.configure: failed to commit changes (%s)", exc)

    def save_to_database(self) -> None:
        """Write every bookmark to the database in one transaction."""
        conn = self._conn
        if conn is None:
            return
        try:
            with conn:
                self._insert_rows(self.scene_bookmarks_as_list())
        except sqlite3.Error as exc:
            log.warning("BookmarkManager.save_to_database: failed to commit changes (%s)", exc)

    def insert_bookmark(self, bm: SceneBookmarkData) -> None:
        """Add a new bookmark; its position must not be bookmarked yet."""
        if bm.pos in self._scene_bms:
            raise ValueError(f"a bookmark already exists at {bm.pos}")
        self._add_to_database(bm)
        self._scene_bms[bm.pos] = bm

    def update_bookmark(self, bm: SceneBookmarkData) -> None:
        """Replace the bookmark at the same position."""
        if bm.pos not in self._scene_bms:
            raise KeyError(bm.pos)
        self._add_to_database(bm)
        self._scene_bms[bm.pos] = bm

    def remove_bookmarks(self, bookmarks: Iterable[SceneBookmarkData]) -> None:
        """Remove the given bookmarks; every one of them must exist."""
        bookmarks = list(bookmarks)
        missing = [bm.pos for bm in bookmarks if bm.pos not in self._scene_bms]
        if missing:
            raise KeyError(missing[0])

        removed = [self._scene_bms.pop(bm.pos) for bm in bookmarks if bm.pos in self._scene_bms]
        self._remove_from_database(removed)

    def scene_bookmarks_as_list(self) -> list[SceneBookmarkData]:
        """The bookmarks in the order they were added."""
        return list(self._scene_bms.values())

    def scene_bookmarks(self) -> set[SceneBookmarkData]:
        """The bookmarks as a set."""
        return set(self._scene_bms.values())

    def _insert_rows(self, bookmarks: Iterable[SceneBookmarkData]) -> None:
        for bm in bookmarks:
            try:
                self._conn.execute(stmt.BM_INSERT, (bm.pos[0], bm.pos[1], bm.name))
            except sqlite3.Error as exc:
                log.warning("%s", exc)

    def _add_to_database(self, bm: SceneBookmarkData) -> None:
        if self._conn is None:
            return
        try:
            with self._conn:
                self._conn.execute(stmt.BM_INSERT, (bm.pos[0], bm.pos[1], bm.name))
        except sqlite3.Error as exc:
            log.warning("%s", exc)

    def _remove_from_database(self, bookmarks: list[SceneBookmarkData]) -> None:
        conn = self._conn
        if conn is None:
            return
        try:
            with conn:
                for bm in bookmarks:
                    try:
                        conn.execute(stmt.BM_DELETE, (bm.pos[0], bm.pos[1]))
                    except sqlite3.Error as exc:
                        log.warning("%s", exc)
        except sqlite3.Error as exc:
            log.warning("BookmarkManager.remove_bookmarks: failed to commit changes (%s)", exc)