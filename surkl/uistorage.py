"""Persistence of the window layout: main windows, splitters, windows and views."""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass, field
from typing import Iterable, Union

from surkl.db import table_exists
from surkl.splitter import Orientation

log = logging.getLogger(__name__)

MAIN_WINDOWS_TABLE = "MainWindows"
MAIN_WINDOW_ID = "mw_id"
MAIN_WINDOW_WIDTH = "mw_w"
MAIN_WINDOW_HEIGHT = "mw_h"
MAIN_WINDOW_ROOT_SPLITTER = "root_splitter"

SPLITTERS_TABLE = "Splitters"
SPLITTER_ID = "splitter_id"
SPLITTER_SIZE = "size"
SPLITTER_ORIENTATION = "orientation"

# A widget is either a window or a splitter; it belongs to a splitter at an
# index. Root splitters owned by a main window are not listed here.
WIDGET_INDICES_TABLE = "WidgetIndices"
WIDGET_ID = "widget_id"
WIDGET_INDEX = "widget_index"

# Which splitter a widget belongs to: (widget_id, splitter_id).
SPLITTER_WIDGETS_TABLE = "SplitterWidgets"

WINDOWS_TABLE = "Windows"
WINDOW_ID = "window_id"
WINDOW_SIZE = "size"
WINDOW_TYPE = "type"

GRAPHICS_VIEWS_TABLE = "GraphicsViews"
# The window holding the area that contains the view.
GRAPHICS_VIEW_PARENT = "parent_id"
GRAPHICS_VIEW_FOCUS_X = "focus_x"
GRAPHICS_VIEW_FOCUS_Y = "focus_y"
GRAPHICS_VIEW_ZOOM = "zoom"

ALL_TABLES = (
    MAIN_WINDOWS_TABLE,
    SPLITTERS_TABLE,
    WIDGET_INDICES_TABLE,
    SPLITTER_WIDGETS_TABLE,
    WINDOWS_TABLE,
    GRAPHICS_VIEWS_TABLE,
)

_CREATE_STATEMENTS = (
    f"CREATE TABLE IF NOT EXISTS {MAIN_WINDOWS_TABLE}"
    f" ( {MAIN_WINDOW_ID} INTEGER"
    f" , {MAIN_WINDOW_WIDTH} INTEGER"
    f" , {MAIN_WINDOW_HEIGHT} INTEGER"
    f" , {MAIN_WINDOW_ROOT_SPLITTER} INTEGER"
    f" , UNIQUE({MAIN_WINDOW_ID})"
    f" , UNIQUE({MAIN_WINDOW_ROOT_SPLITTER}))",
    f"CREATE TABLE IF NOT EXISTS {SPLITTERS_TABLE}"
    f" ( {SPLITTER_ID} INTEGER PRIMARY KEY"
    f" , {SPLITTER_SIZE} INTEGER"
    f" , {SPLITTER_ORIENTATION} INTEGER)",
    f"CREATE TABLE IF NOT EXISTS {WIDGET_INDICES_TABLE}"
    f" ( {WIDGET_ID} INTEGER PRIMARY KEY"
    f" , {WIDGET_INDEX} INTEGER)",
    f"CREATE TABLE IF NOT EXISTS {SPLITTER_WIDGETS_TABLE}"
    f" ( {WIDGET_ID} INTEGER PRIMARY KEY"
    f" , {SPLITTER_ID} INTEGER)",
    f"CREATE TABLE IF NOT EXISTS {WINDOWS_TABLE}"
    f" ( {WINDOW_ID} INTEGER PRIMARY KEY"
    f" , {WINDOW_SIZE} INTEGER"
    f" , {WINDOW_TYPE} INTEGER)",
    f"CREATE TABLE IF NOT EXISTS {GRAPHICS_VIEWS_TABLE}"
    f" ( {GRAPHICS_VIEW_PARENT} INTEGER PRIMARY KEY"
    f" , {GRAPHICS_VIEW_FOCUS_X} REAL"
    f" , {GRAPHICS_VIEW_FOCUS_Y} REAL"
    f" , {GRAPHICS_VIEW_ZOOM} REAL)",
)

Ids = Union[int, Iterable[int]]


@dataclass(frozen=True)
class View:
    """Where a view is centred and how far it is zoomed."""

    focus: tuple[float, float]
    zoom: float


@dataclass(frozen=True)
class WindowState:
    """A window's size in its splitter and the type of area it shows."""

    size: int
    type: int


@dataclass
class SplitterState:
    """A splitter's size, orientation and children by index."""

    size: int
    orientation: Orientation
    widgets: dict[int, int] = field(default_factory=dict)


@dataclass(frozen=True)
class MainWindowState:
    """A main window's size and the id of its root splitter."""

    size: tuple[int, int]
    sp_id: int


@dataclass
class UiState:
    """Everything needed to rebuild the window layout."""

    views: dict[int, View] = field(default_factory=dict)
    windows: dict[int, WindowState] = field(default_factory=dict)
    splitters: dict[int, SplitterState] = field(default_factory=dict)
    mws: dict[int, MainWindowState] = field(default_factory=dict)


def _as_ids(ids: Ids) -> list[int]:
    if isinstance(ids, int):
        return [ids]
    return [int(i) for i in ids]


def _as_int(value) -> int:
    return int(getattr(value, "value", value))


class UiStorage:
    """Reads and writes the window layout tables."""

    def __init__(self, conn: sqlite3.Connection | None = None) -> None:
        self._conn = conn

    def configure(self) -> None:
        """Create the layout tables if they do not exist yet."""
        conn = self._conn
        if conn is None:
            return
        try:
            with conn:
                for statement in _CREATE_STATEMENTS:
                    conn.execute(statement)
        except sqlite3.Error as exc:
            log.warning("%s", exc)

        missing = [name for name in ALL_TABLES if not table_exists(conn, name)]
        if missing:
            raise RuntimeError(f"layout tables missing: {', '.join(missing)}")

    def load(self) -> UiState:
        """Read the stored layout."""
        state = UiState()
        conn = self._conn
        if conn is None:
            return state

        for parent, x, y, zoom in self._rows(
            f"SELECT {GRAPHICS_VIEW_PARENT}, {GRAPHICS_VIEW_FOCUS_X},"
            f" {GRAPHICS_VIEW_FOCUS_Y}, {GRAPHICS_VIEW_ZOOM} FROM {GRAPHICS_VIEWS_TABLE}"
        ):
            state.views[int(parent)] = View((float(x), float(y)), float(zoom))

        for win_id, size, area_type in self._rows(
            f"SELECT {WINDOW_ID}, {WINDOW_SIZE}, {WINDOW_TYPE} FROM {WINDOWS_TABLE}"
        ):
            state.windows[int(win_id)] = WindowState(int(size), int(area_type))

        for sp_id, size, ori in self._rows(
            f"SELECT {SPLITTER_ID}, {SPLITTER_SIZE}, {SPLITTER_ORIENTATION}"
            f" FROM {SPLITTERS_TABLE}"
        ):
            try:
                orientation = Orientation(int(ori))
            except ValueError:
                raise ValueError(f"splitter {sp_id} has an invalid orientation: {ori}") from None
            state.splitters[int(sp_id)] = SplitterState(int(size), orientation)

        for mw_id, width, height, root in sorted(
            self._rows(
                f"SELECT {MAIN_WINDOW_ID}, {MAIN_WINDOW_WIDTH}, {MAIN_WINDOW_HEIGHT},"
                f" {MAIN_WINDOW_ROOT_SPLITTER} FROM {MAIN_WINDOWS_TABLE}"
            )
        ):
            state.mws[int(mw_id)] = MainWindowState((int(width), int(height)), int(root))

        widget_indices = {
            int(widget_id): int(index)
            for widget_id, index in self._rows(
                f"SELECT {WIDGET_ID}, {WIDGET_INDEX} FROM {WIDGET_INDICES_TABLE}"
            )
        }

        for widget_id, sp_id in self._rows(
            f"SELECT {WIDGET_ID}, {SPLITTER_ID} FROM {SPLITTER_WIDGETS_TABLE}"
        ):
            widget_id, sp_id = int(widget_id), int(sp_id)
            splitter = state.splitters.get(sp_id)
            index = widget_indices.get(widget_id)
            if splitter is None or index is None:
                log.warning("widget %d has no index or no splitter %d", widget_id, sp_id)
                continue
            splitter.widgets[index] = widget_id

        for splitter in state.splitters.values():
            splitter.widgets = dict(sorted(splitter.widgets.items()))

        return state

    def save_view(self, window_id: int, focus: tuple[float, float], zoom: float) -> None:
        """Store the focus and zoom of the view inside window *window_id*."""
        self._execute(
            f"INSERT OR REPLACE INTO {GRAPHICS_VIEWS_TABLE} VALUES (?, ?, ?, ?)",
            (int(window_id), float(focus[0]), float(focus[1]), float(zoom)),
        )

    def save_window(self, window_id: int, size: int, area_type) -> None:
        """Store a window's size and area type."""
        self._execute(
            f"INSERT OR REPLACE INTO {WINDOWS_TABLE} VALUES (?, ?, ?)",
            (int(window_id), int(size), _as_int(area_type)),
        )

    def save_splitter(
        self, splitter_id: int, size: int, orientation, widget_ids: Iterable[int]
    ) -> None:
        """Store a splitter and the order of its children in one transaction."""
        conn = self._conn
        if conn is None:
            return
        widget_ids = [int(w) for w in widget_ids]
        try:
            with conn:
                conn.execute(
                    f"INSERT OR REPLACE INTO {SPLITTERS_TABLE} VALUES (?, ?, ?)",
                    (int(splitter_id), int(size), _as_int(orientation)),
                )
                conn.executemany(
                    f"INSERT OR REPLACE INTO {WIDGET_INDICES_TABLE}"
                    f" ({WIDGET_ID}, {WIDGET_INDEX}) VALUES (?, ?)",
                    [(widget_id, i) for i, widget_id in enumerate(widget_ids)],
                )
                conn.executemany(
                    f"INSERT OR REPLACE INTO {SPLITTER_WIDGETS_TABLE}"
                    f" ({WIDGET_ID}, {SPLITTER_ID}) VALUES (?, ?)",
                    [(widget_id, int(splitter_id)) for widget_id in widget_ids],
                )
        except sqlite3.Error as exc:
            log.warning("%s", exc)

    def save_main_window(
        self, mw_id: int, width: int, height: int, root_splitter: int
    ) -> None:
        """Store a main window's size and root splitter."""
        self._execute(
            f"INSERT OR REPLACE INTO {MAIN_WINDOWS_TABLE} VALUES (?, ?, ?, ?)",
            (int(mw_id), int(width), int(height), int(root_splitter)),
        )

    def delete_view(self, ids: Ids) -> None:
        """Forget the views inside the given windows."""
        self._delete_from(GRAPHICS_VIEWS_TABLE, GRAPHICS_VIEW_PARENT, _as_ids(ids))

    def delete_window(self, ids: Ids) -> None:
        """Forget the given windows and their places in splitters."""
        ids = _as_ids(ids)
        self._delete_from(WINDOWS_TABLE, WINDOW_ID, ids)
        self._delete_from(WIDGET_INDICES_TABLE, WIDGET_ID, ids)
        self._delete_from(SPLITTER_WIDGETS_TABLE, WIDGET_ID, ids)

    def delete_splitter(self, ids: Ids) -> None:
        """Forget the given splitters, their places and their children's places."""
        ids = _as_ids(ids)
        self._delete_from(SPLITTERS_TABLE, SPLITTER_ID, ids)

        widget_ids = list(ids)
        for sp_id in ids:
            widget_ids.extend(
                int(row[0])
                for row in self._rows(
                    f"SELECT {WIDGET_ID} FROM {SPLITTER_WIDGETS_TABLE} WHERE {SPLITTER_ID}=?",
                    (sp_id,),
                )
            )

        self._delete_from(WIDGET_INDICES_TABLE, WIDGET_ID, widget_ids)
        self._delete_from(SPLITTER_WIDGETS_TABLE, WIDGET_ID, widget_ids)

    def delete_main_window(self, ids: Ids) -> None:
        """Forget the given main windows."""
        self._delete_from(MAIN_WINDOWS_TABLE, MAIN_WINDOW_ID, _as_ids(ids))

    def clear_tables(self) -> None:
        """Empty every layout table."""
        conn = self._conn
        if conn is None:
            return
        try:
            with conn:
                for name in (
                    GRAPHICS_VIEWS_TABLE,
                    MAIN_WINDOWS_TABLE,
                    SPLITTERS_TABLE,
                    SPLITTER_WIDGETS_TABLE,
                    WIDGET_INDICES_TABLE,
                    WINDOWS_TABLE,
                ):
                    conn.execute(f"DELETE FROM {name}")
        except sqlite3.Error as exc:
            log.warning("%s", exc)

    def _rows(self, query: str, params: tuple = ()) -> list[tuple]:
        if self._conn is None:
            return []
        try:
            return self._conn.execute(query, params).fetchall()
        except sqlite3.Error as exc:
            log.warning("%s", exc)
            return []

    def _execute(self, query: str, params: tuple) -> None:
        if self._conn is None:
            return
        try:
            with self._conn:
                self._conn.execute(query, params)
        except sqlite3.Error as exc:
            log.warning("%s", exc)

    def _delete_from(self, table: str, key: str, values: list[int]) -> None:
        if self._conn is None:
            return
        try:
            with self._conn:
                self._conn.executemany(
                    f"DELETE FROM {table} WHERE {key}=?", [(v,) for v in values]
                )
        except sqlite3.Error as exc:
            log.warning("%s", exc)