# surkl

Building blocks of a file-system browser that lays directories out as
circles. The package holds the parts that need no graphical toolkit and
depends on nothing outside the standard library.

## Modules

- `surkl.layout` – geometry for placing child nodes around a node.
  `Line` is a segment with `is_null()`, `normal_vector()` and
  `intersects(other)`. `make_ngon(n, start_angle=0.0)` builds a unit
  polygon as a list of `Side` (edge and outward normal);
  `make_ngons(n)` lists them by side count; `get_ngon(n)` returns a fresh
  copy of a cached polygon; `get_ngon_side_norm(i, n)` returns one normal;
  `get_guides(sides, points)` clears the normal of the first free side
  crossed by the line from the centre to each point, leaving the free
  directions.
- `surkl.bookmark` – `SceneBookmarkData` (a position and a name; equal
  when positions are equal) and `BookmarkManager`, which keeps bookmarks in
  memory and mirrors them to the `SceneBookmarks` table of an optional
  SQLite connection. `insert_bookmark` raises `ValueError` for a position
  already bookmarked; `update_bookmark` and `remove_bookmarks` raise
  `KeyError` for missing ones. `configure()` loads existing rows or creates
  the table; `save_to_database()` writes all bookmarks.
- `surkl.splitter` – an in-memory tree of `Splitter` and `Window` objects
  with an `Orientation`. Splitters support `add_window`, `insert_window`,
  `add_splitter`, `split_window`, `delete_child`, `move_splitter`,
  `set_sizes` and the static `Splitter.swap(win_a, win_b)`. A handle is 7
  units wide by default. Changes are reported through the `state_changed`
  and `splitter_deleted` signals. Windows offer `split`, `close` and
  `swap_with`.
- `surkl.infobar` – `Signal`, a list of callbacks with `connect`,
  `disconnect` and `emit`, and `InfoBarController` with `clear()`,
  `post_msg_r(text)`, `post_msg_l(text, lifetime=-1)` (clears after
  `lifetime` milliseconds on a background timer when positive), `cancel()`
  and the `pending` property.
- `surkl.uistorage` – `UiStorage` saves and restores the window layout
  (main windows, splitters, windows, views) in SQLite. `load()` returns a
  `UiState` made of `View`, `WindowState`, `SplitterState` and
  `MainWindowState` records. The `delete_*` methods take one id or an
  iterable of ids.
- `surkl.db` – `connect(database_name)` opens SQLite with the application's
  pragmas; `table_exists(conn, name)`; `DatabaseConfig` with `DB_CONFIG`
  and `DB_CONFIG_TEST`.
- `surkl.stmt` – SQL statements for bookmarks, scene nodes, theme palettes
  and general attributes.
- `surkl.version` – `version()` returns `"0.3.0"`.

## Install

    pip install .

For the tests:

    pip install ".[test]"
    pytest

## Example

    from surkl.db import connect
    from surkl.bookmark import BookmarkManager, SceneBookmarkData
    from surkl.layout import get_ngon

    conn = connect(":memory:")
    manager = BookmarkManager(conn)
    manager.configure()
    manager.insert_bookmark(SceneBookmarkData((10, 20), "home"))
    print(manager.scene_bookmarks_as_list())

    hexagon = get_ngon(6)
    print(len(hexagon))

## What it does not do

There is no graphical interface and no command to run: nothing draws
windows, nodes or the file-system scene, and nothing reads directories.
The splitter tree and layout storage only model and persist a layout.
`surkl.stmt` holds statements for scene nodes and theme palettes, but no
module here stores or loads those.