import sqlite3

import pytest

from surkl import stmt
from surkl.db import connect, table_exists


@pytest.fixture
def conn():
    connection = connect(":memory:")
    yield connection
    connection.close()


def test_bookmark_round_trip(conn):
    assert stmt.BM_SELECT_ALL == "SELECT * FROM SceneBookmarks"
    assert stmt.BM_INSERT == (
        "INSERT OR REPLACE INTO SceneBookmarks"
        " ( position_x, position_y, name ) VALUES ( ?, ?, ? )"
    )
    assert stmt.BM_DELETE == (
        "DELETE FROM SceneBookmarks WHERE position_x=? AND position_y=?"
    )

    assert table_exists(conn, stmt.BM_TABLE_NAME) is False
    conn.execute(stmt.BM_CREATE_TABLE)
    assert table_exists(conn, stmt.BM_TABLE_NAME) is True

    conn.execute(stmt.BM_INSERT, (1, 2, "home"))
    conn.execute(stmt.BM_INSERT, (3, 4, "work"))
    conn.execute(stmt.BM_INSERT, (1, 2, "renamed"))

    cur = conn.execute(stmt.BM_SELECT_ALL)
    columns = [d[0] for d in cur.description]
    assert columns == [stmt.BM_POSITION_X_COL, stmt.BM_POSITION_Y_COL, stmt.BM_NAME_COL]
    assert sorted(cur.fetchall()) == [(1, 2, "renamed"), (3, 4, "work")]

    conn.execute(stmt.BM_DELETE, (1, 2))
    assert conn.execute(stmt.BM_SELECT_ALL).fetchall() == [(3, 4, "work")]


def test_bookmark_name_not_null(conn):
    conn.execute(stmt.BM_CREATE_TABLE)
    assert table_exists(conn, stmt.BM_TABLE_NAME) is True
    with pytest.raises(sqlite3.IntegrityError):
        conn.execute(stmt.BM_INSERT, (0, 0, None))


def test_scene_nodes_round_trip(conn):
    conn.execute(stmt.SCENE_CREATE_NODES_TABLE)
    assert table_exists(conn, stmt.SCENE_NODES_TABLE) is True
    conn.execute(stmt.SCENE_INSERT_NODE, ("/a/b", 1, 1.5, 2.5, 10.0))
    conn.execute(stmt.SCENE_INSERT_NODE, ("/a/c", 2, 0.0, 0.0, 5.0))
    conn.execute(stmt.SCENE_INSERT_NODE, ("/x", 1, 3.0, 4.0, 1.0))

    rows = conn.execute(stmt.SCENE_SELECT_ALL_NODES).fetchall()
    assert ("/a/b", 1, 1.5, 2.5, 10.0) in rows
    assert len(rows) == 3

    conn.execute(stmt.SCENE_DELETE_FILE_NODE, ("/x",))
    ids = sorted(r[0] for r in conn.execute(stmt.SCENE_SELECT_ALL_NODES))
    assert ids == ["/a/b", "/a/c"]


def test_scene_delete_dir_removes_prefix(conn):
    conn.execute(stmt.SCENE_CREATE_NODES_TABLE)
    assert table_exists(conn, stmt.SCENE_NODES_TABLE) is True
    for node_id in ("/a/b", "/a/c", "/x"):
        conn.execute(stmt.SCENE_INSERT_NODE, (node_id, 0, 0.0, 0.0, 0.0))
    conn.execute(stmt.SCENE_DELETE_DIR_NODE, ("/a",))
    ids = [r[0] for r in conn.execute(stmt.SCENE_SELECT_ALL_NODES)]
    assert ids == ["/x"]


def test_scene_dir_attrs_round_trip(conn):
    conn.execute(stmt.SCENE_CREATE_NODES_DIR_ATTR_TABLE)
    assert table_exists(conn, stmt.SCENE_NODES_DIR_ATTR_TABLE) is True
    conn.execute(stmt.SCENE_INSERT_NODE_DIR_ATTR, ("/a", 3, 45.0))
    conn.execute(stmt.SCENE_INSERT_NODE_DIR_ATTR, ("/b", 0, 0.0))
    assert sorted(conn.execute(stmt.SCENE_SELECT_ALL_NODES_DIR_ATTRS).fetchall()) == [
        ("/a", 3, 45.0),
        ("/b", 0, 0.0),
    ]
    conn.execute(stmt.SCENE_DELETE_NODE_DIR_ATTR, ("/a",))
    assert conn.execute(stmt.SCENE_SELECT_ALL_NODES_DIR_ATTRS).fetchall() == [
        ("/b", 0, 0.0)
    ]


def test_theme_palettes_and_colors(conn):
    conn.execute(stmt.THEME_CREATE_PALETTES_TABLE)
    conn.execute(stmt.THEME_CREATE_COLORS_TABLE)
    assert table_exists(conn, stmt.THEME_PALETTES_TABLE) is True
    assert table_exists(conn, stmt.THEME_COLORS_TABLE) is True
    conn.execute(stmt.THEME_INSERT_PALETTE, ("p1", "Dark"))
    conn.execute(stmt.THEME_INSERT_COLOR, ("p1", 0, 0xFF0000))
    conn.execute(stmt.THEME_INSERT_COLOR, ("p1", 1, 0x00FF00))

    cur = conn.execute(stmt.THEME_SELECT_PALETTES)
    assert [d[0] for d in cur.description] == [
        stmt.THEME_PALETTE_ID,
        stmt.THEME_PALETTE_NAME,
    ]
    assert cur.fetchall() == [("p1", "Dark")]

    cur = conn.execute(stmt.THEME_SELECT_COLORS)
    assert [d[0] for d in cur.description] == [
        stmt.THEME_PALETTE_ID,
        stmt.THEME_COLOR_POSITION,
        stmt.THEME_COLOR_VALUE,
    ]
    assert sorted(cur.fetchall()) == [("p1", 0, 0xFF0000), ("p1", 1, 0x00FF00)]

    conn.execute(stmt.THEME_DELETE_COLORS, ("p1",))
    conn.execute(stmt.THEME_DELETE_PALETTE, ("p1",))
    assert conn.execute(stmt.THEME_SELECT_COLORS).fetchall() == []
    assert conn.execute(stmt.THEME_SELECT_PALETTES).fetchall() == []


def test_theme_settings(conn):
    conn.execute(stmt.THEME_CREATE_SETTINGS_TABLE)
    assert table_exists(conn, stmt.THEME_SETTINGS_TABLE) is True
    conn.execute(stmt.THEME_INSERT_ATTRIBUTE, (stmt.THEME_ACTIVE_THEME_KEY, "p1"))
    conn.execute(stmt.THEME_INSERT_ATTRIBUTE, (stmt.THEME_ACTIVE_THEME_KEY, "p2"))
    rows = conn.execute(stmt.THEME_SELECT_ATTRIBUTE, (stmt.THEME_ACTIVE_THEME_KEY,)).fetchall()
    assert rows == [("p2",)]


def test_surkl_attributes(conn):
    conn.execute(stmt.SURKL_CREATE_TABLE)
    assert table_exists(conn, stmt.SURKL_TABLE) is True
    conn.execute(stmt.SURKL_INSERT_ATTRIBUTE, ("read_only", 1))
    conn.execute(stmt.SURKL_INSERT_ATTRIBUTE, ("read_only", 0))
    cur = conn.execute(stmt.SURKL_SELECT_ATTRIBUTE)
    assert [d[0] for d in cur.description] == [
        stmt.SURKL_ATTRIBUTE_VALUE,
        stmt.SURKL_ATTRIBUTE_KEY,
    ]
    assert cur.fetchall() == [(0, "read_only")]


def test_create_statements_are_idempotent(conn):
    tables = {
        stmt.BM_CREATE_TABLE: stmt.BM_TABLE_NAME,
        stmt.SCENE_CREATE_NODES_TABLE: stmt.SCENE_NODES_TABLE,
        stmt.SCENE_CREATE_NODES_DIR_ATTR_TABLE: stmt.SCENE_NODES_DIR_ATTR_TABLE,
        stmt.THEME_CREATE_PALETTES_TABLE: stmt.THEME_PALETTES_TABLE,
        stmt.THEME_CREATE_COLORS_TABLE: stmt.THEME_COLORS_TABLE,
        stmt.THEME_CREATE_SETTINGS_TABLE: stmt.THEME_SETTINGS_TABLE,
        stmt.SURKL_CREATE_TABLE: stmt.SURKL_TABLE,
    }
    for create, name in tables.items():
        conn.execute(create)
        conn.execute(create)
        assert table_exists(conn, name) is True
    names = {r[0] for r in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")}
    assert names == set(tables.values())