import pytest

from surkl.db import (
    APPLICATION_ID,
    DB_CONFIG,
    DB_CONFIG_TEST,
    DatabaseConfig,
    connect,
    table_exists,
)


@pytest.fixture
def conn():
    connection = connect(":memory:")
    yield connection
    connection.close()


def test_config_names_open_databases(tmp_path):
    assert DB_CONFIG.database_name == "Surkl.db"
    assert DB_CONFIG.connection_name == "Surkl_db_connection"
    assert DB_CONFIG_TEST.database_name == "Surkl_test.db"
    assert DB_CONFIG_TEST.connection_name == "Surkl_test_db_connection"

    path = tmp_path / DB_CONFIG_TEST.database_name
    connection = connect(str(path))
    try:
        (value,) = connection.execute("PRAGMA application_id").fetchone()
        assert value == APPLICATION_ID
    finally:
        connection.close()
    assert path.exists()


def test_config_is_frozen():
    cfg = DatabaseConfig("a.db", "a")
    assert cfg.database_name == "a.db"
    assert cfg.connection_name == "a"
    with pytest.raises(AttributeError):
        cfg.database_name = "b.db"
    assert cfg.database_name == "a.db"


def test_application_id_pragma(conn):
    (value,) = conn.execute("PRAGMA application_id").fetchone()
    assert value == APPLICATION_ID
    assert value == 314159265


def test_synchronous_off(conn):
    (value,) = conn.execute("PRAGMA synchronous").fetchone()
    assert value == 0


def test_table_exists(conn):
    assert table_exists(conn, "Things") is False
    conn.execute("CREATE TABLE Things (x INTEGER)")
    assert table_exists(conn, "Things") is True
    assert table_exists(conn, "Other") is False


def test_table_exists_ignores_quotes_in_name(conn):
    assert table_exists(conn, "x' OR '1'='1") is False


def test_connect_file(tmp_path):
    path = tmp_path / "test.db"
    first = connect(str(path))
    first.execute("CREATE TABLE T (x INTEGER)")
    first.commit()
    first.close()

    second = connect(str(path))
    try:
        assert table_exists(second, "T")
    finally:
        second.close()