import sqlite3

import pytest

from rankboard.adapters.sqlite.migrator import SQLiteMigrator


@pytest.fixture
def temp_db_path(tmp_path):
    return str(tmp_path / "test_db.sqlite")


def test_migrator_creates_migration_table(temp_db_path, migrations_dir):
    migrator = SQLiteMigrator(temp_db_path, migrations_dir)
    migrator.run_migrations()

    conn = sqlite3.connect(temp_db_path)
    cursor = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' AND name='_migrations'"
    )
    assert cursor.fetchone() is not None
    conn.close()


def test_migrator_applies_initial(temp_db_path, migrations_dir):
    migrator = SQLiteMigrator(temp_db_path, migrations_dir)
    applied = migrator.run_migrations()

    assert applied == ["001_ranked_items.sql"]

    conn = sqlite3.connect(temp_db_path)
    cursor = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' AND name='ranked_items'"
    )
    assert cursor.fetchone() is not None

    cursor = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='index' AND name='idx_ranked_items_lane_rank'"
    )
    assert cursor.fetchone() is not None
    conn.close()


def test_migrator_is_idempotent(temp_db_path, migrations_dir):
    migrator = SQLiteMigrator(temp_db_path, migrations_dir)

    migrator.run_migrations()
    assert migrator.run_migrations() == []

    conn = sqlite3.connect(temp_db_path)
    cursor = conn.execute(
        "SELECT count(*) FROM _migrations WHERE filename='001_ranked_items.sql'"
    )
    assert cursor.fetchone()[0] == 1
    conn.close()


def test_down_section_is_not_applied(temp_db_path, tmp_path):
    mig_dir = tmp_path / "migs"
    mig_dir.mkdir()
    (mig_dir / "001_t.sql").write_text(
        "CREATE TABLE t (id INTEGER);\n-- Down\nDROP TABLE t;\n"
    )

    SQLiteMigrator(temp_db_path, str(mig_dir)).run_migrations()

    conn = sqlite3.connect(temp_db_path)
    cursor = conn.execute("SELECT name FROM sqlite_master WHERE type='table' AND name='t'")
    assert cursor.fetchone() is not None
    conn.close()


def test_failed_migration_raises(temp_db_path, tmp_path):
    mig_dir = tmp_path / "bad"
    mig_dir.mkdir()
    (mig_dir / "001_bad.sql").write_text("CREATE TABLE (;")

    with pytest.raises(RuntimeError, match="001_bad.sql"):
        SQLiteMigrator(temp_db_path, str(mig_dir)).run_migrations()
