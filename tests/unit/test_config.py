from pathlib import Path

import pytest

from rankboard import config
from rankboard.config import MIGRATIONS_DIR, Settings

PROJECT_ROOT = Path(__file__).parent.parent.parent


@pytest.fixture(autouse=True)
def _clear_caches():
    config.get_settings.cache_clear()
    config.get_rules.cache_clear()
    yield
    config.get_settings.cache_clear()
    config.get_rules.cache_clear()


def test_settings_defaults(monkeypatch, rules):
    monkeypatch.delenv("RANKBOARD_DATA_DIR", raising=False)
    monkeypatch.delenv("RANKBOARD_MIGRATIONS", raising=False)

    settings = Settings()

    assert settings.data_dir == Path("./data")
    assert settings.migrations_dir == MIGRATIONS_DIR
    assert MIGRATIONS_DIR.parent.name == "rankboard"
    assert settings.db_path(rules).endswith("rankboard.db")


def test_settings_from_env(monkeypatch, tmp_path, rules):
    monkeypatch.setenv("RANKBOARD_DATA_DIR", str(tmp_path))

    settings = Settings()

    assert settings.db_path(rules) == str(tmp_path / "rankboard.db")


def test_get_rules_reads_configured_path(monkeypatch):
    monkeypatch.setenv("RANKBOARD_RULES", str(PROJECT_ROOT / "rules.yaml"))

    rules = config.get_rules()

    assert rules.project.slug == "rankboard"
    assert config.get_rules() is rules


def test_get_rules_missing_file(monkeypatch, tmp_path):
    monkeypatch.setenv("RANKBOARD_RULES", str(tmp_path / "nope.yaml"))

    with pytest.raises(FileNotFoundError):
        config.get_rules()


def test_context_from_settings(monkeypatch, tmp_path, rules):
    from rankboard.context import ServiceContext

    monkeypatch.setenv("RANKBOARD_DATA_DIR", str(tmp_path / "data"))

    ctx = ServiceContext.from_settings(Settings(), rules)
    item, errors = ctx.ordering_service.place("hello")

    assert errors == []
    assert (tmp_path / "data" / "rankboard.db").is_file()
    assert ctx.item_repo.get_by_id(item.id).title == "hello"


def test_default_migrations_ship_with_package(monkeypatch, tmp_path, rules):
    from rankboard.context import ServiceContext

    monkeypatch.delenv("RANKBOARD_MIGRATIONS", raising=False)
    monkeypatch.chdir(tmp_path)

    assert sorted(p.name for p in MIGRATIONS_DIR.glob("*.sql")) == ["001_ranked_items.sql"]
    ctx = ServiceContext.create(db_path=str(tmp_path / "board.db"), rules=rules)
    assert ctx.ordering_service.place("works")[1] == []
