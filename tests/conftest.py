import os
from pathlib import Path

import pytest

from rankboard.config import MIGRATIONS_DIR
from rankboard.context import ServiceContext
from rankboard.rules.loader import load_rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def test_data_dir(tmp_path):
    return str(tmp_path)


@pytest.fixture
def migrations_dir() -> str:
    return str(MIGRATIONS_DIR)


@pytest.fixture
def rules():
    # Load the REAL rules from the project root.
    rules_path = PROJECT_ROOT / "rules.yaml"
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules not found at {rules_path}")
    return load_rules(rules_path)


@pytest.fixture
def test_ctx(test_data_dir, rules, migrations_dir):
    """
    Creates a full ServiceContext backed by a temporary SQLite DB.
    """
    db_path = os.path.join(test_data_dir, "rankboard.db")
    return ServiceContext.create(db_path=db_path, rules=rules, migrations_dir=migrations_dir)
