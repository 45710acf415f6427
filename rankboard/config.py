import logging
import os
from functools import lru_cache
from pathlib import Path

from rankboard.rules.loader import load_rules
from rankboard.rules.models import Rules

logger = logging.getLogger(__name__)

# Installed as package data alongside the code.
MIGRATIONS_DIR = Path(__file__).resolve().parent / "migrations"


class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("RANKBOARD_DATA_DIR", "./data"))
        self.rules_path = Path(
            os.environ.get("RANKBOARD_RULES", str(self.base_dir / "rules.yaml"))
        )
        self.migrations_dir = Path(
            os.environ.get("RANKBOARD_MIGRATIONS", str(MIGRATIONS_DIR))
        )

    def db_path(self, rules: Rules) -> str:
        return str(self.data_dir / rules.storage.db_filename)


@lru_cache
def get_settings() -> Settings:
    return Settings()


@lru_cache
def get_rules() -> Rules:
    settings = get_settings()
    rules = load_rules(settings.rules_path)
    logger.info("Rules loaded from %s", settings.rules_path)
    return rules
