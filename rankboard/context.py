from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from rankboard.adapters.sqlite.migrator import SQLiteMigrator
from rankboard.adapters.sqlite.repos import SQLiteRankedItemRepo
from rankboard.components.ordering import (
    OrderingService,
    RankedItemRepoPort,
    create_ordering_service,
)
from rankboard.config import Settings
from rankboard.rules.models import Rules


@dataclass
class ServiceContext:
    ordering_service: OrderingService
    item_repo: RankedItemRepoPort
    rules: Rules

    @classmethod
    def create(
        cls,
        db_path: str,
        rules: Rules,
        migrations_dir: str | Path | None = None,
    ) -> ServiceContext:
        """Build a SQLite-backed context, applying pending migrations first."""
        migrations_dir = migrations_dir or Settings().migrations_dir
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        SQLiteMigrator(db_path, str(migrations_dir)).run_migrations()

        item_repo = SQLiteRankedItemRepo(db_path)
        return cls(
            ordering_service=create_ordering_service(item_repo, rules),
            item_repo=item_repo,
            rules=rules,
        )

    @classmethod
    def from_settings(cls, settings: Settings, rules: Rules) -> ServiceContext:
        return cls.create(
            db_path=settings.db_path(rules),
            rules=rules,
            migrations_dir=settings.migrations_dir,
        )
