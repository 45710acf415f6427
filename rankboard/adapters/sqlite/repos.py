import sqlite3
from datetime import datetime
from typing import Any
from uuid import UUID

from rankboard.domain.entities import RankedItem


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


class SQLiteRankedItemRepo:
    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        conn.execute("PRAGMA foreign_keys = ON;")
        return conn

    def _map_row(self, row: dict[str, Any]) -> RankedItem:
        return RankedItem(
            id=UUID(row["id"]),
            lane=row["lane"],
            rank=row["rank"],
            title=row["title"],
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )

    def save(self, item: RankedItem) -> RankedItem:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO ranked_items (
                    id, lane, rank, title, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    lane=excluded.lane,
                    rank=excluded.rank,
                    title=excluded.title,
                    updated_at=excluded.updated_at
            """,
                (
                    str(item.id),
                    item.lane,
                    item.rank,
                    item.title,
                    item.created_at.isoformat(),
                    item.updated_at.isoformat(),
                ),
            )
            conn.commit()
            return item
        finally:
            conn.close()

    def get_by_id(self, item_id: UUID) -> RankedItem | None:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT * FROM ranked_items WHERE id = ?", (str(item_id),)
            ).fetchone()
            return self._map_row(row) if row else None
        finally:
            conn.close()

    def list_lane(self, lane: str) -> list[RankedItem]:
        conn = self._get_conn()
        try:
            rows = conn.execute(
                "SELECT * FROM ranked_items WHERE lane = ? ORDER BY rank ASC, id ASC",
                (lane,),
            ).fetchall()
            return [self._map_row(row) for row in rows]
        finally:
            conn.close()

    def delete(self, item_id: UUID) -> None:
        conn = self._get_conn()
        try:
            conn.execute("DELETE FROM ranked_items WHERE id = ?", (str(item_id),))
            conn.commit()
        finally:
            conn.close()
