from datetime import UTC, datetime
from typing import Literal
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

# --- Enums / Literals ---
Placement = Literal["head", "tail"]


def utcnow() -> datetime:
    return datetime.now(UTC)


# --- Ordered Lists ---

class RankedItem(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    lane: str
    rank: str
    title: str
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    def sort_key(self) -> tuple[str, str]:
        # Concurrent moves can produce equal ranks; id keeps the order total.
        return (self.rank, str(self.id))
