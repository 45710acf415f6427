"""
Ranking component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class RankingRulesPort(Protocol):
    """Port for ranking rules configuration."""

    def get_alphabet(self) -> str:
        """Get the ordered alphabet ranks are drawn from."""
        ...

    def get_max_rank_length_warning(self) -> int:
        """Get the rank length above which growth is logged."""
        ...
