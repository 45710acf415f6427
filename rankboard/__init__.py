"""rankboard - fractional ranking for ordered lists and Kanban lanes."""

__version__ = "0.1.0"
