"""Adventure Crawler: a seeded, turn-based terminal dungeon crawler."""

__version__ = "0.1.0"
