"""Shared type aliases for the core and domain layers."""
from typing import Literal, Tuple

Position = Tuple[int, int]
CorridorOrientationSource = Literal["seeded", "independent"]

__all__ = ["CorridorOrientationSource", "Position"]
