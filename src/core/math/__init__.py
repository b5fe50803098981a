"""
Core math modules

Целочисленные примитивы календарной арифметики (floor-деление, clamp, валидация int).
"""

from src.core.math.integer_math import (
    DAYS_PER_WEEK,
    clamp,
    floor_div,
    floor_mod,
    validate_int,
)

__all__ = [
    # Constants
    "DAYS_PER_WEEK",
    # Floor arithmetic
    "floor_div",
    "floor_mod",
    # Utilities
    "clamp",
    # Validation
    "validate_int",
]
