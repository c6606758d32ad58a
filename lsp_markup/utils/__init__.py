"""Position and range helpers shared by the renderers."""

from .folding import calculate_character, is_folding_range_inverted, sort_folding_ranges
from .ranges import compare_positions, is_end_earlier_than_start, sort_by_position, sort_by_start_position

__all__ = [
    "calculate_character",
    "compare_positions",
    "is_end_earlier_than_start",
    "is_folding_range_inverted",
    "sort_by_position",
    "sort_by_start_position",
    "sort_folding_ranges",
]
