"""
Planning module for refolder.

Provides:
- Balanced partitioning of collected files
- Destination folder naming
- Move planning and validation
"""

from .partition import partition
from .naming import SUFFIX_STYLES, format_folder_name, index_to_letters
from .planner import (
    BucketPlan,
    PlannedMove,
    build_plan,
    iter_moves,
    order_moves,
    validate_plan,
)

__all__ = [
    "partition",
    "SUFFIX_STYLES",
    "format_folder_name",
    "index_to_letters",
    "BucketPlan",
    "PlannedMove",
    "build_plan",
    "iter_moves",
    "order_moves",
    "validate_plan",
]
