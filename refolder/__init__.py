"""
refolder
========

Distribute the files in a directory evenly across numbered, lettered or
unlabeled subfolders, and safely redo the distribution later.
"""

__version__ = "0.3.0"

from .collector import collect_files, resolve_base
from .errors import (
    RefolderError,
    InvalidArgument,
    PathError,
    GlobError,
    FilesystemError,
    ConflictError,
)
from .executor import apply_plan
from .planning import (
    SUFFIX_STYLES,
    BucketPlan,
    PlannedMove,
    build_plan,
    format_folder_name,
    partition,
    validate_plan,
)
from .preview import print_dry_run_preview, render_preview
from .runner import run

__all__ = [
    "run",
    "collect_files",
    "resolve_base",
    "partition",
    "format_folder_name",
    "build_plan",
    "validate_plan",
    "apply_plan",
    "render_preview",
    "print_dry_run_preview",
    "BucketPlan",
    "PlannedMove",
    "SUFFIX_STYLES",
    "RefolderError",
    "InvalidArgument",
    "PathError",
    "GlobError",
    "FilesystemError",
    "ConflictError",
]
