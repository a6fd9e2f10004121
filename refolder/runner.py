"""
Single entry point for a refolder operation: collect, partition, plan, then
either preview or apply.
"""

from pathlib import Path

from .collector import collect_files, resolve_base
from .errors import InvalidArgument
from .executor import apply_plan
from .planning import SUFFIX_STYLES, build_plan, partition, validate_plan
from .preview import print_dry_run_preview
from .utils import print_info


def run(
    base_path: str | Path,
    matching: str,
    subfolders: int,
    prefix: str,
    suffix: str,
    recursive: bool = False,
    dry_run: bool = False,
    force: bool = False,
) -> dict:
    """
    Distribute matching files under base_path into subfolders.

    Files already sitting in prefix-named folders are collected again, so
    re-running with a different subfolder count redistributes them and
    re-running with the same arguments changes nothing.

    Args:
        base_path: Directory holding the files.
        matching: Shell-style glob, case-insensitive.
        subfolders: Number of destination folders, at least 1.
        prefix: Destination folder prefix.
        suffix: "numbers", "letters" or "none".
        recursive: Also match files in subdirectories.
        dry_run: Print the planned layout instead of moving anything.
        force: Overwrite existing destination files.

    Returns:
        Report dict. Always contains "planned_moves" and "dry_run".

    Raises:
        RefolderError: Any failure; nothing is retried.
    """
    if subfolders < 1:
        raise InvalidArgument("subfolders must be greater than zero")
    if suffix not in SUFFIX_STYLES:
        raise InvalidArgument(
            f"Unknown suffix style '{suffix}'. Use {'|'.join(SUFFIX_STYLES)}"
        )

    base = resolve_base(base_path)

    # 1) Collect, including files left in earlier prefix-* folders
    files = collect_files(base, matching, recursive, prefix)

    if not files:
        print_info("No files matched pattern. Nothing to do.")
        return {"root": str(base), "dry_run": dry_run, "planned_moves": []}

    print_info(f"Found {len(files)} files")

    # 2) Partition and plan everything before touching the disk
    buckets = partition(files, subfolders)
    plans = build_plan(base, buckets, prefix, suffix)
    planned_moves = validate_plan(plans)

    if dry_run:
        print_dry_run_preview(planned_moves)
        return {"root": str(base), "dry_run": True, "planned_moves": planned_moves}

    # 3) Apply bucket by bucket
    report = apply_plan(plans, force=force)
    report["root"] = str(base)
    report["planned_moves"] = planned_moves
    return report
