"""
Plan execution for refolder.

Applies a validated plan to the filesystem.
"""

import os
import shutil
from pathlib import Path
from typing import Sequence

from tqdm import tqdm

from .errors import ConflictError, FilesystemError
from .planning import BucketPlan, PlannedMove, order_moves


def ensure_folder(folder_path: Path) -> bool:
    """
    Make sure a destination folder exists.

    Returns:
        True if the folder was created, False if it already existed.

    Raises:
        ConflictError: If the path exists but is not a directory.
        FilesystemError: If the folder cannot be created.
    """
    if folder_path.exists():
        if not folder_path.is_dir():
            raise ConflictError(
                f"Destination path {folder_path} exists and is not a directory"
            )
        return False

    try:
        folder_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemError(f"Failed to create directory {folder_path}: {e}") from e
    return True


def _relocate(src: Path, dst: Path) -> bool:
    """
    Rename src to dst, falling back to copy + delete when rename fails
    (e.g. across devices).

    Returns:
        True if the copy fallback was used.
    """
    try:
        os.rename(src, dst)
        return False
    except OSError as rename_err:
        try:
            shutil.copy2(src, dst)
        except OSError as e:
            # Source is untouched; a partial dst may remain
            raise FilesystemError(
                f"Failed copying {src} to {dst}: {e} (rename failed: {rename_err})"
            ) from e

    try:
        os.remove(src)
    except OSError as e:
        raise FilesystemError(f"Failed removing original file {src}: {e}") from e
    return True


def move_file(move: PlannedMove, force: bool = False) -> str:
    """
    Apply one planned move.

    Args:
        move: Source and destination paths.
        force: Replace an existing destination file.

    Returns:
        "skipped" for a no-op, "moved" for a rename, "copied" when the
        copy + delete fallback was used.

    Raises:
        ConflictError: Destination exists and force is False.
        FilesystemError: Removing, copying or deleting failed.
    """
    src, dst = move.src, move.dst

    # Already in place (redo with unchanged layout)
    if move.is_noop:
        return "skipped"

    if dst.exists() or dst.is_symlink():
        if not force:
            raise ConflictError(
                f"Destination file {dst} already exists (use --force to overwrite)"
            )
        try:
            os.remove(dst)
        except OSError as e:
            raise FilesystemError(
                f"Failed removing existing destination file {dst}: {e}"
            ) from e

    return "copied" if _relocate(src, dst) else "moved"


def apply_plan(plans: Sequence[BucketPlan], force: bool = False) -> dict:
    """
    Apply the plan.

    Every bucket's folder is created first (even when the bucket is empty).
    Files then move in bucket order, except that a file occupying another
    move's destination moves out first. The first error aborts the run;
    moves already done stay as they are.

    Args:
        plans: Output of build_plan(), already validated.
        force: Overwrite existing destination files.

    Returns:
        Report dict with counters.
    """
    created_folders: list[str] = []
    executed_moves_count = 0
    skipped_moves_count = 0
    fallback_copies_count = 0

    total_moves = sum(len(p.moves) for p in plans)
    print(f"\n[APPLY] Moving {total_moves} files into {len(plans)} folders...")

    with tqdm(total=total_moves, unit="file", disable=None) as pbar:
        for plan in plans:
            if ensure_folder(plan.folder_path):
                created_folders.append(plan.folder_name)

        for move in order_moves(plans):
            status = move_file(move, force=force)
            if status == "skipped":
                skipped_moves_count += 1
            else:
                executed_moves_count += 1
                if status == "copied":
                    fallback_copies_count += 1
                    tqdm.write(f"[INFO] Copied across devices: {move.src} -> {move.dst}")
            pbar.update(1)

    report = {
        "dry_run": False,
        "created_folders": created_folders,
        "created_folders_count": len(created_folders),
        "executed_moves_count": executed_moves_count,
        "skipped_moves_count": skipped_moves_count,
        "fallback_copies_count": fallback_copies_count,
    }

    print(f"[APPLY] Complete: {executed_moves_count} moved, {skipped_moves_count} already in place, "
          f"{len(created_folders)} folders created")

    return report
