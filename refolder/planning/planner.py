"""
Move planning for refolder.

Every bucket's destination folder and every file move is computed here,
before anything on disk changes. The dry-run preview and the executor both
consume the same plan.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Sequence

from ..errors import ConflictError, InvalidArgument
from .naming import format_folder_name


@dataclass(frozen=True)
class PlannedMove:
    """A single source -> destination relocation."""
    src: Path
    dst: Path

    @property
    def is_noop(self) -> bool:
        return self.src == self.dst


@dataclass
class BucketPlan:
    """One destination folder and the moves that land in it."""
    index: int
    folder_name: str
    folder_path: Path
    moves: list[PlannedMove] = field(default_factory=list)


def _check_prefix(prefix: str) -> None:
    if "/" in prefix or "\\" in prefix or prefix in (".", ".."):
        raise InvalidArgument(f"Prefix '{prefix}' is not a valid folder name")


def build_plan(
    base: Path,
    buckets: Sequence[Sequence[Path]],
    prefix: str,
    suffix: str,
) -> list[BucketPlan]:
    """
    Turn partitioned buckets into per-folder move lists.

    Args:
        base: Resolved base directory; destination folders live directly under it.
        buckets: Output of partition(), index 0 is bucket 1.
        prefix: Folder prefix.
        suffix: Suffix style passed to format_folder_name().

    Returns:
        One BucketPlan per bucket, in bucket order. Empty buckets still get a
        plan so their folder is created.
    """
    _check_prefix(prefix)

    plans: list[BucketPlan] = []
    for i, bucket in enumerate(buckets, start=1):
        folder_name = format_folder_name(prefix, i, suffix)
        folder_path = base / folder_name

        plan = BucketPlan(index=i, folder_name=folder_name, folder_path=folder_path)
        for src in bucket:
            plan.moves.append(PlannedMove(src=src, dst=folder_path / src.name))
        plans.append(plan)

    return plans


def iter_moves(plans: Iterable[BucketPlan]):
    """Yield every PlannedMove across all buckets, in execution order."""
    for plan in plans:
        yield from plan.moves


def validate_plan(plans: Sequence[BucketPlan]) -> list[PlannedMove]:
    """
    Check the plan for destination collisions.

    Two different sources that map to the same destination path (same file
    name found in different subdirectories) would overwrite each other, so
    this is a hard failure regardless of --force.

    Returns:
        All planned moves in execution order (see order_moves()).

    Raises:
        ConflictError: If two relocating moves share a destination, or
            moves form a cycle.
    """
    destinations: dict[Path, Path] = {}  # dst -> src
    collisions = []

    for move in iter_moves(plans):
        # Files already in place are left to the executor's force handling
        if move.is_noop:
            continue
        existing_source = destinations.get(move.dst)
        if existing_source is not None and existing_source != move.src:
            collisions.append(
                f"Collision: '{existing_source}' and '{move.src}' both target '{move.dst}'"
            )
            continue
        destinations[move.dst] = move.src

    if collisions:
        error_msg = "Plan has destination collisions:\n" + "\n".join(f"  - {c}" for c in collisions)
        raise ConflictError(error_msg)

    return order_moves(plans)


def order_moves(plans: Sequence[BucketPlan]) -> list[PlannedMove]:
    """
    Execution order for the plan.

    Moves keep bucket order, except that a file sitting on another move's
    destination (and due to move out itself) is moved first. On a redo this
    happens whenever a name shifts to the next folder.

    Raises:
        ConflictError: If moves form a cycle (A -> B while B -> A).
    """
    movers = {m.src: m for m in iter_moves(plans) if not m.is_noop}
    done: set[PlannedMove] = set()
    ordered: list[PlannedMove] = []

    for move in iter_moves(plans):
        chain: list[PlannedMove] = []
        in_chain: set[PlannedMove] = set()
        current = move
        while current is not None and current not in done:
            if current in in_chain:
                raise ConflictError(
                    f"Moves form a cycle through '{current.dst}'; move one file out of the way and re-run"
                )
            chain.append(current)
            in_chain.add(current)
            current = None if current.is_noop else movers.get(current.dst)

        # Occupants first
        for m in reversed(chain):
            done.add(m)
            ordered.append(m)

    return ordered
