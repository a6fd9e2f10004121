"""
Dry-run preview for refolder.

Renders the planned moves as a folder tree with a summary. Works purely on
path strings; nothing here touches the filesystem.
"""

from collections import defaultdict
from pathlib import Path
from typing import Iterable

from rich.console import Console, Group
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from . import utils
from .planning import PlannedMove


def group_moves(moves: Iterable[PlannedMove]) -> dict[Path, list[str]]:
    """
    Group destination file names by destination folder.

    Returns:
        Ordered dict of folder -> sorted file names, folders in lexical order.
    """
    folders: dict[Path, list[str]] = defaultdict(list)
    for move in moves:
        folders[move.dst.parent].append(move.dst.name)

    return {folder: sorted(folders[folder]) for folder in sorted(folders, key=str)}


def build_preview_tree(moves: Iterable[PlannedMove]) -> Tree:
    """Build the "." rooted tree: one branch per folder, one leaf per file."""
    tree = Tree(".")
    for folder, names in group_moves(moves).items():
        branch = tree.add(Text(folder.name or str(folder), style="bold blue"))
        for name in names:
            branch.add(Text(name))
    return tree


def render_preview(moves: Iterable[PlannedMove]) -> Group:
    """
    Render the full dry-run preview: tree, summary table and notice.

    Args:
        moves: The exact planned moves a real run would apply.

    Returns:
        A rich renderable.
    """
    moves = list(moves)
    grouped = group_moves(moves)
    total_files = sum(len(names) for names in grouped.values())

    table = Table(title="Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Count", style="magenta")
    table.add_row("Total folders", str(len(grouped)))
    table.add_row("Total files", str(total_files))

    return Group(
        build_preview_tree(moves),
        Text(""),
        table,
        Text("Mode: dry-run (no changes made)", style="italic"),
    )


def print_dry_run_preview(moves: Iterable[PlannedMove], console: Console | None = None) -> None:
    """Print the dry-run preview to the given console (shared console by default)."""
    (console or utils.console).print(render_preview(moves))
