"""
File collection for refolder.

Resolves the base directory and gathers the files a run will distribute,
including files already sitting in destination folders from an earlier run.
"""

import fnmatch
import os
import re
from pathlib import Path, PurePosixPath

from .errors import FilesystemError, GlobError, PathError
from .utils import print_warning


def resolve_base(base_path: str | Path) -> Path:
    """
    Canonicalize the base directory.

    Args:
        base_path: Directory as given by the caller; may be relative or ".".

    Returns:
        Absolute, symlink-free path to the directory.

    Raises:
        PathError: If the path does not exist, cannot be resolved, or is not
            a directory.
    """
    path = Path(base_path)
    try:
        resolved = path.resolve(strict=True)
    except FileNotFoundError:
        raise PathError(f"Path '{path}' does not exist")
    except (OSError, RuntimeError) as e:
        raise PathError(f"Failed to canonicalize '{path}': {e}") from e

    if not resolved.is_dir():
        raise PathError(f"Path '{path}' is not a directory")

    return resolved


def compile_pattern(pattern: str) -> re.Pattern:
    """
    Compile a shell-style glob into a case-insensitive regex.

    Raises:
        GlobError: For empty, absolute or parent-escaping patterns, or
            patterns the regex engine rejects.
    """
    if not pattern:
        raise GlobError("Match pattern must not be empty")
    if "\x00" in pattern:
        raise GlobError(f"Match pattern contains a NUL byte: {pattern!r}")

    parts = PurePosixPath(pattern).parts
    if pattern.startswith("/") or ".." in parts:
        raise GlobError(f"Match pattern must be relative to the base directory: '{pattern}'")

    try:
        return re.compile(fnmatch.translate(pattern), re.IGNORECASE)
    except re.error as e:
        raise GlobError(f"Invalid match pattern '{pattern}': {e}") from e


def _matches(regex: re.Pattern, pattern: str, path: Path, root: Path) -> bool:
    # Bare patterns match on the file name at any depth; patterns with a
    # separator match the path relative to the walk root.
    if "/" in pattern:
        target = path.relative_to(root).as_posix()
    else:
        target = path.name
    return regex.match(target) is not None


def _is_regular_file(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError as e:
        print_warning(f"Skipping entry due to error: {path} ({e})")
        return False


def _walk_matches(root: Path, regex: re.Pattern, pattern: str, recursive: bool):
    """
    Yield matching regular files under root.

    Args:
        root: Directory to walk.
        regex: Compiled pattern.
        pattern: Original glob, used to pick name vs relative-path matching.
        recursive: Descend into subdirectories if True.

    Yields:
        Paths to matching files.
    """
    def on_error(err: OSError):
        print_warning(f"Skipping entry due to error: {err}")

    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        if not recursive:
            dirnames[:] = []

        for filename in filenames:
            filepath = Path(dirpath) / filename
            if not _matches(regex, pattern, filepath, root):
                continue
            if _is_regular_file(filepath):
                yield filepath


def _prefixed_folders(base: Path, prefix: str) -> list[Path]:
    """List immediate subdirectories of base whose name starts with prefix."""
    folders = []
    try:
        with os.scandir(base) as it:
            for entry in it:
                try:
                    if entry.name.startswith(prefix) and entry.is_dir():
                        folders.append(base / entry.name)
                except OSError as e:
                    print_warning(f"Skipping entry due to error: {entry.path} ({e})")
    except OSError as e:
        print_warning(f"Skipping redo scan of {base}: {e}")
    return sorted(folders)


def collect_files(
    base: str | Path,
    pattern: str,
    recursive: bool,
    prefix: str,
) -> list[Path]:
    """
    Collect files matching pattern under base, plus files inside existing
    prefix-named folders so a previous distribution can be redone.

    Args:
        base: Base directory (relative paths and "." are fine).
        pattern: Shell-style glob, matched case-insensitively.
        recursive: Match at any depth instead of immediate children only.
        prefix: Destination folder prefix used to find earlier output.

    Returns:
        Unique absolute file paths sorted by path string.

    Raises:
        PathError: If base cannot be resolved or is not a directory.
        GlobError: If the pattern is malformed.
        FilesystemError: If base cannot be listed at all.
    """
    root = resolve_base(base)
    regex = compile_pattern(pattern)

    try:
        with os.scandir(root):
            pass
    except OSError as e:
        raise FilesystemError(f"Failed to read directory {root}: {e}") from e

    seen: set[Path] = set()
    files: list[Path] = []

    for path in _walk_matches(root, regex, pattern, recursive):
        if path not in seen:
            seen.add(path)
            files.append(path)

    # Redo: pick up earlier output one level deep
    for folder in _prefixed_folders(root, prefix):
        for path in _walk_matches(folder, regex, pattern, recursive=False):
            if path not in seen:
                seen.add(path)
                files.append(path)

    files.sort(key=str)
    return files
