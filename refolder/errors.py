"""
Exception hierarchy for refolder.

The library raises these; the CLI catches RefolderError and maps it to an
exit code.
"""


class RefolderError(Exception):
    """Base error for the project."""


class InvalidArgument(RefolderError, ValueError):
    """Bad caller input: zero subfolders, unknown suffix style."""


class PathError(RefolderError):
    """Base path is missing, not a directory, or cannot be resolved."""


class GlobError(RefolderError):
    """Match pattern is malformed."""


class FilesystemError(RefolderError):
    """I/O failure while walking, creating, copying or deleting."""


class ConflictError(RefolderError):
    """Destination is occupied and may not be overwritten."""
