"""
Destination folder naming.
"""

import string

from ..errors import InvalidArgument

SUFFIX_STYLES = ("numbers", "letters", "none")


def index_to_letters(index: int) -> str:
    """Spreadsheet-column letters for a 1-based index: 1 -> a, 26 -> z, 27 -> aa."""
    if index < 1:
        raise InvalidArgument(f"Folder index must be at least 1, got {index}")

    letters = []
    i = index
    while i > 0:
        i -= 1
        i, rem = divmod(i, 26)
        letters.append(string.ascii_lowercase[rem])
    return "".join(reversed(letters))


def format_folder_name(prefix: str, index: int, suffix: str) -> str:
    """
    Build the destination folder name for a bucket.

    Args:
        prefix: Folder prefix, e.g. "group".
        index: 1-based bucket index.
        suffix: One of "numbers", "letters" or "none".

    Returns:
        "prefix-3", "prefix-c" or "prefix" respectively.

    Raises:
        InvalidArgument: For an unknown suffix style or an index below 1.
    """
    if suffix == "numbers":
        if index < 1:
            raise InvalidArgument(f"Folder index must be at least 1, got {index}")
        return f"{prefix}-{index}"
    if suffix == "letters":
        return f"{prefix}-{index_to_letters(index)}"
    if suffix == "none":
        return prefix
    raise InvalidArgument(
        f"Unknown suffix style '{suffix}'. Use {'|'.join(SUFFIX_STYLES)}"
    )
