"""Candidate file filtering.

A path qualifies for scanning when its extension is one of the configured
extensions and it does not start with any ignored prefix.

The ignore test is a raw string prefix on the whole path, not a path-segment
match: an ignore entry ``vendor`` also excludes ``vendor2/lib.js``.
"""

import os
from typing import Collection, Iterable


def file_extension(path: str) -> str:
    """Return the extension of the final path segment, including the dot.

    Everything from the last ``.`` of the basename onward; a basename
    without a dot has no extension. ``.env`` therefore has extension ``.env``.
    """
    name = os.path.basename(path)
    index = name.rfind(".")
    if index < 0:
        return ""
    return name[index:]


def has_extension(path: str, extensions: Collection[str]) -> bool:
    """Check the extension against the allow-list (case-sensitive)."""
    return file_extension(path) in extensions


def is_ignored(path: str, ignored_dirs: Iterable[str]) -> bool:
    """Check whether the path starts with any ignored prefix."""
    # An empty entry (e.g. from "-ignore ''") would match every path.
    return any(prefix and path.startswith(prefix) for prefix in ignored_dirs)


def is_candidate(
    path: str,
    extensions: Collection[str],
    ignored_dirs: Iterable[str],
) -> bool:
    """Return True if the file should be scanned."""
    return has_extension(path, extensions) and not is_ignored(path, ignored_dirs)
