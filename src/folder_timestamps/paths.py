"""Path normalization helpers for scan roots."""

from __future__ import annotations

import os
import re
from typing import Final

ABSOLUTE_PATTERN: Final[re.Pattern[str]] = re.compile(r"^([a-zA-Z]:)?[\\/]")


def unify_separators(
    path: str, sep: str = os.sep, altsep: str | None = os.altsep
) -> str:
    """Rewrite every host path separator in ``path`` to ``sep``."""
    if altsep is None:
        return path
    return path.replace(altsep, sep)


def is_absolute_style(path: str) -> bool:
    """Return True for POSIX, Windows drive, and UNC absolute forms."""
    return os.path.isabs(path) or ABSOLUTE_PATTERN.match(path) is not None


def normalize_path(path: str) -> str:
    """Return ``path`` as an absolute, symlink-resolved, host-separated string.

    When the path cannot be resolved, relative input is joined onto the
    current working directory without symlink resolution.
    """
    try:
        resolved = os.path.realpath(path, strict=True)
    except OSError:
        resolved = path
        if not is_absolute_style(path):
            resolved = os.path.join(os.getcwd(), path)
    return unify_separators(resolved)


def is_valid_directory(path: str) -> bool:
    """Return True when ``path`` exists and is a directory."""
    if not path:
        return False
    return os.path.isdir(path)
