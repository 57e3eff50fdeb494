"""internals.py - Filesystem and clock helpers shared by the logger.

These helpers hold no state. The logger calls them to locate the project root
(the base of the log directory), to create directories, and to render the date
and time fragments used in log lines and file names.
"""

import logging
import os
from datetime import datetime
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

DEFAULT_ROOT_MARKERS = ("pyproject.toml", "setup.py", "setup.cfg", ".git")


class LogifyError(Exception):
    """Base class for every error raised by logify."""


class RootNotFoundError(LogifyError, FileNotFoundError):
    """No ancestor directory carries a project marker."""

    def __init__(self, start_dir: str, markers: Iterable[str]) -> None:
        self.start_dir = start_dir
        self.markers = tuple(markers)
        super().__init__(
            f"Unable to find project root from {start_dir!r} "
            f"(none of {', '.join(self.markers)} found)"
        )


def find_project_root(
    start_dir: Optional[str] = None,
    markers: Iterable[str] = DEFAULT_ROOT_MARKERS,
) -> str:
    """Walk upward from ``start_dir`` to the nearest directory holding a marker.

    Args:
        start_dir: Directory to start from. Defaults to the current working
            directory.
        markers: File or directory names whose presence identifies a project
            root. The first directory containing any of them wins.

    Returns:
        The absolute path of the project root.

    Raises:
        RootNotFoundError: If the filesystem root is reached without a match.
    """
    markers = tuple(markers)
    current = os.path.abspath(start_dir or os.getcwd())
    while True:
        if any(os.path.exists(os.path.join(current, m)) for m in markers):
            logger.debug("resolved project root %s", current)
            return current
        parent = os.path.dirname(current)
        if parent == current:
            raise RootNotFoundError(os.path.abspath(start_dir or os.getcwd()), markers)
        current = parent


def ensure_dir(path: str) -> None:
    """Create ``path`` and any missing parents. Existing directories are left untouched."""
    if not os.path.isdir(path):
        logger.debug("creating directory %s", path)
    os.makedirs(path, exist_ok=True)


def format_date(delimiter: str = "-", date: Optional[datetime] = None) -> str:
    """Return ``date`` (default: now) as zero-padded ``YYYY<d>MM<d>DD``."""
    date = date or datetime.now()
    return f"{date.year:04d}{delimiter}{date.month:02d}{delimiter}{date.day:02d}"


def format_time(date: Optional[datetime] = None) -> str:
    """Return ``date`` (default: now) as zero-padded ``HH:MM:SS`` local time."""
    date = date or datetime.now()
    return f"{date.hour:02d}:{date.minute:02d}:{date.second:02d}"
