"""
Tree scanner: enumerate a source tree and split it into Java sources
and everything else.

Traversal is depth-first with siblings in sorted name order, so two scans
of the same tree report files in the same order.  Symlinked directories
are not descended into.
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from class_collector.errors import MissingRoot, TraversalError
from class_collector.policy.profile import Profile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanResult:
    """Regular files under a root, partitioned by source suffix."""

    root: Path
    source_units: Tuple[Path, ...]
    other_files: Tuple[Path, ...]


def _list_dir(directory: Path) -> List[Path]:
    try:
        return sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise TraversalError(f"Cannot read directory: {directory} ({e})", directory) from e


def _walk(directory: Path, sources: List[Path], others: List[Path], suffix: str) -> None:
    for entry in _list_dir(directory):
        if entry.is_dir() and not entry.is_symlink():
            _walk(entry, sources, others, suffix)
        elif entry.is_file():
            if entry.suffix == suffix:
                sources.append(entry)
            else:
                others.append(entry)
        else:
            logger.debug("Skipping non-regular entry: %s", entry)


def scan_tree(root: str | Path, profile: Profile | None = None) -> ScanResult:
    """
    Recursively collect every regular file under *root*.

    Raises
    ------
    MissingRoot
        If *root* is not a directory.
    TraversalError
        If any directory beneath it cannot be read.  Scanning is
        all-or-nothing.
    """
    if profile is None:
        profile = Profile.v0()

    root = Path(root)
    if not root.is_dir():
        raise MissingRoot(f"Source directory does not exist: {root}", root)

    sources: List[Path] = []
    others: List[Path] = []
    _walk(root, sources, others, profile.source_suffix)

    logger.info(
        "Found %d %s source files and %d other files under %s",
        len(sources), profile.source_suffix, len(others), root,
    )
    return ScanResult(root=root, source_units=tuple(sources), other_files=tuple(others))
