"""
Copier: duplicate a file into the output tree at its mirrored path.

    <output_root>/<path relative to its own root>
"""
import shutil
from pathlib import Path

from class_collector.errors import CopyError


def copy_mirrored(src: Path, src_root: Path, output_root: Path) -> Path:
    """
    Copy *src* to ``output_root / src.relative_to(src_root)``.

    Parent directories are created as needed.  Returns the target path.

    Raises
    ------
    CopyError
        If the target directory cannot be created or the copy fails.
    """
    target = output_root / src.relative_to(src_root)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy(src, target)
    except OSError as e:
        raise CopyError(f"Failed to copy {src} -> {target} ({e})", src) from e
    return target


def file_size(path: Path) -> int:
    """Size of *path* in bytes; a stat failure is a copy failure."""
    try:
        return path.stat().st_size
    except OSError as e:
        raise CopyError(f"Cannot read file metadata: {path} ({e})", path) from e
