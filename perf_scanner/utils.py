"""
Utility functions for the performance scanner.
"""

import os
from pathlib import Path
from typing import Iterable, Iterator, Sequence

from .constants import KB, MB


def _is_excluded_dir(name: str, ignore_dirs: Iterable[str]) -> bool:
    return name in ignore_dirs or name.startswith('.')


def iter_files(
    root: Path,
    extensions: Sequence[str],
    ignore_dirs: Iterable[str] = (),
    ignore_name_markers: Sequence[str] = (),
) -> Iterator[Path]:
    """Yield files under root whose suffix is in extensions, in sorted order.

    Excluded and hidden directories are pruned during the walk, so large
    trees such as node_modules are never descended into. Walk errors on a
    subdirectory are ignored.
    """
    ignore_dirs = frozenset(ignore_dirs)
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if not _is_excluded_dir(d, ignore_dirs))
        for filename in sorted(filenames):
            if filename.startswith('.'):
                continue
            if any(marker in filename for marker in ignore_name_markers):
                continue
            path = Path(dirpath) / filename
            if path.suffix in extensions:
                yield path


def relative_posix(path: Path, root: Path) -> str:
    """Path relative to the project root, with forward slashes."""
    return path.relative_to(root).as_posix()


def format_size(size: int) -> str:
    """Human-readable byte count: B below 1KB, KB below 1MB, else MB."""
    if size < KB:
        return f"{size}B"
    if size < MB:
        return f"{size / KB:.1f}KB"
    return f"{size / MB:.1f}MB"


def read_source(path: Path) -> str:
    """Read a source file as UTF-8, replacing undecodable bytes. Raises OSError for the caller to skip."""
    return path.read_text(encoding='utf-8', errors='replace')
