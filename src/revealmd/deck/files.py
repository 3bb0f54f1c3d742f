"""Validate presentation files and derive the source directory."""

from __future__ import annotations

import errno
import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class DeckFiles:
    """Markdown files of one presentation, all from a single directory."""

    root: Path
    filenames: list[str] = field(default_factory=list)


def resolve_files(files: list[str] | list[Path]) -> DeckFiles:
    """Check every file and collect them under their shared directory.

    Args:
        files: Paths as given on the command line, in presentation order.

    Returns:
        DeckFiles with the resolved parent directory and base names.

    Raises:
        ValueError: If no files are given, or they span several directories.
        FileNotFoundError: If a file does not exist.
        IsADirectoryError: If a path names a directory.
    """
    if not files:
        raise ValueError("no presentation files given")

    root: Path | None = None
    filenames: list[str] = []

    for file in files:
        path = Path(file)
        if not path.exists():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(file))
        if path.is_dir():
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), str(file))

        # Resolve the directory, not the file: a symlinked deck is served by its own name
        parent = path.absolute().parent.resolve()
        if root is not None and parent != root:
            raise ValueError("presentation files must be in the same directory")
        root = parent
        filenames.append(path.name)

    return DeckFiles(root=root, filenames=filenames)
