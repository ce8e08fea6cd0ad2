"""Icon set discovery on the local filesystem."""

from __future__ import annotations

from pathlib import Path

from .errors import FilesystemError


def list_subdirectories(path: str | Path) -> list[str]:
    """Names of the visible subdirectories of path, sorted."""
    root = Path(path)
    try:
        return sorted(
            entry.name
            for entry in root.iterdir()
            if entry.is_dir() and not entry.name.startswith(".")
        )
    except OSError as exc:
        raise FilesystemError(str(root), exc.strerror or str(exc)) from exc
