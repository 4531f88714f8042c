"""Locate image files that may carry generation parameters."""
from __future__ import annotations

from pathlib import Path
from typing import List


SUPPORTED_EXTENSIONS = {".png", ".jpg", ".jpeg", ".bmp"}


def is_candidate(path: Path) -> bool:
    """Return ``True`` if ``path`` has one of the supported image extensions."""

    return path.suffix.lower() in SUPPORTED_EXTENSIONS


def discover_candidates(folder: Path) -> List[Path]:
    """Return supported images inside ``folder`` and its subfolders.

    Paths are sorted so the discovery order is stable between runs over an
    unchanged folder. An empty list is returned when nothing matches.
    """

    return sorted(path for path in folder.rglob("*") if path.is_file() and is_candidate(path))
