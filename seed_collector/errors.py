"""Exceptions raised by the seed collector."""
from __future__ import annotations


class SeedCollectorError(Exception):
    """Base class for collector failures."""


class NoDirectorySelected(SeedCollectorError):
    """The user cancelled the folder dialog or picked something unusable."""


class ClipboardUnavailable(SeedCollectorError):
    """The system clipboard could not be written."""
