"""System clipboard access."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import pyperclip

from .errors import ClipboardUnavailable


logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ClipboardOutcome:
    """Result of a clipboard write."""

    copied: bool
    error: Optional[str] = None


def write_clipboard(text: str) -> None:
    """Replace the clipboard text with ``text``.

    Raises:
        ClipboardUnavailable: If no clipboard mechanism could store the text.
    """

    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        raise ClipboardUnavailable(str(exc)) from exc


def copy_to_clipboard(text: str) -> ClipboardOutcome:
    """Write ``text`` to the clipboard and report whether it worked."""

    try:
        write_clipboard(text)
    except ClipboardUnavailable as exc:
        logger.warning("Clipboard write failed: %s", exc)
        return ClipboardOutcome(copied=False, error=str(exc))
    logger.debug("Copied %d characters to the clipboard", len(text))
    return ClipboardOutcome(copied=True)
