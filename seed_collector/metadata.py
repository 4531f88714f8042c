"""Readers for the generation-parameters text embedded in image files."""
from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from struct import error as struct_error
from typing import Any, Optional, Protocol

import piexif
import piexif.helper
from PIL import Image

from .config import DEFAULT_TIMEOUT


logger = logging.getLogger(__name__)

# PNG text chunk written by A1111/Forge style front-ends.
PARAMETERS_KEY = "parameters"

SEED_LABEL = "Seed: "


class MetadataProvider(Protocol):
    """Return the embedded parameter text for ``path`` or ``""`` when unavailable."""

    def read_parameters(self, path: Path) -> str:
        ...


def _bytes_to_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="ignore")
    if isinstance(value, str):
        return value
    return str(value)


def _user_comment(exif_bytes: Optional[bytes]) -> str:
    """Decode the EXIF ``UserComment`` field from raw EXIF bytes."""

    if not exif_bytes:
        return ""
    exif = piexif.load(exif_bytes).get("Exif", {})
    raw = exif.get(piexif.ExifIFD.UserComment)
    if not raw:
        return ""
    return piexif.helper.UserComment.load(raw)


class PillowMetadataProvider:
    """Read parameter text with Pillow, falling back to EXIF via piexif.

    The sources are the PNG ``parameters`` chunk, an image comment (JPEG
    ``COM`` segment) and the EXIF ``UserComment``, checked in that order. The
    first one carrying a ``Seed:`` label wins; otherwise the first non-empty
    one is returned.
    """

    def read_parameters(self, path: Path) -> str:
        try:
            with Image.open(path) as image:
                # PNG text chunks stored after the image data only show up in
                # ``info`` once the image has been loaded.
                try:
                    image.load()
                except (OSError, ValueError) as exc:
                    logger.debug("Could not decode %s: %s", path, exc)
                info = dict(image.info)
        except (OSError, ValueError) as exc:
            logger.debug("Could not open %s: %s", path, exc)
            return ""

        sources = [_bytes_to_str(info.get(key)) for key in (PARAMETERS_KEY, "comment")]
        try:
            sources.append(_user_comment(info.get("exif")))
        except (OSError, ValueError, KeyError, struct_error) as exc:
            logger.debug("Unreadable EXIF in %s: %s", path, exc)

        texts = [text for text in sources if text]
        for text in texts:
            if SEED_LABEL in text:
                return text
        return texts[0] if texts else ""


class IdentifyMetadataProvider:
    """Ask ImageMagick's ``identify`` for the ``parameters`` property.

    Each call runs one ``identify`` process bounded by ``timeout`` seconds. A
    timeout, a non-zero exit status or a missing executable all yield ``""``.
    """

    def __init__(self, executable: str = "identify", timeout: float = DEFAULT_TIMEOUT) -> None:
        self.executable = executable
        self.timeout = timeout

    def read_parameters(self, path: Path) -> str:
        command = [self.executable, "-format", f"%[{PARAMETERS_KEY}]", str(path)]
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                errors="replace",
                check=False,
                timeout=self.timeout,
            )
        except FileNotFoundError:
            logger.warning("%s is not installed or not found in the system PATH.", self.executable)
            return ""
        except subprocess.TimeoutExpired:
            logger.debug("Timed out after %.1fs reading %s", self.timeout, path)
            return ""

        if result.returncode != 0:
            logger.debug("%s failed on %s: %s", self.executable, path, result.stderr.strip())
            return ""
        return result.stdout


def create_provider(name: str, *, timeout: float = DEFAULT_TIMEOUT) -> MetadataProvider:
    """Return the metadata provider registered under ``name``."""

    if name == "pillow":
        return PillowMetadataProvider()
    if name == "identify":
        return IdentifyMetadataProvider(timeout=timeout)
    raise ValueError(f"Unknown metadata reader: {name}")
