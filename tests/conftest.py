"""Shared test fixtures for the seed collector."""

from pathlib import Path

import piexif
import piexif.helper
import pytest
from PIL import Image
from PIL.PngImagePlugin import PngInfo

A1111_PARAMETERS = (
    "a lighthouse on a cliff, golden hour\n"
    "Negative prompt: blurry, lowres\n"
    "Steps: 30, Sampler: DPM++ 2M Karras, CFG scale: 7, Seed: {seed}, "
    "Size: 512x768, Model hash: 6ce0161689, Model: v1-5-pruned-emaonly"
)


def parameters_for(seed):
    return A1111_PARAMETERS.format(seed=seed)


def make_png(path: Path, parameters: str | None = None) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    info = None
    if parameters is not None:
        info = PngInfo()
        info.add_text("parameters", parameters)
    Image.new("RGB", (8, 8), color=(40, 80, 120)).save(path, format="PNG", pnginfo=info)
    return path


def make_jpeg(path: Path, user_comment: str | None = None, comment: str | None = None) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    kwargs = {}
    if user_comment is not None:
        kwargs["exif"] = piexif.dump(
            {"Exif": {piexif.ExifIFD.UserComment: piexif.helper.UserComment.dump(user_comment, encoding="unicode")}}
        )
    if comment is not None:
        kwargs["comment"] = comment
    Image.new("RGB", (8, 8), color=(200, 10, 10)).save(path, format="JPEG", **kwargs)
    return path


def make_bmp(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGB", (8, 8)).save(path, format="BMP")
    return path


class FakeProvider:
    """Metadata provider backed by a ``{file name: text}`` mapping."""

    def __init__(self, texts=None, delays=None):
        self.texts = texts or {}
        self.delays = delays or {}
        self.calls = []

    def read_parameters(self, path):
        import time

        self.calls.append(path)
        delay = self.delays.get(path.name)
        if delay:
            time.sleep(delay)
        return self.texts.get(path.name, "")


class FakeInteraction:
    """Interaction provider that records every notification."""

    def __init__(self, directory=None):
        self.directory = directory
        self.messages = []
        self.closed = False

    def select_directory(self, title="Select a Folder"):
        self.messages.append(("select", title))
        return self.directory

    def notify_info(self, title, message):
        self.messages.append(("info", message))

    def notify_error(self, title, message):
        self.messages.append(("error", message))

    def notify_warning(self, title, message):
        self.messages.append(("warning", message))

    def close(self):
        self.closed = True

    def kinds(self):
        return [kind for kind, _ in self.messages if kind != "select"]


class FakeClipboard:
    def __init__(self, copied=True, error=None):
        from seed_collector.clipboard import ClipboardOutcome

        self.outcome = ClipboardOutcome(copied=copied, error=error)
        self.received = []

    def __call__(self, text):
        self.received.append(text)
        return self.outcome


@pytest.fixture
def seed_folder(tmp_path):
    """Folder matching the end-to-end scenario: one seeded PNG, one bare JPEG, one text file."""

    make_png(tmp_path / "a.png", "prompt text, Steps: 20, Seed: 42, Size: 512x512")
    make_jpeg(tmp_path / "b.jpg")
    (tmp_path / "c.txt").write_text("Seed: 99", encoding="utf-8")
    return tmp_path
