"""Run configuration for the seed collector."""
from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TIMEOUT = 30.0

READERS = ("pillow", "identify")


@dataclass(slots=True)
class CollectorConfig:
    """Options that control a collection run."""

    reader: str = "pillow"
    workers: int = 1
    timeout: float = DEFAULT_TIMEOUT
    all_seeds: bool = False
    use_clipboard: bool = True
    check_clipboard: bool = True
    fail_on_empty: bool = False

    def clamp(self) -> "CollectorConfig":
        """Clamp values to practical ranges and return ``self`` for chaining."""

        self.workers = min(max(int(self.workers), 1), 32)
        self.timeout = min(max(float(self.timeout), 1.0), 600.0)
        if self.reader not in READERS:
            raise ValueError(f"Unknown metadata reader: {self.reader}")
        return self

    def update(self, **kwargs: object) -> None:
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)
        self.clamp()
