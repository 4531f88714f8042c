"""Launch the seed collector without installing the package."""
from __future__ import annotations

from seed_collector.cli import main


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
