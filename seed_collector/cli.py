"""Command-line entry point for the seed collector."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from .config import READERS, CollectorConfig
from .logging_config import configure_logging


NO_DISPLAY_MESSAGE = (
    "No display detected. Provide --input to scan a folder in headless mode "
    "or re-run with --force-gui after configuring a display server."
)


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sd-seeds",
        description=(
            "Collect the Stable Diffusion seeds embedded in the images of a folder "
            "and copy them to the clipboard as a comma-separated list."
        ),
    )
    parser.add_argument(
        "--input",
        "-i",
        type=Path,
        help="Folder to scan without showing the folder dialog (headless mode).",
    )
    parser.add_argument(
        "--reader",
        choices=READERS,
        default="pillow",
        help="Metadata reader: Pillow/piexif or ImageMagick 'identify' (default pillow).",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Number of files read in parallel (default 1).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Seconds allowed per file for the 'identify' reader (default 30).",
    )
    parser.add_argument(
        "--all-seeds",
        action="store_true",
        help="Collect every 'Seed:' label in a file instead of only the first.",
    )
    parser.add_argument(
        "--no-clipboard",
        action="store_true",
        help="Report the seeds without touching the clipboard.",
    )
    parser.add_argument(
        "--no-check-clipboard",
        action="store_true",
        help="Report success even if the clipboard write fails.",
    )
    parser.add_argument(
        "--fail-on-empty",
        action="store_true",
        help="Exit with status 2 when no seeds are found.",
    )
    parser.add_argument(
        "--force-gui",
        action="store_true",
        help="Attempt to show dialogs even if no display is detected.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Increase log output (-v for progress, -vv for per-file details).",
    )
    return parser.parse_args(argv)


def _build_config(args: argparse.Namespace) -> CollectorConfig:
    config = CollectorConfig()
    updates = {
        "reader": args.reader,
        "workers": args.workers,
        "all_seeds": args.all_seeds,
        "use_clipboard": not args.no_clipboard,
        "check_clipboard": not args.no_check_clipboard,
        "fail_on_empty": args.fail_on_empty,
    }
    if args.timeout is not None:
        updates["timeout"] = args.timeout
    config.update(**updates)
    return config


def _format_dependency_message(exc: ModuleNotFoundError) -> str:
    missing = exc.name or "a required library"
    packages = {"PIL": "pillow", "piexif": "piexif", "pyperclip": "pyperclip"}
    if missing in packages:
        return (
            f"The {missing} library is required to collect seeds. "
            f"Install it with `pip install {packages[missing]}` and try again."
        )
    return (
        "A required dependency could not be imported. "
        "Install the missing package and try again."
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    configure_logging(level)

    try:
        from .collector import SeedCollector
    except ModuleNotFoundError as exc:
        raise SystemExit(_format_dependency_message(exc)) from exc

    from .interaction import ConsoleInteraction, TkInteraction, display_available

    config = _build_config(args)
    gui_errors: tuple[type[BaseException], ...] = ()

    if args.input is not None:
        interaction = ConsoleInteraction(args.input)
    else:
        if not args.force_gui and not display_available():
            raise SystemExit(NO_DISPLAY_MESSAGE)
        import tkinter as tk

        gui_errors = (tk.TclError,)
        interaction = TkInteraction()

    try:
        result = SeedCollector(interaction, config).run()
    except gui_errors as exc:
        raise SystemExit(NO_DISPLAY_MESSAGE) from exc
    finally:
        interaction.close()
    return result.exit_status


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
