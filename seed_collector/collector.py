"""Orchestrates one collection run: choose folder, read seeds, publish."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

from .clipboard import ClipboardOutcome, copy_to_clipboard
from .config import CollectorConfig
from .discovery import SUPPORTED_EXTENSIONS, discover_candidates
from .errors import NoDirectorySelected
from .extraction import SeedCollection, aggregate
from .interaction import FOLDER_DIALOG_TITLE, InteractionProvider
from .metadata import MetadataProvider, create_provider


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_FOLDER = 1
EXIT_NO_SEEDS = 2
EXIT_CLIPBOARD_FAILED = 3

NO_FOLDER_MESSAGE = "No folder selected. Exiting."
NO_SEEDS_MESSAGE = "No valid seeds found in the folder."


class RunState(Enum):
    SELECTING_FOLDER = "selecting folder"
    DISCOVERING = "discovering"
    EXTRACTING = "extracting and aggregating"
    PUBLISHING = "publishing"
    FINISHED = "finished"


@dataclass(slots=True)
class RunResult:
    """Everything a caller needs to know about a finished run."""

    exit_status: int
    directory: Optional[Path] = None
    collection: Optional[SeedCollection] = None
    clipboard: Optional[ClipboardOutcome] = None

    @property
    def output(self) -> str:
        return self.collection.output if self.collection is not None else ""


class SeedCollector:
    """Collect the seeds of every image in a folder and publish them.

    The collector only talks to the outside world through the interaction
    provider, the metadata provider and the clipboard callable, so tests can
    substitute all three.
    """

    def __init__(
        self,
        interaction: InteractionProvider,
        config: Optional[CollectorConfig] = None,
        provider: Optional[MetadataProvider] = None,
        clipboard: Callable[[str], ClipboardOutcome] = copy_to_clipboard,
    ) -> None:
        self.interaction = interaction
        self.config = (config or CollectorConfig()).clamp()
        self.provider = provider or create_provider(self.config.reader, timeout=self.config.timeout)
        self.clipboard = clipboard
        self.state = RunState.SELECTING_FOLDER

    def _enter(self, state: RunState) -> None:
        logger.debug("State: %s -> %s", self.state.value, state.value)
        self.state = state

    # Public API ---------------------------------------------------------
    def select_directory(self) -> Path:
        """Ask for the target folder.

        Raises:
            NoDirectorySelected: After notifying the user, when nothing usable
                was chosen.
        """

        folder = self.interaction.select_directory(FOLDER_DIALOG_TITLE)
        if folder is None:
            self.interaction.notify_error("No folder selected", NO_FOLDER_MESSAGE)
            raise NoDirectorySelected(NO_FOLDER_MESSAGE)

        folder = Path(folder).expanduser().resolve()
        if not folder.is_dir():
            message = f"The folder {folder} does not exist or is not a directory."
            self.interaction.notify_error("Folder not found", message)
            raise NoDirectorySelected(message)
        return folder

    def collect(self, folder: Path) -> SeedCollection:
        """Discover candidates under ``folder`` and aggregate their seeds."""

        self._enter(RunState.DISCOVERING)
        candidates = discover_candidates(folder)
        logger.info(
            "Found %d candidate image(s) in %s (%s)",
            len(candidates),
            folder,
            ", ".join(sorted(SUPPORTED_EXTENSIONS)),
        )

        self._enter(RunState.EXTRACTING)
        collection = aggregate(
            candidates,
            self.provider,
            workers=self.config.workers,
            all_occurrences=self.config.all_seeds,
        )
        logger.info(
            "Extracted %d seed(s) from %d of %d file(s)",
            len(collection.values),
            collection.matched_files,
            collection.scanned,
        )
        return collection

    def publish(self, output: str) -> Optional[ClipboardOutcome]:
        """Deliver ``output`` to the clipboard and notify the user.

        Returns the clipboard outcome, or ``None`` when the clipboard was not
        touched (empty output or clipboard disabled).
        """

        self._enter(RunState.PUBLISHING)
        if not output:
            self.interaction.notify_error("No seeds found", NO_SEEDS_MESSAGE)
            return None

        if not self.config.use_clipboard:
            self.interaction.notify_info("Seeds found", output)
            return None

        outcome = self.clipboard(output)
        if not outcome.copied and self.config.check_clipboard:
            self.interaction.notify_warning(
                "Clipboard unavailable",
                f"Seeds were found but could not be copied to the clipboard:\n{output}\n\n"
                f"Reason: {outcome.error}",
            )
        else:
            self.interaction.notify_info("Seeds copied", f"Seeds copied to clipboard:\n{output}")
        return outcome

    def run(self) -> RunResult:
        """Run the whole flow once and return its result."""

        self.state = RunState.SELECTING_FOLDER
        try:
            folder = self.select_directory()
        except NoDirectorySelected as exc:
            logger.info("%s", exc)
            return RunResult(exit_status=EXIT_NO_FOLDER)

        collection = self.collect(folder)
        outcome = self.publish(collection.output)
        self._enter(RunState.FINISHED)

        status = EXIT_OK
        if not collection and self.config.fail_on_empty:
            status = EXIT_NO_SEEDS
        elif outcome is not None and not outcome.copied and self.config.check_clipboard:
            status = EXIT_CLIPBOARD_FAILED

        return RunResult(
            exit_status=status,
            directory=folder,
            collection=collection,
            clipboard=outcome,
        )
