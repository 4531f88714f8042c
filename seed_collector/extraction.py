"""Seed extraction and aggregation."""
from __future__ import annotations

import logging
import re
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from .metadata import SEED_LABEL, MetadataProvider


logger = logging.getLogger(__name__)

# ASCII digits only; ``\d`` would also accept other Unicode digit classes.
SEED_PATTERN = re.compile(re.escape(SEED_LABEL) + r"([0-9]+)")

SEPARATOR = ","


def find_seeds(text: str, *, all_occurrences: bool = False) -> List[str]:
    """Return the seed values labelled ``Seed: <digits>`` in ``text``.

    Only the first occurrence is returned unless ``all_occurrences`` is set.
    """

    if all_occurrences:
        return SEED_PATTERN.findall(text)
    match = SEED_PATTERN.search(text)
    return [match.group(1)] if match else []


@dataclass(slots=True)
class SeedCollection:
    """Seeds gathered from one folder, in discovery order."""

    values: List[str] = field(default_factory=list)
    scanned: int = 0
    matched_files: int = 0

    @property
    def output(self) -> str:
        return SEPARATOR.join(self.values)

    def __bool__(self) -> bool:
        return bool(self.values)


def _read_file(path: Path, provider: MetadataProvider, all_occurrences: bool) -> List[str]:
    try:
        text = provider.read_parameters(path)
    except Exception as exc:
        logger.warning("Metadata reader failed on %s: %s", path, exc)
        return []
    seeds = find_seeds(text, all_occurrences=all_occurrences)
    if seeds:
        logger.debug("%s -> %s", path, ", ".join(seeds))
    else:
        logger.debug("%s -> no seed", path)
    return seeds


def extract_seed(path: Path, provider: MetadataProvider) -> Optional[str]:
    """Return the first seed embedded in ``path`` or ``None``."""

    seeds = _read_file(path, provider, all_occurrences=False)
    return seeds[0] if seeds else None


def aggregate(
    candidates: Sequence[Path],
    provider: MetadataProvider,
    *,
    workers: int = 1,
    all_occurrences: bool = False,
) -> SeedCollection:
    """Extract seeds from ``candidates`` and keep them in candidate order.

    With more than one worker the files are read on a thread pool. Results are
    written into a slot per candidate and joined once every read has finished,
    so the output matches the sequential order.
    """

    slots: List[List[str]] = [[] for _ in candidates]

    if workers <= 1 or len(candidates) <= 1:
        for index, path in enumerate(candidates):
            slots[index] = _read_file(path, provider, all_occurrences)
    else:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {
                executor.submit(_read_file, path, provider, all_occurrences): index
                for index, path in enumerate(candidates)
            }
            for future in as_completed(futures):
                slots[futures[future]] = future.result()

    collection = SeedCollection(scanned=len(candidates))
    for seeds in slots:
        if seeds:
            collection.matched_files += 1
            collection.values.extend(seeds)
    return collection
