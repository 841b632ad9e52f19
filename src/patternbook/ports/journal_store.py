"""Journal storage interface."""

from pathlib import Path
from typing import Protocol

from patternbook.core.journal import Journal


class JournalStore(Protocol):
    """Interface for persisting journals, kept apart from the journal itself."""

    def save(self, journal: Journal, destination: Path | str) -> None:
        """Write/overwrite the journal's entries at destination."""
        ...

    def load(self, source: Path | str) -> list[str]:
        """Read back the entries stored at source."""
        ...
