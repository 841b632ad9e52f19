"""File-based journal storage adapter."""

import logging
from pathlib import Path

from patternbook.core.journal import Journal

logger = logging.getLogger(__name__)

ENCODING = "utf-8"
# Undecodable argv bytes arrive as lone surrogates; write them back as bytes
ERRORS = "surrogateescape"


class FileJournalStore:
    """
    Plain-text journal storage.

    Implements JournalStore protocol. One entry per "\\n"-terminated line, no
    header or escaping. Entries containing "\\n" do not load back intact.
    """

    def save(self, journal: Journal, destination: Path | str) -> None:
        """
        Write/overwrite the journal's entries, one per line.

        Raises OSError if the destination cannot be opened, or
        UnicodeEncodeError if an entry cannot be encoded. Nothing is written
        in either case.
        """
        path = Path(destination).expanduser()
        content = "".join(f"{entry}\n" for entry in journal.entries)
        try:
            data = content.encode(ENCODING, ERRORS)
            path.write_bytes(data)
        except (OSError, UnicodeEncodeError) as e:
            logger.error(f"Failed to save journal {journal.title!r} to {path}: {e}")
            raise
        logger.debug(f"Saved {len(journal.entries)} entries to {path}")

    def load(self, source: Path | str) -> list[str]:
        """Read entries back from a saved journal file."""
        path = Path(source).expanduser()
        lines = path.read_bytes().decode(ENCODING, ERRORS).split("\n")
        if lines[-1] == "":
            lines.pop()
        return lines
