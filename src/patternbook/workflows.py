"""Shared workflow layer for the CLI.

Each function wires the pure core to its adapters and returns what the
caller should display.
"""

import logging
from pathlib import Path

from .adapters.file_journal import FileJournalStore
from .config import Config
from .core.html import HTMLBuilder, HTMLElement
from .core.journal import Journal
from .ports.journal_store import JournalStore

logger = logging.getLogger(__name__)

DEMO_ENTRIES = ["I cried today.", "I ate a bug."]


def write_journal(
    config: Config,
    entries: list[str],
    title: str | None = None,
    destination: Path | str | None = None,
    store: JournalStore | None = None,
) -> Journal:
    """
    Build a journal from entries and persist it.

    Without a destination the journal goes to the configured journal file,
    creating its directory. OSError and UnicodeEncodeError propagate.
    """
    journal = Journal(title if title is not None else config.journal_title)
    for text in entries:
        journal.add_entry(text)

    store = store or FileJournalStore()
    if destination:
        target = Path(destination).expanduser()
    else:
        target = config.journal_path
        target.parent.mkdir(parents=True, exist_ok=True)
    store.save(journal, target)
    logger.info(f"Wrote journal {journal.title!r} ({len(journal)} entries) to {target}")
    return journal


def run_journal_demo(config: Config) -> Path:
    """Save the two-entry demonstration journal and return where it went."""
    write_journal(config, DEMO_ENTRIES)
    return config.journal_path


def build_html(root: str, children: list[tuple[str, str]]) -> str:
    """Serialize `root` with one child element per (name, text) pair."""
    builder = HTMLBuilder(root)
    for name, text in children:
        builder.add_child(name, text)
    return builder.serialize()


# ============== Builder Demonstration ==============


def run_builder_demo() -> str:
    """Render the three ways of driving the HTML builder."""
    sections = []

    # Approach 1: one statement per child
    builder = HTMLBuilder("ul")
    builder.add_child("li", "Hello")
    builder.add_child("li", "World")
    sections.append(("Approach 1: Traditional Builder", builder.serialize()))

    # Approach 2: chained calls on the same builder
    fluent_builder = HTMLBuilder("ul")
    fluent_builder.add_child("li", "hello").add_child("li", "world")
    sections.append(("Approach 2: Fluent Interface", fluent_builder.serialize()))

    # Approach 3: static factory, finished into an element
    element = HTMLElement.build("ul").add_child("li", "First").add_child("li", "Second").build()
    sections.append(("Approach 3: Static Factory + Fluent", element.serialize()))

    logger.debug(f"Rendered {len(sections)} builder approaches")
    return "\n".join(f"=== {heading} ===\n{body}" for heading, body in sections)
