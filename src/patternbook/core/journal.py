"""Journal domain logic - no I/O dependencies."""


class EntryCounter:
    """
    Issues entry sequence numbers, starting at 1.

    Share one instance between journals to number their entries as a single
    sequence. Not thread-safe.
    """

    def __init__(self, start: int = 1):
        self._next = start

    def next(self) -> int:
        value = self._next
        self._next += 1
        return value


class Journal:
    """A titled, append-only list of numbered entries."""

    def __init__(self, title: str, counter: EntryCounter | None = None):
        self._title = title
        self._counter = counter or EntryCounter()
        self.entries: list[str] = []

    @property
    def title(self) -> str:
        return self._title

    def add_entry(self, text: str) -> str:
        """Append "<n>: <text>" and return the stored entry."""
        entry = f"{self._counter.next()}: {text}"
        self.entries.append(entry)
        return entry

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return f"Journal(title={self._title!r}, entries={len(self.entries)})"
