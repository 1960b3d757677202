"""Sink that records events instead of writing them."""

from run_markup.sinks.base import MarkupSink

OPEN = "open"
CLOSE = "close"
TEXT = "text"


class RecordingSink(MarkupSink):
    """Keep every event in memory, in order.

    Events are ``(kind, value)`` tuples where kind is one of ``"open"``,
    ``"close"`` or ``"text"``. Callers that want all-or-nothing output
    for a run can record into this sink and ``replay`` on success.
    """

    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    def open_tag(self, name: str) -> None:
        self.events.append((OPEN, name))

    def close_tag(self, name: str) -> None:
        self.events.append((CLOSE, name))

    def characters(self, text: str) -> None:
        self.events.append((TEXT, text))

    def replay(self, target: MarkupSink) -> None:
        """Send all recorded events to ``target`` in order."""
        for kind, value in self.events:
            if kind == OPEN:
                target.open_tag(value)
            elif kind == CLOSE:
                target.close_tag(value)
            else:
                target.characters(value)

    def clear(self) -> None:
        """Forget all recorded events."""
        self.events.clear()
