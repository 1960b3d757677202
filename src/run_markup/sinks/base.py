"""Abstract base class for markup sinks."""

from abc import ABC, abstractmethod


class SinkError(Exception):
    """A sink could not accept a markup event."""

    pass


class MarkupSink(ABC):
    """Streaming receiver of markup events.

    Events are delivered one at a time, in document order, and are never
    buffered by the caller. Any method may raise to abort the document.
    """

    @abstractmethod
    def open_tag(self, name: str) -> None:
        """Start an element.

        Args:
            name: Element name (e.g. "b", "sup", "p")
        """
        ...

    @abstractmethod
    def close_tag(self, name: str) -> None:
        """End the most recently started element called ``name``."""
        ...

    @abstractmethod
    def characters(self, text: str) -> None:
        """Emit character data inside the current element."""
        ...
