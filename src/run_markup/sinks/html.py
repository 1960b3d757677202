"""XHTML markup sink writing to a text stream."""

from typing import Iterable, Optional, TextIO

from run_markup.sinks.base import MarkupSink, SinkError


XHTML_NAMESPACE = "http://www.w3.org/1999/xhtml"


class XHTMLSink(MarkupSink):
    """Serialize markup events as XHTML.

    Writes elements and escaped character data straight to ``stream``.
    Use ``start_document``/``end_document`` to wrap the output in a
    complete page, or skip them to produce a fragment.

    Args:
        stream: Text stream receiving the markup
        block_tags: Element names followed by a line break when closed
    """

    def __init__(self, stream: TextIO, block_tags: Iterable[str] = ()) -> None:
        self.stream = stream
        self.block_tags = frozenset(block_tags)
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def start_document(self, title: Optional[str] = None) -> None:
        """Write the page header up to the opening body tag."""
        self._write(f'<html xmlns="{XHTML_NAMESPACE}">\n<head>\n')
        if title:
            self._write(f"<title>{self._escape_html(title)}</title>\n")
        self._write("</head>\n<body>\n")

    def end_document(self) -> None:
        """Write the closing body and html tags."""
        self._write("</body>\n</html>\n")

    def open_tag(self, name: str) -> None:
        self._write(f"<{name}>")

    def close_tag(self, name: str) -> None:
        self._write(f"</{name}>")
        if name in self.block_tags:
            self._write("\n")

    def characters(self, text: str) -> None:
        self._write(self._escape_html(text))

    def close(self) -> None:
        """Refuse all further events. The stream itself is left open."""
        self._closed = True

    def _write(self, data: str) -> None:
        if self._closed:
            raise SinkError("Cannot write to a closed sink")
        self.stream.write(data)

    def _escape_html(self, text: str) -> str:
        """Escape character data for XHTML output."""
        return (
            text.replace("&", "&amp;")
            .replace("<", "&lt;")
            .replace(">", "&gt;")
            .replace('"', "&quot;")
        )
