"""Markup sinks receiving open/close/characters events."""

from run_markup.sinks.base import MarkupSink, SinkError
from run_markup.sinks.html import XHTMLSink
from run_markup.sinks.recording import RecordingSink

__all__ = [
    "MarkupSink",
    "SinkError",
    "XHTMLSink",
    "RecordingSink",
]
