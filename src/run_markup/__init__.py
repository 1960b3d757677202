"""Run Markup - inline formatting tags from word-processing character runs."""

__version__ = "0.1.0"
