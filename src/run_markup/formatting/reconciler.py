"""Reconcile the open formatting tags with the tags a run needs.

The sink receives close events for tags that must go and open events for
tags that are missing. Markup must stay properly nested, so a tag can
only be closed once everything opened after it has been closed as well.
"""

from typing import AbstractSet, Iterable, Iterator

from run_markup.formatting.mapper import attribute_tags
from run_markup.formatting.runs import CharacterRun
from run_markup.formatting.tags import TAG_ORDER, Tag
from run_markup.sinks.base import MarkupSink


class FormattingState:
    """Stack of formatting tags currently open on a sink.

    Iteration goes from the outermost (first opened) tag to the innermost.
    A tag is never on the stack twice.
    """

    def __init__(self, tags: Iterable[Tag] = ()) -> None:
        self._stack: list[Tag] = []
        for tag in tags:
            self.push(tag)

    def push(self, tag: Tag) -> None:
        """Record ``tag`` as the new innermost open tag."""
        if tag in self._stack:
            raise ValueError(f"Tag already open: {tag.tag_name}")
        self._stack.append(tag)

    def pop(self) -> Tag:
        """Remove and return the innermost open tag."""
        if not self._stack:
            raise IndexError("pop from empty formatting state")
        return self._stack.pop()

    @property
    def top(self) -> Tag:
        """The innermost open tag."""
        if not self._stack:
            raise IndexError("empty formatting state has no top")
        return self._stack[-1]

    def contains_any(self, tags: AbstractSet[Tag]) -> bool:
        """Check whether any of ``tags`` is open, at any depth."""
        return any(tag in tags for tag in self._stack)

    def as_list(self) -> list[Tag]:
        """Copy of the stack, outermost first."""
        return list(self._stack)

    def __contains__(self, tag: object) -> bool:
        return tag in self._stack

    def __iter__(self) -> Iterator[Tag]:
        return iter(self._stack)

    def __len__(self) -> int:
        return len(self._stack)

    def __repr__(self) -> str:
        names = ", ".join(tag.tag_name for tag in self._stack)
        return f"FormattingState([{names}])"


def reconcile(
    desired: AbstractSet[Tag],
    state: FormattingState,
    sink: MarkupSink,
) -> None:
    """Bring ``state`` to exactly the ``desired`` tags.

    Tags are popped from the top while any undesired tag is still open
    anywhere on the stack, so desired tags nested above an undesired one
    are closed too. Missing tags are then opened in ``TAG_ORDER``.

    ``state`` is updated as each event is sent. If the sink raises, the
    error propagates and the changes made so far stay applied.

    Args:
        desired: Tags the next run needs (not modified)
        state: Currently open tags, updated in place
        sink: Receives close and open events
    """
    undesired = frozenset(TAG_ORDER) - desired

    while state and state.contains_any(undesired):
        sink.close_tag(state.pop().tag_name)

    for tag in TAG_ORDER:
        if tag in desired and tag not in state:
            state.push(tag)
            sink.open_tag(tag.tag_name)


def close_all(state: FormattingState, sink: MarkupSink) -> None:
    """Close every open tag, innermost first, leaving ``state`` empty."""
    reconcile(frozenset(), state, sink)


class RunFormatter:
    """Formatting state for one traversal of a run sequence.

    Bundles the sink and the stack of open tags so a traversal only has
    to call ``apply`` per run and ``close`` at the end.
    """

    def __init__(self, sink: MarkupSink) -> None:
        self.sink = sink
        self.state = FormattingState()
        self.opened = 0
        self.closed = 0

    def apply(self, run: CharacterRun) -> set[Tag]:
        """Open and close tags so the sink is formatted for ``run``.

        Returns:
            The tags computed for the run
        """
        tags = attribute_tags(run)
        self._reconcile(tags)
        return tags

    def close(self) -> None:
        """Close all formatting opened by this formatter."""
        self._reconcile(frozenset())

    def _reconcile(self, tags: AbstractSet[Tag]) -> None:
        before = self.state.as_list()
        try:
            reconcile(tags, self.state, self.sink)
        finally:
            self._count(before)

    def _count(self, before: list[Tag]) -> None:
        after = self.state.as_list()
        kept = 0
        for old, new in zip(before, after):
            if old != new:
                break
            kept += 1
        self.closed += len(before) - kept
        self.opened += len(after) - kept
