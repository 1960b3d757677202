"""Map character run properties to formatting tags."""

from run_markup.formatting.runs import (
    ISS_SUBSCRIPTED,
    ISS_SUPERSCRIPTED,
    CharacterRun,
    LegacyRun,
    StyledRun,
    UnderlinePattern,
    VerticalAlignment,
)
from run_markup.formatting.tags import Tag


def attribute_tags(run: CharacterRun) -> set[Tag]:
    """Compute the set of tags a run should be wrapped in.

    Pure function: reads the run (and, for styled runs, its style table)
    and never fails. Unresolvable style names contribute nothing.
    """
    tags: set[Tag] = set()
    if run.is_bold():
        tags.add(Tag.BOLD)
    if run.is_italic():
        tags.add(Tag.ITALIC)
    if run.is_strikethrough():
        tags.add(Tag.STRIKE)

    if isinstance(run, StyledRun):
        tags |= _styled_run_tags(run)
    elif isinstance(run, LegacyRun):
        tags |= _legacy_run_tags(run)

    return tags


def _styled_run_tags(run: StyledRun) -> set[Tag]:
    tags: set[Tag] = set()
    if run.underline_pattern() != UnderlinePattern.NONE:
        tags.add(Tag.UNDERLINE)

    # Sup/sub from the character style applied to the run
    style = run.styles.resolve_style(run.style_name())
    if style is not None:
        tags |= _vertical_alignment_tags(style.vertical_alignment)

    # Sup/sub set on the run itself
    tags |= _vertical_alignment_tags(run.vertical_alignment())
    return tags


def _legacy_run_tags(run: LegacyRun) -> set[Tag]:
    tags: set[Tag] = set()
    if run.underline_code != 0:
        tags.add(Tag.UNDERLINE)
    if run.sub_super_script_index == ISS_SUPERSCRIPTED:
        tags.add(Tag.SUPERSCRIPT)
    if run.sub_super_script_index == ISS_SUBSCRIPTED:
        tags.add(Tag.SUBSCRIPT)
    return tags


def _vertical_alignment_tags(alignment: VerticalAlignment) -> set[Tag]:
    if alignment == VerticalAlignment.SUPERSCRIPT:
        return {Tag.SUPERSCRIPT}
    if alignment == VerticalAlignment.SUBSCRIPT:
        return {Tag.SUBSCRIPT}
    return set()
