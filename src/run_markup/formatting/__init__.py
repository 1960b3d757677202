"""Formatting tags, run models and tag state reconciliation."""

from run_markup.formatting.tags import Tag, TAG_ORDER
from run_markup.formatting.runs import (
    CharacterRun,
    StyledRun,
    LegacyRun,
    StyleRecord,
    StyleResolver,
    MappingStyleResolver,
    UnderlinePattern,
    VerticalAlignment,
)
from run_markup.formatting.mapper import attribute_tags
from run_markup.formatting.reconciler import (
    FormattingState,
    RunFormatter,
    reconcile,
    close_all,
)

__all__ = [
    "Tag",
    "TAG_ORDER",
    "CharacterRun",
    "StyledRun",
    "LegacyRun",
    "StyleRecord",
    "StyleResolver",
    "MappingStyleResolver",
    "UnderlinePattern",
    "VerticalAlignment",
    "attribute_tags",
    "FormattingState",
    "RunFormatter",
    "reconcile",
    "close_all",
]
