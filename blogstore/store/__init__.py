"""Content item store: lookup, ordering and validation over a collection."""

from .content_store import ContentStore, ItemSequence, by_date_desc, display_order
from .validator import (
    BaseRule,
    DuplicateSlugRule,
    EmptyBodyRule,
    EmptyTitleRule,
    ItemValidator,
    SlugFormatRule,
    UnclosedFenceRule,
)

__all__ = [
    "BaseRule",
    "ContentStore",
    "DuplicateSlugRule",
    "EmptyBodyRule",
    "EmptyTitleRule",
    "ItemSequence",
    "ItemValidator",
    "SlugFormatRule",
    "UnclosedFenceRule",
    "by_date_desc",
    "display_order",
]
