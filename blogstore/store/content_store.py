"""In-memory store of content items with lookup, ordering and validation."""

import functools
import logging
from collections import Counter
from pathlib import Path
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple

from ..config import ConfigModel
from ..config.models import DEFAULT_SLUG_PATTERN
from ..errors import NotFoundError, ParseError, ValidationError
from ..models import ContentItem
from ..parsing import load_file
from .validator import ItemValidator

logger = logging.getLogger(__name__)

Comparator = Callable[[ContentItem, ContentItem], int]


def display_order(item: ContentItem) -> Tuple[bool, int, float]:
    """Sort key: weighted items first (lowest weight first), then newest first."""
    return (item.weight is None, item.weight or 0, -item.date.timestamp())


def by_date_desc(a: ContentItem, b: ContentItem) -> int:
    """Comparator ordering items newest first, ignoring weight."""
    if a.date > b.date:
        return -1
    if a.date < b.date:
        return 1
    return 0


class ItemSequence:
    """Lazy, restartable view over a snapshot of items.

    Sorting happens on each iteration, so the view can be walked any number
    of times.
    """

    def __init__(self, items: Iterable[ContentItem], key: Callable[[ContentItem], Any]) -> None:
        self._items = tuple(items)
        self._key = key

    def __iter__(self) -> Iterator[ContentItem]:
        return iter(sorted(self._items, key=self._key))

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"ItemSequence({len(self._items)} items)"


class ContentStore:
    """Collection of content items keyed by slug."""

    def __init__(
        self,
        items: Iterable[ContentItem] = (),
        slug_pattern: str = DEFAULT_SLUG_PATTERN,
    ) -> None:
        self._items: List[ContentItem] = []
        self.parse_errors: List[ParseError] = []
        self.validator = ItemValidator(slug_pattern)
        for item in items:
            self.add(item)

    @classmethod
    def from_path(cls, path: Path, config: Optional[ConfigModel] = None) -> "ContentStore":
        """
        Load every record under a file or directory.

        Records that fail to parse are kept in parse_errors; all other
        records are still loaded.
        """
        config = config or ConfigModel()
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Content path not found: {path}")

        if path.is_dir():
            files = sorted(
                p for p in path.rglob("*")
                if p.is_file() and p.suffix.lower() in config.extensions
            )
        else:
            files = [path]

        store = cls(slug_pattern=config.slug_pattern)
        for file_path in files:
            for result in load_file(file_path, config.record_separator, config.default_timezone):
                if isinstance(result, ParseError):
                    store.parse_errors.append(result)
                else:
                    store.add(result)

        logger.info(
            "Loaded %d item(s) from %d file(s) under %s (%d parse error(s))",
            len(store),
            len(files),
            path,
            len(store.parse_errors),
        )
        return store

    def add(self, item: ContentItem) -> None:
        """Add an item. Duplicate slugs are accepted and reported by validation."""
        self._items.append(item)

    def get_by_slug(self, slug: str) -> ContentItem:
        """Get the item with this slug; the first loaded wins on duplicates."""
        for item in self._items:
            if item.slug == slug:
                return item
        raise NotFoundError(slug)

    def list_all(
        self,
        sort: Optional[Comparator] = None,
        key: Optional[Callable[[ContentItem], Any]] = None,
    ) -> ItemSequence:
        """
        List items in display order.

        Args:
            sort: Optional comparator returning <0, 0 or >0
            key: Optional sort key, used when no comparator is given

        Returns:
            Restartable sequence; newest first unless overridden
        """
        if sort is not None:
            key = functools.cmp_to_key(sort)
        return ItemSequence(self._items, key or display_order)

    def validate(self, item: ContentItem) -> List[ValidationError]:
        """Check one item, including slug uniqueness across the collection."""
        collection = self._items if any(i is item for i in self._items) else self._items + [item]
        return self.validator.validate(item, collection)

    def validate_all(self) -> List[ValidationError]:
        """Check the whole collection."""
        return self.validator.validate_all(self._items)

    def taxonomy(self, kind: str = "tags") -> List[Tuple[str, int]]:
        """Count items per label for 'tags' or 'categories'."""
        if kind not in ("tags", "categories"):
            raise ValueError(f"Unknown taxonomy: {kind}")
        counts: Counter = Counter()
        for item in self._items:
            counts.update(set(getattr(item, kind)))
        return sorted(counts.items(), key=lambda pair: (-pair[1], pair[0]))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ContentItem]:
        return iter(self._items)

    def __contains__(self, slug: object) -> bool:
        return any(item.slug == slug for item in self._items)
