"""Error taxonomy for content loading, validation and lookup."""

from typing import TYPE_CHECKING, List, Optional, Sequence

if TYPE_CHECKING:
    from .models import ContentItem


class BlogstoreError(Exception):
    """Base class for all blogstore errors."""


class ParseError(BlogstoreError):
    """A record's metadata block is malformed."""

    def __init__(self, message: str, location: Optional[str] = None) -> None:
        self.message = message
        self.location = location
        super().__init__(f"{location}: {message}" if location else message)


class ValidationError(BlogstoreError):
    """A structurally valid item violates a collection invariant.

    Validation errors are collected and returned, not raised, so an author
    sees every problem in one pass.
    """

    def __init__(
        self,
        code: str,
        message: str,
        items: Sequence["ContentItem"] = (),
        slug: Optional[str] = None,
    ) -> None:
        self.code = code
        self.message = message
        self.items: List["ContentItem"] = list(items)
        self.slug = slug
        super().__init__(f"[{code}] {message}")

    @property
    def locations(self) -> List[str]:
        """Where each offending item came from."""
        return [describe_item(item) for item in self.items]


class NotFoundError(BlogstoreError, KeyError):
    """No item in the collection has the requested slug."""

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(slug)

    def __str__(self) -> str:
        return f"No content item with slug '{self.slug}'"


def describe_item(item: "ContentItem") -> str:
    """Human-readable pointer to an item, preferring its source location."""
    if item.location:
        return item.location
    return f"<{item.slug}: {item.title!r}>"
