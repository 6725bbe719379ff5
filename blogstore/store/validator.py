"""Validation rules for content items."""

import re
from abc import ABC, abstractmethod
from typing import Dict, List, Sequence

from .. import markdown
from ..config.models import DEFAULT_SLUG_PATTERN
from ..errors import ValidationError, describe_item
from ..models import ContentItem


class BaseRule(ABC):
    """Base class for validation rules."""

    code: str = ""

    @abstractmethod
    def check(self, item: ContentItem, collection: Sequence[ContentItem]) -> List[ValidationError]:
        """
        Check one item.

        Args:
            item: Item under validation
            collection: Every item in the collection, the item included

        Returns:
            Violations found, empty when the item passes
        """
        pass


class DuplicateSlugRule(BaseRule):
    """Slugs must be unique across the collection."""

    code = "duplicate-slug"

    def _error(self, slug: str, items: List[ContentItem]) -> ValidationError:
        where = ", ".join(describe_item(item) for item in items)
        return ValidationError(
            self.code,
            f"slug '{slug}' is used by {len(items)} items: {where}",
            items=items,
            slug=slug,
        )

    def check(self, item: ContentItem, collection: Sequence[ContentItem]) -> List[ValidationError]:
        """Report the item together with every other item sharing its slug."""
        others = [other for other in collection if other is not item and other.slug == item.slug]
        if not others:
            return []
        return [self._error(item.slug, [item] + others)]

    def check_collection(self, collection: Sequence[ContentItem]) -> List[ValidationError]:
        """One error per duplicated slug, naming all of its items."""
        groups: Dict[str, List[ContentItem]] = {}
        for item in collection:
            groups.setdefault(item.slug, []).append(item)
        return [self._error(slug, items) for slug, items in groups.items() if len(items) > 1]


class EmptyBodyRule(BaseRule):
    """Body text must not be empty."""

    code = "empty-body"

    def check(self, item: ContentItem, collection: Sequence[ContentItem]) -> List[ValidationError]:
        if item.body.strip():
            return []
        return [ValidationError(self.code, "body is empty", items=[item], slug=item.slug)]


class EmptyTitleRule(BaseRule):
    """Title must not be blank."""

    code = "empty-title"

    def check(self, item: ContentItem, collection: Sequence[ContentItem]) -> List[ValidationError]:
        if item.title.strip():
            return []
        return [ValidationError(self.code, "title is blank", items=[item], slug=item.slug)]


class SlugFormatRule(BaseRule):
    """Slug must be a URL-safe token."""

    code = "invalid-slug"

    def __init__(self, pattern: str = DEFAULT_SLUG_PATTERN) -> None:
        self.pattern = re.compile(pattern)

    def check(self, item: ContentItem, collection: Sequence[ContentItem]) -> List[ValidationError]:
        if self.pattern.match(item.slug):
            return []
        return [
            ValidationError(
                self.code,
                f"slug '{item.slug}' is not URL-safe (expected {self.pattern.pattern})",
                items=[item],
                slug=item.slug,
            )
        ]


class UnclosedFenceRule(BaseRule):
    """Fenced code blocks in the body must be closed."""

    code = "unclosed-code-fence"

    def check(self, item: ContentItem, collection: Sequence[ContentItem]) -> List[ValidationError]:
        if not markdown.has_unclosed_fence(item.body):
            return []
        return [
            ValidationError(self.code, "body ends inside a fenced code block", items=[item], slug=item.slug)
        ]


class ItemValidator:
    """Run every rule and accumulate all violations."""

    def __init__(self, slug_pattern: str = DEFAULT_SLUG_PATTERN) -> None:
        self.duplicate_rule = DuplicateSlugRule()
        self.item_rules: List[BaseRule] = [
            EmptyTitleRule(),
            SlugFormatRule(slug_pattern),
            EmptyBodyRule(),
            UnclosedFenceRule(),
        ]

    def validate(self, item: ContentItem, collection: Sequence[ContentItem]) -> List[ValidationError]:
        """Validate one item against the collection."""
        errors = self.duplicate_rule.check(item, collection)
        for rule in self.item_rules:
            errors.extend(rule.check(item, collection))
        return errors

    def validate_all(self, collection: Sequence[ContentItem]) -> List[ValidationError]:
        """Validate every item; duplicated slugs are reported once each."""
        errors = self.duplicate_rule.check_collection(collection)
        for item in collection:
            for rule in self.item_rules:
                errors.extend(rule.check(item, collection))
        return errors
