"""Data models for blog content."""

from .item import CodeBlock, ContentItem, Heading

__all__ = ["CodeBlock", "ContentItem", "Heading"]
