"""blogstore - load, validate and query a corpus of front-matter Markdown articles."""

from .errors import BlogstoreError, NotFoundError, ParseError, ValidationError
from .models import CodeBlock, ContentItem
from .store import ContentStore

__version__ = "0.1.0"

__all__ = [
    "BlogstoreError",
    "CodeBlock",
    "ContentItem",
    "ContentStore",
    "NotFoundError",
    "ParseError",
    "ValidationError",
]
