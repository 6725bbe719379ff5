"""Content item model: one article with its front-matter metadata and body."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from .. import markdown
from .base import ContentModel

METADATA_KEYS = (
    "title",
    "description",
    "slug",
    "date",
    "image",
    "categories",
    "tags",
    "weight",
)


class CodeBlock(BaseModel):
    """Fenced code block embedded in an article body."""

    language: Optional[str] = Field(None, description="Source-language hint from the fence")
    code: str = Field(..., description="Code between the fences")


class Heading(BaseModel):
    """ATX heading found in an article body."""

    level: int = Field(..., ge=1, le=6)
    text: str


class ContentItem(ContentModel):
    """Article record."""

    title: str = Field(..., description="Human-readable headline")
    description: str = Field("", description="Short summary, may be empty")
    slug: str = Field(..., description="Unique URL-safe identifier")
    date: datetime = Field(..., description="Publication instant, timezone aware")
    image: Optional[str] = Field(None, description="Associated illustration asset")
    categories: List[str] = Field(default_factory=list, description="Taxonomy labels")
    tags: List[str] = Field(default_factory=list, description="Freeform labels")
    weight: Optional[int] = Field(None, description="Display precedence override")
    body: str = Field(..., description="Markdown body text")
    extra: Dict[str, Any] = Field(default_factory=dict, description="Unrecognised front-matter keys")
    location: Optional[str] = Field(None, description="Source record (path#index)", exclude=True)

    @field_validator("description", mode="before")
    @classmethod
    def empty_description(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("categories", "tags", mode="before")
    @classmethod
    def empty_labels(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("extra")
    @classmethod
    def no_metadata_keys(cls, v: Dict[str, Any]) -> Dict[str, Any]:
        """Known metadata belongs in its own field, not in extra."""
        clashes = sorted(key for key in v if key in METADATA_KEYS)
        if clashes:
            raise ValueError(f"extra must not hold metadata keys: {', '.join(clashes)}")
        return v

    @field_validator("date")
    @classmethod
    def require_offset(cls, v: datetime) -> datetime:
        """Publication dates must carry a UTC offset."""
        if v.tzinfo is None or v.utcoffset() is None:
            raise ValueError("date must include a UTC offset")
        return v

    def __eq__(self, other: object) -> bool:
        # Where an item was read from is not part of its identity.
        if not isinstance(other, ContentItem):
            return NotImplemented
        return self.model_dump() == other.model_dump()

    @property
    def code_blocks(self) -> List[CodeBlock]:
        """Fenced code blocks in the body."""
        return [
            CodeBlock(language=language, code=code)
            for language, code in markdown.code_blocks(self.body)
        ]

    @property
    def headings(self) -> List[Heading]:
        """Headings in the body, in document order."""
        return [Heading(level=level, text=text) for level, text in markdown.headings(self.body)]
