"""Serialize content items back to front-matter records."""

from pathlib import Path
from typing import Any, Dict, Iterable

import yaml

from ..config.models import DEFAULT_SEPARATOR
from ..models import ContentItem
from .frontmatter import DELIMITER


def _metadata(item: ContentItem) -> Dict[str, Any]:
    metadata: Dict[str, Any] = {
        "title": item.title,
        "description": item.description,
        "slug": item.slug,
        "date": item.date.isoformat(),
    }
    if item.image is not None:
        metadata["image"] = item.image
    metadata["categories"] = list(item.categories)
    metadata["tags"] = list(item.tags)
    if item.weight is not None:
        metadata["weight"] = item.weight
    metadata.update(item.extra)
    return metadata


def serialize_record(item: ContentItem) -> str:
    """Render an item as a metadata block followed by its body."""
    front = yaml.safe_dump(
        _metadata(item),
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )
    return f"{DELIMITER}\n{front}{DELIMITER}\n{item.body}"


def serialize_records(items: Iterable[ContentItem], separator: str = DEFAULT_SEPARATOR) -> str:
    """Render several items into one text, separated by the separator token."""
    records = []
    for item in items:
        record = serialize_record(item)
        if not record.endswith("\n"):
            record += "\n"
        records.append(record)
    return f"{separator}\n".join(records)


def dump_file(
    items: Iterable[ContentItem],
    path: Path,
    separator: str = DEFAULT_SEPARATOR,
) -> None:
    """Write items to a file, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        f.write(serialize_records(items, separator))
