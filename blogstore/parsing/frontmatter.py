"""Parse front-matter records into content items."""

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

import pendulum
import yaml
from pydantic import ValidationError as PydanticValidationError

from ..config.models import DEFAULT_SEPARATOR
from ..errors import ParseError
from ..markdown import FenceTracker
from ..models import ContentItem
from ..models.item import METADATA_KEYS

logger = logging.getLogger(__name__)

DELIMITER = "---"
REQUIRED_KEYS = ("title", "slug", "date")
KNOWN_KEYS = METADATA_KEYS


def split_records(text: str, separator: str = DEFAULT_SEPARATOR) -> Iterator[str]:
    """
    Lazily split a file's text into record segments.

    A line holding only the separator token ends the current segment,
    unless it sits inside a fenced code block.
    Segments containing nothing but whitespace are skipped.
    """
    buffer: List[str] = []
    tracker = FenceTracker()
    for line in text.splitlines(keepends=True):
        if not tracker.inside and line.strip() == separator:
            segment = "".join(buffer)
            buffer = []
            tracker = FenceTracker()
            if segment.strip():
                yield segment
            continue
        tracker.feed(line)
        buffer.append(line)

    segment = "".join(buffer)
    if segment.strip():
        yield segment


def parse_timestamp(value: Any, default_timezone: str = "UTC") -> datetime:
    """
    Convert a front-matter date value into an aware datetime.

    YAML may already have produced a datetime or a date; strings are parsed
    with pendulum. Values without an offset are placed in default_timezone.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return pendulum.instance(value, tz=default_timezone)
        return pendulum.instance(value)
    if isinstance(value, date):
        return pendulum.datetime(value.year, value.month, value.day, tz=default_timezone)
    if isinstance(value, str):
        try:
            parsed = pendulum.parse(value.strip(), tz=default_timezone)
        except ValueError as e:
            raise ValueError(f"unparsable timestamp {value!r}: {e}")
        if not isinstance(parsed, datetime):
            raise ValueError(f"{value!r} is not a timestamp")
        return parsed
    raise ValueError(f"unparsable timestamp {value!r}")


def _scalar(key: str, value: Any, location: Optional[str]) -> str:
    if isinstance(value, (dict, list)):
        raise ParseError(f"'{key}' must be a string", location)
    return str(value)


def _labels(key: str, value: Any, location: Optional[str]) -> List[str]:
    """Read a categories/tags value: a list of scalars or one scalar string."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        labels = []
        for label in value:
            if label is None or isinstance(label, (dict, list, bool)):
                raise ParseError(f"'{key}' must be a sequence of strings, got {label!r}", location)
            labels.append(str(label))
        return labels
    raise ParseError(f"'{key}' must be a sequence of strings", location)


def _split_metadata(text: str, location: Optional[str]) -> Tuple[str, str]:
    lines = text.lstrip("\ufeff").splitlines(keepends=True)

    start = 0
    while start < len(lines) and not lines[start].strip():
        start += 1
    if start >= len(lines) or lines[start].rstrip() != DELIMITER:
        raise ParseError(f"record does not start with a '{DELIMITER}' metadata block", location)

    for end in range(start + 1, len(lines)):
        if lines[end].rstrip() == DELIMITER:
            return "".join(lines[start + 1:end]), "".join(lines[end + 1:])

    raise ParseError("metadata block is not terminated", location)


def parse_record(
    text: str,
    location: Optional[str] = None,
    default_timezone: str = "UTC",
) -> ContentItem:
    """
    Parse one record (metadata block plus body) into a content item.

    Raises:
        ParseError: malformed metadata block, missing required key,
            unparsable timestamp or malformed sequence.
    """
    metadata_text, body = _split_metadata(text, location)

    try:
        metadata = yaml.safe_load(metadata_text)
    except yaml.YAMLError as e:
        raise ParseError(f"invalid YAML in metadata block: {e}", location)

    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        raise ParseError("metadata block must be a mapping of keys to values", location)

    missing = [key for key in REQUIRED_KEYS if metadata.get(key) is None]
    if missing:
        raise ParseError(f"missing required key(s): {', '.join(missing)}", location)

    try:
        published = parse_timestamp(metadata["date"], default_timezone)
    except ValueError as e:
        raise ParseError(str(e), location)

    weight = metadata.get("weight")
    if weight is not None and (isinstance(weight, bool) or not isinstance(weight, int)):
        raise ParseError(f"'weight' must be an integer, got {weight!r}", location)

    description = metadata.get("description")
    image = metadata.get("image")
    extra: Dict[str, Any] = {
        str(key): value for key, value in metadata.items() if key not in KNOWN_KEYS
    }

    try:
        return ContentItem(
            title=_scalar("title", metadata["title"], location),
            description=_scalar("description", description, location) if description is not None else "",
            slug=_scalar("slug", metadata["slug"], location),
            date=published,
            image=_scalar("image", image, location) if image is not None else None,
            categories=_labels("categories", metadata.get("categories"), location),
            tags=_labels("tags", metadata.get("tags"), location),
            weight=weight,
            body=body,
            extra=extra,
            location=location,
        )
    except PydanticValidationError as e:
        raise ParseError(f"invalid metadata: {e}", location)


def parse_records(
    text: str,
    source: str = "<string>",
    separator: str = DEFAULT_SEPARATOR,
    default_timezone: str = "UTC",
) -> Iterator[Union[ContentItem, ParseError]]:
    """
    Split text into records and parse each one independently.

    A record that fails to parse yields its ParseError instead of an item,
    so one bad record never hides the others.
    """
    for index, segment in enumerate(split_records(text, separator), 1):
        location = f"{source}#{index}"
        try:
            yield parse_record(segment, location, default_timezone)
        except ParseError as e:
            logger.warning("Skipping record %s: %s", location, e.message)
            yield e


def load_file(
    path: Path,
    separator: str = DEFAULT_SEPARATOR,
    default_timezone: str = "UTC",
) -> List[Union[ContentItem, ParseError]]:
    """Read a file fully and parse every record in it."""
    with open(path, encoding="utf-8") as f:
        text = f.read()

    results = list(parse_records(text, str(path), separator, default_timezone))
    logger.debug("Parsed %d record(s) from %s", len(results), path)
    return results
