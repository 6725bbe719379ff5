"""Front-matter record codec."""

from .frontmatter import (
    DELIMITER,
    load_file,
    parse_record,
    parse_records,
    parse_timestamp,
    split_records,
)
from .serializer import dump_file, serialize_record, serialize_records

__all__ = [
    "DELIMITER",
    "dump_file",
    "load_file",
    "parse_record",
    "parse_records",
    "parse_timestamp",
    "serialize_record",
    "serialize_records",
    "split_records",
]
