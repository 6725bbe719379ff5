"""Minimal Markdown scanning helpers (fenced code blocks and headings)."""

import re
from typing import Iterable, Iterator, List, Optional, Tuple

FENCE_RE = re.compile(r"^ {0,3}(?P<fence>`{3,}|~{3,})(?P<info>[^\n]*)$")
HEADING_RE = re.compile(r"^ {0,3}(?P<marks>#{1,6})(?:[ \t]+(?P<text>.*?))?(?:[ \t]+#+)?[ \t]*$")


class FenceTracker:
    """Track whether a stream of lines is inside a fenced code block."""

    def __init__(self) -> None:
        self.opener: Optional[str] = None
        self.info: str = ""

    @property
    def inside(self) -> bool:
        return self.opener is not None

    def feed(self, line: str) -> str:
        """
        Consume one line and classify it.

        Returns:
            "open", "close", "code" or "text"
        """
        match = FENCE_RE.match(line.rstrip("\r\n"))
        if self.opener is None:
            if match and not (match.group("fence")[0] == "`" and "`" in match.group("info")):
                self.opener = match.group("fence")
                self.info = match.group("info").strip()
                return "open"
            return "text"

        if (
            match
            and match.group("fence")[0] == self.opener[0]
            and len(match.group("fence")) >= len(self.opener)
            and not match.group("info").strip()
        ):
            self.opener = None
            self.info = ""
            return "close"
        return "code"


def iter_code_blocks(lines: Iterable[str]) -> Iterator[Tuple[Optional[str], str]]:
    """Yield (language, code) for every closed fenced block."""
    tracker = FenceTracker()
    language: Optional[str] = None
    current: List[str] = []

    for line in lines:
        kind = tracker.feed(line)
        if kind == "open":
            language = tracker.info.split()[0] if tracker.info else None
            current = []
        elif kind == "code":
            current.append(line.rstrip("\r\n"))
        elif kind == "close":
            yield language, "\n".join(current)


def has_unclosed_fence(text: str) -> bool:
    """Check whether the text ends inside a fenced code block."""
    tracker = FenceTracker()
    for line in text.splitlines():
        tracker.feed(line)
    return tracker.inside


def code_blocks(text: str) -> List[Tuple[Optional[str], str]]:
    """Extract fenced code blocks with their language hints."""
    return list(iter_code_blocks(text.splitlines()))


def headings(text: str) -> List[Tuple[int, str]]:
    """Extract ATX headings outside of code blocks as (level, text) pairs."""
    tracker = FenceTracker()
    found = []
    for line in text.splitlines():
        if tracker.feed(line) != "text":
            continue
        match = HEADING_RE.match(line)
        if match:
            found.append((len(match.group("marks")), (match.group("text") or "").strip()))
    return found
