"""Glob pattern compiler for workspace-relative file patterns."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Literal, Optional, Tuple

SegmentKind = Literal["literal", "wildcard", "recursive"]

RECURSIVE = "**"


class UnsupportedPatternError(ValueError):
    """Raised for patterns the matcher refuses to interpret (e.g. absolute paths)."""


@dataclass(frozen=True)
class Segment:
    raw: str
    kind: SegmentKind
    regex: Optional[re.Pattern] = field(default=None, compare=False, repr=False)

    @property
    def is_recursive(self) -> bool:
        return self.kind == "recursive"

    def matches(self, name: str) -> bool:
        if self.kind == "literal":
            return name == self.raw
        if self.kind == "wildcard" and self.regex is not None:
            return self.regex.fullmatch(name) is not None
        # ** is only ever matched structurally
        return False


@dataclass(frozen=True)
class Pattern:
    source: str
    segments: Tuple[Segment, ...]

    @property
    def recursive_count(self) -> int:
        return sum(1 for seg in self.segments if seg.is_recursive)

    def split_recursive(self) -> Tuple[Tuple[Segment, ...], Tuple[Segment, ...]]:
        """Return (prefix, suffix) around the single ``**`` segment."""
        index = next(i for i, seg in enumerate(self.segments) if seg.is_recursive)
        return self.segments[:index], self.segments[index + 1 :]


def is_glob_pattern(pattern: str) -> bool:
    return "*" in pattern or "?" in pattern


def _segment_regex(raw: str) -> re.Pattern:
    # Only * and ? are special; brackets, braces and parens stay literal so
    # route directories like [id] or (auth) match as written.
    parts = []
    for ch in raw:
        if ch == "*":
            parts.append("[^/]*")
        elif ch == "?":
            parts.append("[^/]")
        else:
            parts.append(re.escape(ch))
    return re.compile("".join(parts), re.DOTALL)


def compile_segment(raw: str) -> Segment:
    if raw == RECURSIVE:
        return Segment(raw=raw, kind="recursive")
    if is_glob_pattern(raw):
        return Segment(raw=raw, kind="wildcard", regex=_segment_regex(raw))
    return Segment(raw=raw, kind="literal")


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> Pattern:
    """Compile a ``/``-separated glob into its segment sequence.

    Empty segments (``a//b``, trailing ``/``) compile to literal empty strings,
    which never match a real path segment. Absolute patterns are rejected.
    """
    if pattern.startswith("/"):
        raise UnsupportedPatternError(f"Absolute patterns are not supported: {pattern!r}")
    return Pattern(source=pattern, segments=tuple(compile_segment(raw) for raw in pattern.split("/")))
