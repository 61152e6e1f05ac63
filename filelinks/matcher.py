"""Segment matching for compiled patterns, plus path-list helpers."""
from __future__ import annotations

import os
from functools import lru_cache
from typing import Iterable, List, Optional, Sequence

from .pattern import RECURSIVE, Pattern, Segment, compile_pattern

SINGLE_STAR_HINT = "* matches only within a single directory. To match files in subdirectories, use ** instead"


def _pairwise(segments: Sequence[Segment], names: Sequence[str]) -> bool:
    return all(seg.matches(name) for seg, name in zip(segments, names))


def _backtrack(segments: Sequence[Segment], names: Sequence[str]) -> bool:
    @lru_cache(maxsize=None)
    def rec(i: int, j: int) -> bool:
        if j >= len(segments):
            return i >= len(names)
        seg = segments[j]
        if seg.is_recursive:
            if rec(i, j + 1):
                return True
            return i < len(names) and rec(i + 1, j)
        if i >= len(names):
            return False
        return seg.matches(names[i]) and rec(i + 1, j + 1)

    return rec(0, 0)


def match_segments(pattern: Pattern, names: Sequence[str]) -> bool:
    """Check a candidate's path segments against a compiled pattern.

    Without ``**`` the segment counts must agree and every segment must match
    its counterpart. With one ``**`` the prefix must match the leading names,
    the suffix the trailing names, and whatever sits between is consumed.
    Several ``**`` segments fall back to backtracking.
    """
    recursive = pattern.recursive_count
    if recursive == 0:
        return len(names) == len(pattern.segments) and _pairwise(pattern.segments, names)
    if recursive == 1:
        prefix, suffix = pattern.split_recursive()
        if len(names) < len(prefix) + len(suffix):
            return False
        tail = names[len(names) - len(suffix) :] if suffix else ()
        return _pairwise(prefix, names[: len(prefix)]) and _pairwise(suffix, tail)
    return _backtrack(pattern.segments, names)


def could_contain_match(pattern: Pattern, dir_names: Sequence[str]) -> bool:
    """Return True if a file somewhere below ``dir_names`` could match."""
    segments = pattern.segments

    @lru_cache(maxsize=None)
    def rec(i: int, j: int) -> bool:
        if i >= len(dir_names):
            # files below need at least one more segment
            return j < len(segments)
        if j >= len(segments):
            return False
        seg = segments[j]
        if seg.is_recursive:
            return rec(i, j + 1) or rec(i + 1, j)
        return seg.matches(dir_names[i]) and rec(i + 1, j + 1)

    return rec(0, 0)


def normalize_separators(path: str) -> str:
    if os.sep != "/":
        path = path.replace(os.sep, "/")
    return path


def matches_pattern(file_path: str, pattern: str) -> bool:
    """Match a relative path string against a glob without touching the filesystem."""
    return match_segments(compile_pattern(pattern), normalize_separators(file_path).split("/"))


def find_matching_files(paths: Iterable[str], patterns: Iterable[str]) -> List[str]:
    compiled = [compile_pattern(p) for p in patterns]
    matches: List[str] = []
    seen = set()
    for path in paths:
        if path in seen:
            continue
        names = normalize_separators(path).split("/")
        if any(match_segments(pat, names) for pat in compiled):
            seen.add(path)
            matches.append(path)
    return matches


def single_star_hint(pattern: str) -> Optional[str]:
    if "*" in pattern and RECURSIVE not in pattern:
        return SINGLE_STAR_HINT
    return None
