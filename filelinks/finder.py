"""Resolve glob patterns to the files that exist under a search root."""
from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Iterable, List, Union

from .matcher import could_contain_match, match_segments
from .pattern import Pattern, compile_pattern
from .walker import Names, iter_files

PathLike = Union[str, Path]


def _collect(patterns: List[Pattern], root_dir: PathLike) -> List[str]:
    def descend(names: Names) -> bool:
        return any(could_contain_match(pat, names) for pat in patterns)

    results: List[str] = []
    for rel, names in iter_files(Path(root_dir), descend):
        if any(match_segments(pat, names) for pat in patterns):
            results.append(rel)
    return results


def find_files_matching_pattern_sync(pattern: str, root_dir: PathLike) -> List[str]:
    """Blocking variant of :func:`find_files_matching_pattern`."""
    return _collect([compile_pattern(pattern)], root_dir)


def find_files_matching_patterns(patterns: Iterable[str], root_dir: PathLike) -> List[str]:
    """Union of several patterns, computed in a single walk."""
    return _collect([compile_pattern(p) for p in patterns], root_dir)


async def find_files_matching_pattern(pattern: str, root_dir: PathLike) -> List[str]:
    """Return root-relative, ``/``-separated paths of regular files matching ``pattern``.

    The walk runs in a worker thread. A missing or unreadable root fails the
    call rather than producing an empty list. Result order is unspecified.
    """
    return await asyncio.to_thread(find_files_matching_pattern_sync, pattern, root_dir)
