"""Read-only recursive file enumeration relative to a search root."""
from __future__ import annotations

from pathlib import Path
from typing import Callable, FrozenSet, Iterator, Optional, Tuple

Names = Tuple[str, ...]
DescendPredicate = Callable[[Names], bool]


def ensure_directory(root: Path) -> Path:
    if not root.exists():
        raise FileNotFoundError(f"Search root does not exist: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Search root is not a directory: {root}")
    return root


def iter_files(root: Path, descend: Optional[DescendPredicate] = None) -> Iterator[Tuple[str, Names]]:
    """Yield ``(relative_path, names)`` for every regular file under ``root``.

    Relative paths always use ``/``. Symlinked directories are followed unless
    they point back at a directory already on the current path.
    ``descend`` receives a directory's names and may prune it.
    """
    ensure_directory(root)
    real = root.resolve()
    yield from _walk(root, real, (), descend, frozenset({real}))


def _walk(
    directory: Path,
    real: Path,
    prefix: Names,
    descend: Optional[DescendPredicate],
    ancestors: FrozenSet[Path],
) -> Iterator[Tuple[str, Names]]:
    for entry in directory.iterdir():
        names = prefix + (entry.name,)
        if entry.is_dir():
            if descend and not descend(names):
                continue
            target = entry.resolve() if entry.is_symlink() else real / entry.name
            if target in ancestors:
                continue
            yield from _walk(entry, target, names, descend, ancestors | {target})
        elif entry.is_file():
            yield "/".join(names), names
