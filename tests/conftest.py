from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Callable, Iterable

import pytest


@pytest.fixture()
def sandbox(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    root_cwd = Path.cwd()
    original_env = dict(os.environ)
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(root_cwd)
        shutil.rmtree(tmp_path, ignore_errors=True)
        os.environ.clear()
        os.environ.update(original_env)


@pytest.fixture()
def make_files(sandbox: Path) -> Callable[[Iterable[str]], Path]:
    """Create files (and their parent directories) under the sandbox."""
    def _create(files: Iterable[str], dirs: Iterable[str] = ()) -> Path:
        for name in dirs:
            (sandbox / name).mkdir(parents=True, exist_ok=True)
        for name in files:
            target = sandbox / name
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text("content", encoding="utf8")
        return sandbox
    return _create
