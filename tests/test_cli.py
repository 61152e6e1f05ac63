"""Tests for CLI module."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

DOCS_TREE = [
    "docs/README.md",
    "docs/API.md",
    "docs/guides/setup.md",
    "docs/api/reference.md",
]


def test_cli_imports():
    from filelinks import cli
    assert hasattr(cli, "main")


def test_cli_prints_sorted_matches(make_files, capsys):
    from filelinks.cli import ExitCode, main

    root = make_files(DOCS_TREE)
    code = main(["docs/**/*.md", "--root", str(root), "--no-log-json"])

    assert code == ExitCode.ok
    out = capsys.readouterr().out.splitlines()
    assert out == sorted(DOCS_TREE)


def test_cli_json_output(make_files, capsys):
    from filelinks.cli import main

    root = make_files(DOCS_TREE)
    code = main(["docs/*.md", "docs/API.md", "--root", str(root), "--json", "--no-log-json"])

    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["matches"] == ["docs/API.md", "docs/README.md"]
    assert payload["patterns"] == ["docs/*.md", "docs/API.md"]


def test_cli_no_match_prints_hint(make_files, capsys):
    from filelinks.cli import ExitCode, main

    root = make_files(["docs/guides/setup.md"])
    code = main(["docs/*.md", "--root", str(root), "--no-log-json"])

    assert code == ExitCode.no_match
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "does not match any files" in captured.err
    assert "use ** instead" in captured.err


def test_cli_missing_root_is_error(sandbox: Path, capsys):
    from filelinks.cli import ExitCode, main

    code = main(["*.md", "--root", str(sandbox / "missing"), "--no-log-json"])

    assert code == ExitCode.error
    assert "search failed" in capsys.readouterr().err


def test_cli_absolute_pattern_is_error(sandbox: Path):
    from filelinks.cli import ExitCode, main

    assert main(["/etc/*", "--root", str(sandbox), "--no-log-json", "--quiet"]) == ExitCode.error


def test_cli_writes_json_log(make_files):
    from filelinks.cli import main

    root = make_files(DOCS_TREE)
    log_file = root / "search.jsonl"
    main(["docs/*.md", "--root", str(root), "--log-json", str(log_file), "--quiet"])

    record = json.loads(log_file.read_text(encoding="utf8").splitlines()[0])
    assert record["type"] == "search"
    assert record["count"] == 2


def test_cli_max_results_truncates(make_files, capsys):
    from filelinks.cli import main

    root = make_files(DOCS_TREE)
    main(["**", "--root", str(root), "--max-results", "2", "--no-log-json"])

    captured = capsys.readouterr()
    assert len(captured.out.splitlines()) == 2
    assert "showing 2 of 4 matches" in captured.err


def test_cli_patterns_from_env(make_files, monkeypatch, capsys):
    from filelinks.cli import main

    root = make_files(DOCS_TREE)
    monkeypatch.setenv("FILELINKS_PATTERNS", "docs/api/*.md")
    monkeypatch.setenv("FILELINKS_ROOT", str(root))

    assert main(["--no-log-json", "--quiet"]) == 0
    assert capsys.readouterr().out.splitlines() == ["docs/api/reference.md"]


def test_cli_without_patterns(sandbox: Path, monkeypatch):
    from filelinks.cli import ExitCode, main

    monkeypatch.delenv("FILELINKS_PATTERNS", raising=False)
    assert main(["--no-log-json", "--quiet"]) == ExitCode.error


@pytest.mark.asyncio
async def test_resolve_patterns_merges(make_files):
    from filelinks.cli import resolve_patterns

    root = make_files(DOCS_TREE)
    merged = await resolve_patterns(["docs/*.md", "docs/**/README.md"], root)
    assert merged == ["docs/API.md", "docs/README.md"]


@pytest.mark.asyncio
async def test_resolve_patterns_walks_once(make_files, monkeypatch):
    from filelinks import cli
    from filelinks.finder import find_files_matching_patterns

    root = make_files(DOCS_TREE)
    calls = []

    def spy(patterns, root_dir):
        calls.append(list(patterns))
        return find_files_matching_patterns(patterns, root_dir)

    monkeypatch.setattr(cli, "find_files_matching_patterns", spy)
    merged = await cli.resolve_patterns(["docs/api/*.md", "docs/**/reference.md"], root)

    assert merged == ["docs/api/reference.md"]
    assert calls == [["docs/api/*.md", "docs/**/reference.md"]]
