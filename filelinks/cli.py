"""CLI entrypoint for filelinks pattern resolution."""

from __future__ import annotations

import argparse
import asyncio
import json
from pathlib import Path
from typing import List, Optional

from .config import default_patterns, default_root, ensure_dotenv_loaded, log_json_path, max_results
from .finder import find_files_matching_patterns
from .logger import HumanEntry, Logger
from .matcher import single_star_hint


class ExitCode:
    ok = 0
    no_match = 1
    error = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="filelinks", description="filelinks <pattern>... [options]")
    parser.add_argument("patterns", nargs="*", help="Glob patterns ('*' stays in one directory, '**' recurses)")
    parser.add_argument("--root", help="Directory to search (default: FILELINKS_ROOT or cwd)")
    parser.add_argument("--json", action="store_true", help="Print matches as JSON")
    parser.add_argument("--max-results", type=int, help="Limit printed matches (default: 500)")
    parser.add_argument("--log-json", dest="log_json", help="Write JSON logs to file (default: .filelinks-log.jsonl)")
    parser.add_argument("--no-log-json", action="store_true", help="Disable JSONL logging")
    parser.add_argument("--quiet", action="store_true", help="Suppress human-readable logs")
    parser.add_argument("--pretty", action="store_true", help="Enable color human logs")
    return parser


async def resolve_patterns(patterns: List[str], root: Path) -> List[str]:
    """Resolve every pattern in a single walk and return the union sorted."""
    return sorted(await asyncio.to_thread(find_files_matching_patterns, patterns, root))


def main(argv: Optional[List[str]] = None) -> int:
    # Load .env early before parsing args
    ensure_dotenv_loaded()
    parsed = build_parser().parse_args(argv)

    root = Path(parsed.root).resolve() if parsed.root else default_root()
    patterns = parsed.patterns or default_patterns()
    limit = parsed.max_results if parsed.max_results and parsed.max_results > 0 else max_results()

    logger = Logger(
        root=str(root),
        log_json_path=None if parsed.no_log_json else (parsed.log_json or log_json_path()),
        enable_human_logs=not parsed.quiet,
        enable_file_logs=not parsed.no_log_json,
        pretty=parsed.pretty,
    )

    if not patterns:
        logger.human(HumanEntry(title="usage", body="no patterns given (pass them as arguments or set FILELINKS_PATTERNS)", variant="error"))
        return ExitCode.error

    try:
        matches = asyncio.run(resolve_patterns(patterns, root))
    except (ValueError, OSError) as err:
        logger.human(HumanEntry(title="search failed", body=str(err), variant="error"))
        logger.json({"type": "error", "patterns": patterns, "error": str(err)})
        return ExitCode.error

    logger.json({"type": "search", "patterns": patterns, "count": len(matches)})

    if parsed.json:
        print(json.dumps({"root": str(root), "patterns": patterns, "matches": matches}, indent=2))
    else:
        for rel in matches[:limit]:
            print(rel)
        if len(matches) > limit:
            logger.human(HumanEntry(title="truncated", body=f"showing {limit} of {len(matches)} matches", variant="warn"))

    if not matches:
        for pattern in patterns:
            hint = single_star_hint(pattern)
            body = f'pattern does not match any files: "{pattern}"'
            if hint:
                body += f" (Hint: {hint})"
            logger.human(HumanEntry(title="no matches", body=body, variant="warn"))
        return ExitCode.no_match

    logger.human(HumanEntry(title="done", body=f"{len(matches)} file(s) matched", variant="match"))
    return ExitCode.ok


if __name__ == "__main__":
    raise SystemExit(main())
