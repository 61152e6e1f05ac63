"""Configuration helpers and defaults."""
from __future__ import annotations

from os import getenv
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_LOG_JSON_PATH = ".filelinks-log.jsonl"
DEFAULT_MAX_RESULTS = 500  # display cap for the CLI only

# Track if we've loaded .env
_dotenv_loaded = False


def ensure_dotenv_loaded() -> None:
    """Load .env file from current directory if not already loaded."""
    global _dotenv_loaded
    if _dotenv_loaded:
        return

    env_file = Path.cwd() / ".env"
    if env_file.exists():
        load_dotenv(env_file)
    else:
        # Also try parent directories up to home
        for parent in Path.cwd().parents:
            env_file = parent / ".env"
            if env_file.exists():
                load_dotenv(env_file)
                break
            if parent == Path.home():
                break

    _dotenv_loaded = True


def env_int(name: str, fallback: int) -> int:
    raw = getenv(name)
    if raw is None:
        return fallback
    try:
        value = int(raw)
    except ValueError:
        return fallback
    return value if value > 0 else fallback


def env_list(name: str) -> list[str]:
    raw = getenv(name, "")
    parts = [part.strip() for part in raw.split(",")]
    return [part for part in parts if part]


def default_root() -> Path:
    """Search root from FILELINKS_ROOT, falling back to the working directory."""
    ensure_dotenv_loaded()
    raw = getenv("FILELINKS_ROOT")
    return Path(raw).resolve() if raw else Path.cwd()


def log_json_path() -> Optional[str]:
    ensure_dotenv_loaded()
    return getenv("FILELINKS_LOG_JSON") or None


def max_results() -> int:
    ensure_dotenv_loaded()
    return env_int("FILELINKS_MAX_RESULTS", DEFAULT_MAX_RESULTS)


def default_patterns() -> list[str]:
    """Patterns from FILELINKS_PATTERNS, used when none are given on the command line."""
    ensure_dotenv_loaded()
    return env_list("FILELINKS_PATTERNS")
