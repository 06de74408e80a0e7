"""Timestamped diagnostics on stderr + GitHub Actions formatting.

Nothing here writes to stdout; stdout belongs to the child.
"""

import os
import sys
from datetime import datetime

DEBUG_ENV = "PREFIX_RUN_DEBUG"


def _timestamp() -> str:
    return datetime.now().strftime("%H:%M:%S")


def _is_github_actions() -> bool:
    return os.environ.get("GITHUB_ACTIONS") == "true"


def _debug_enabled() -> bool:
    return bool(os.environ.get(DEBUG_ENV))


def debug(msg: str) -> None:
    if _debug_enabled():
        print(f"[{_timestamp()}] DEBUG: {msg}", file=sys.stderr, flush=True)


def error(msg: str) -> None:
    if _is_github_actions():
        print(f"::error::{msg}", file=sys.stderr, flush=True)
    print(f"[{_timestamp()}] ERROR: {msg}", file=sys.stderr, flush=True)
