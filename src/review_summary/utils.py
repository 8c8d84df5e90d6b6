"""Log helpers: colored output on stderr so stdout only carries the summary"""

import sys


class _Colors:
    CYAN    = "\033[96m"
    GREEN   = "\033[92m"
    YELLOW  = "\033[93m"
    RED     = "\033[91m"
    MAGENTA = "\033[95m"
    BOLD    = "\033[1m"
    DIM     = "\033[2m"
    RESET   = "\033[0m"

_C = _Colors


def _emit(text: str) -> None:
    print(text, file=sys.stderr)


def log_step(emoji: str, msg: str) -> None:
    """Step title, cyan + bold"""
    _emit(f"\n{_C.CYAN}{_C.BOLD}{emoji}  {msg}{_C.RESET}")


def log_info(msg: str) -> None:
    _emit(f"   {_C.DIM}{msg}{_C.RESET}")


def log_success(msg: str) -> None:
    _emit(f"   {_C.GREEN}✓ {msg}{_C.RESET}")


def log_warn(msg: str) -> None:
    _emit(f"   {_C.YELLOW}⚠ {msg}{_C.RESET}")


def log_error(msg: str) -> None:
    _emit(f"   {_C.RED}✗ {msg}{_C.RESET}")


def split_reviews(text: str) -> list[str]:
    """Split raw text into reviews: one review per blank-line-separated block."""
    blocks = []
    current: list[str] = []
    for line in text.splitlines():
        if line.strip():
            current.append(line.strip())
        elif current:
            blocks.append(" ".join(current))
            current = []
    if current:
        blocks.append(" ".join(current))
    return blocks
