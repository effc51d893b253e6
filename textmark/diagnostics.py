import sys
from typing import Callable, Optional

Warn = Callable[[str], None]


def print_warning(message: str) -> None:
    print(f"[warn] {message}", file=sys.stderr)


def resolve_warn(warn: Optional[Warn]) -> Warn:
    return warn if warn is not None else print_warning
