"""Include/exclude flag canonicalization."""

from typing import Dict, Optional, Tuple

EMPTY_FLAGS: Tuple[str, ...] = ()


def ignore_case_key(value: str) -> str:
    """Sort/dedupe key for ordinal ignore-case comparison."""
    return value.upper()


def canonicalize_flags(flags: Optional[str]) -> Tuple[str, ...]:
    """Split a comma-delimited flag list into sorted, case-insensitively unique tokens.

    ``"Build, build , COMPILE"`` becomes ``("Build", "COMPILE")``: surrounding
    whitespace is trimmed, empty tokens are dropped and the first spelling of
    each token is kept.
    """
    if not flags:
        return EMPTY_FLAGS
    unique: Dict[str, str] = {}
    for token in flags.split(","):
        token = token.strip()
        if token:
            unique.setdefault(ignore_case_key(token), token)
    return tuple(sorted(unique.values(), key=ignore_case_key))
