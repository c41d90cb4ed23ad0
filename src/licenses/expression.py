"""License expression parsing backed by the SPDX license list.

Expressions are boolean combinations of license identifiers
(``MIT OR Apache-2.0``, ``GPL-2.0-or-later WITH Classpath-exception-2.0``).
Operators must be upper case and identifiers are limited to letters, digits,
``.`` and ``-`` with an optional trailing ``+``. Identifiers outside the SPDX
list are accepted and reported by ``non_standard_license_keys`` rather than
rejected.
"""
from __future__ import annotations

import functools
import re
from typing import Any, Tuple

from license_expression import (
    ExpressionError,
    ExpressionParseError,
    Licensing,
    get_spdx_licensing,
)


class LicenseExpressionParsingError(ValueError):
    """Raised when a license expression is empty or malformed."""


# Operators are case-sensitive; anything else is a license or exception id
_OPERATORS = ("AND", "OR", "WITH")
_TOKEN_RE = re.compile(r"[^\s()]+")
_IDENTIFIER_RE = re.compile(r"[A-Za-z0-9.\-]+\+?")


@functools.lru_cache(maxsize=1)
def spdx_licensing() -> Licensing:
    """Return the shared SPDX-aware Licensing instance (loaded once)."""
    return get_spdx_licensing()


def _check_parentheses(text: str) -> None:
    depth = 0
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                break
    if depth != 0:
        raise LicenseExpressionParsingError(
            f"The license expression '{text}' contains mismatched parentheses."
        )


def _check_tokens(text: str) -> None:
    for token in _TOKEN_RE.findall(text):
        if token in _OPERATORS:
            continue
        if token.upper() in _OPERATORS:
            raise LicenseExpressionParsingError(
                f"The license expression '{text}' uses the operator '{token}'; operators must be upper case."
            )
        if not _IDENTIFIER_RE.fullmatch(token):
            raise LicenseExpressionParsingError(
                f"The license expression '{text}' contains an invalid identifier '{token}'."
            )


def parse_license_expression(text: str) -> Any:
    """Parse ``text`` into a license expression tree.

    Raises:
        LicenseExpressionParsingError: if the text is empty, unbalanced or
        otherwise not a valid expression.
    """
    if text is None or not text.strip():
        raise LicenseExpressionParsingError("The license expression is empty.")
    _check_parentheses(text)
    _check_tokens(text)
    try:
        expression = spdx_licensing().parse(text, validate=False, strict=True)
    except (ExpressionParseError, ExpressionError) as e:
        raise LicenseExpressionParsingError(
            f"The license expression '{text}' contains invalid syntax: {e}"
        ) from e
    if expression is None:
        raise LicenseExpressionParsingError("The license expression is empty.")
    return expression


def non_standard_license_keys(expression: Any) -> Tuple[str, ...]:
    """Return the license keys in ``expression`` that are not on the SPDX list."""
    return tuple(spdx_licensing().unknown_license_keys(expression, unique=True))
