"""
Version string comparison for the update workflow.

Versions are dotted strings with an optional "-" pre-release suffix. A
pre-release sorts before its base version; everything else uses a natural
ordering where digit runs compare as numbers.
"""

import re
import unicodedata
from typing import List, Tuple

_TOKEN_PATTERN = re.compile(r"[0-9]+|.", re.DOTALL)

# Primary weight classes: punctuation/whitespace < digits < letters
_PUNCTUATION = 0
_DIGITS = 1
_LETTERS = 2


def _strip_accents(value: str) -> str:
    return "".join(c for c in unicodedata.normalize("NFD", value) if not unicodedata.combining(c))


def _primary_key(value: str) -> List[Tuple[int, object]]:
    # Accents never distinguish versions
    key = []
    for token in _TOKEN_PATTERN.findall(_strip_accents(value)):
        if token[0] in "0123456789":
            key.append((_DIGITS, int(token)))
        elif token.isalpha():
            key.append((_LETTERS, token.casefold()))
        else:
            key.append((_PUNCTUATION, token))
    return key


def _case_key(value: str) -> List[int]:
    # Upper case sorts first on a tie
    return [0 if c.isupper() else 1 for c in _strip_accents(value) if c.isalpha()]


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def natural_compare(a: str, b: str) -> int:
    """Compare two strings with numeric digit runs; returns -1, 0 or 1."""
    result = _cmp(_primary_key(a), _primary_key(b))
    if result:
        return result
    return _cmp(_case_key(a), _case_key(b))


def semver_compare(a: str, b: str) -> int:
    """
    Compare two version strings.

    Returns:
        Negative if ``a`` is older, positive if newer, 0 if equivalent
    """
    if a.startswith(b + "-"):
        return -1
    if b.startswith(a + "-"):
        return 1
    return natural_compare(a, b)


def is_newer_version(remote: str, current: str) -> bool:
    """True if ``remote`` is newer than ``current``."""
    return semver_compare(remote, current) > 0
