"""Text metrics reported alongside every validation result."""

import re

# Same class as ECMAScript `\s`: unlike str.split() it excludes \x1c-\x1f
# and \x85, and it includes U+FEFF
WHITESPACE = r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]"

_EDGE_WHITESPACE_RE = re.compile(rf"^{WHITESPACE}+|{WHITESPACE}+$")
_WHITESPACE_RUN_RE = re.compile(rf"{WHITESPACE}+")


def is_ascii_letter(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z"


def count_words(value: str) -> int:
    """Number of whitespace-separated tokens; blank input has zero words."""
    trimmed = _EDGE_WHITESPACE_RE.sub("", value)
    if not trimmed:
        return 0
    return len(_WHITESPACE_RUN_RE.split(trimmed))


def count_letters(value: str) -> int:
    """Number of ASCII letters in the untrimmed input.

    Accented and other non-ASCII letters are not counted.
    """
    return sum(1 for ch in value if is_ascii_letter(ch))
