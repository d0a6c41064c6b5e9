"""Text analysis helpers for the catalog search engine.

Normalization is deliberately minimal: strip surrounding whitespace and
lowercase. Tokens are maximal runs of letters (Unicode ``L*``) and decimal
digits (``Nd``). Every other character separates tokens, including
underscore, punctuation and other numeric forms such as "²" or "½".
"""

from __future__ import annotations

from collections.abc import Iterator
import re
import unicodedata


# Candidate runs; non-decimal numerics are split out afterwards
_WORD_PATTERN = re.compile(r"[^\W_]+", re.UNICODE)


def normalize(text: str | None) -> str:
    """Return the comparison form of ``text`` (trimmed, lower-cased).

    ``None`` normalizes to the empty string. The function is idempotent.

    Examples:
        >>> normalize("  LAPTOP ")
        'laptop'
        >>> normalize(normalize("  Mixed Case "))
        'mixed case'
    """
    if text is None:
        return ""
    return text.strip().lower()


def is_blank(text: str | None) -> bool:
    """True for ``None``, empty, or whitespace-only text."""
    return text is None or not text.strip()


def is_token_char(ch: str) -> bool:
    category = unicodedata.category(ch)
    return category[0] == "L" or category == "Nd"


def tokenize(text: str) -> Iterator[str]:
    """Yield the letter/digit runs of ``text`` in order.

    Examples:
        >>> list(tokenize("ltp-014-pro"))
        ['ltp', '014', 'pro']
        >>> list(tokenize("usb_c hub!"))
        ['usb', 'c', 'hub']
        >>> list(tokenize("m² ½kg"))
        ['m', 'kg']
    """
    for match in _WORD_PATTERN.finditer(text):
        word = match.group(0)
        if word.isascii():
            yield word
            continue
        start = None
        for index, ch in enumerate(word):
            if is_token_char(ch):
                if start is None:
                    start = index
            elif start is not None:
                yield word[start:index]
                start = None
        if start is not None:
            yield word[start:]
