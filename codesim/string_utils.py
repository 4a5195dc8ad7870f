"""String helpers: trimming, splitting, similarity measures, hashing and file I/O."""

from __future__ import annotations

import hashlib
from collections.abc import Iterable
from pathlib import Path

_WHITESPACE = " \t\n\r"


def trim(text: str) -> str:
    """Strip spaces, tabs, newlines and carriage returns from both ends."""
    return text.strip(_WHITESPACE)


def to_lower(text: str) -> str:
    """Lower-case ASCII letters, leaving other characters alone."""
    return "".join(c.lower() if c.isascii() else c for c in text)


def to_upper(text: str) -> str:
    """Upper-case ASCII letters, leaving other characters alone."""
    return "".join(c.upper() if c.isascii() else c for c in text)


def split(text: str, delimiter: str) -> list[str]:
    """Split on *delimiter*, dropping empty pieces."""
    return [piece for piece in text.split(delimiter) if piece]


def join(strings: Iterable[str], delimiter: str) -> str:
    """Join *strings* with *delimiter* between them."""
    return delimiter.join(strings)


def jaccard_similarity(text1: str, text2: str) -> float:
    """Jaccard index of the two strings' character sets; 0.0 if both are empty."""
    chars1, chars2 = set(text1), set(text2)
    union = chars1 | chars2
    return len(chars1 & chars2) / len(union) if union else 0.0


def levenshtein_distance(text1: str, text2: str) -> int:
    """Minimum number of single-character edits turning *text1* into *text2*."""
    previous = list(range(len(text2) + 1))
    for i, char1 in enumerate(text1, start=1):
        current = [i]
        for j, char2 in enumerate(text2, start=1):
            if char1 == char2:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current
    return previous[-1]


def simple_hash(text: str) -> int:
    """Stable 64-bit hash of *text*."""
    digest = hashlib.blake2b(text.encode("utf-8"), digest_size=8).digest()
    return int.from_bytes(digest, "big")


def calculate_hash(text: str) -> str:
    """Decimal string form of :func:`simple_hash`."""
    return str(simple_hash(text))


def read_file(filename: str | Path) -> str:
    """Return the whole content of a text file."""
    return Path(filename).read_text()


def write_file(filename: str | Path, content: str) -> None:
    """Write *content* to a text file, replacing what was there."""
    Path(filename).write_text(content)


def is_valid_identifier(text: str) -> bool:
    """True for a non-empty ASCII identifier: letter or underscore, then letters, digits, underscores."""
    if not text:
        return False
    first = text[0]
    if not (first == "_" or (first.isascii() and first.isalpha())):
        return False
    return all(c == "_" or (c.isascii() and c.isalnum()) for c in text)


def contains_keyword(text: str, keywords: Iterable[str]) -> bool:
    """True if any of *keywords* occurs as a substring of *text*."""
    return any(keyword in text for keyword in keywords)