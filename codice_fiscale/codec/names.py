"""Surname and given-name fragments (first six characters of the code).

Both fragments take consonants first, then vowels, then pad with X. A given
name with four or more consonants skips its second consonant.
"""

from __future__ import annotations

import unicodedata

CONSONANTS = "BCDFGHJKLMNPQRSTVWXYZ"
VOWELS = "AEIOU"
FRAGMENT_LENGTH = 3
PADDING = "X"


def _letters(raw: str) -> str:
    """Uppercase, fold accents (È → E) and drop everything that is not A–Z."""
    decomposed = unicodedata.normalize("NFKD", raw.upper())
    return "".join(c for c in decomposed if c in CONSONANTS or c in VOWELS)


def extract_component(raw: str, *, drop_second_consonant: bool = False) -> str:
    """Build a 3-letter fragment from a free-form name.

    Args:
        raw: Name or surname as written (spaces, apostrophes and accents allowed).
        drop_second_consonant: Given-name rule; applied only when the name has
            four or more consonants.

    Returns:
        Exactly three uppercase letters; ``XXX`` for input without letters.
    """
    letters = _letters(raw)
    consonants = [c for c in letters if c in CONSONANTS]
    vowels = [c for c in letters if c in VOWELS]

    if drop_second_consonant and len(consonants) >= 4:
        consonants = [consonants[0], consonants[2], consonants[3]]

    fragment = "".join(consonants + vowels)[:FRAGMENT_LENGTH]
    return fragment.ljust(FRAGMENT_LENGTH, PADDING)


def surname_component(surname: str) -> str:
    """Fragment for the surname (characters 1–3)."""
    return extract_component(surname)


def name_component(name: str) -> str:
    """Fragment for the given name (characters 4–6)."""
    return extract_component(name, drop_second_consonant=True)
