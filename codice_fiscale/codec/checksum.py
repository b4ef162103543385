"""Check character of the codice fiscale.

Every symbol of the 15-character body has two weights, one for odd
(1-indexed) positions and one for even positions. The weights are summed
modulo 26 and mapped onto A–Z.

Reference: Decreto MEF 12/03/1974.
"""

from __future__ import annotations

from types import MappingProxyType

BODY_LENGTH = 15

CHECK_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Checksum tables per Decreto MEF 12/03/1974
ODD_VALUES = MappingProxyType({
    "0": 1, "1": 0, "2": 5, "3": 7, "4": 9, "5": 13, "6": 15,
    "7": 17, "8": 19, "9": 21,
    "A": 1, "B": 0, "C": 5, "D": 7, "E": 9, "F": 13, "G": 15,
    "H": 17, "I": 19, "J": 21, "K": 2, "L": 4, "M": 18, "N": 20,
    "O": 11, "P": 3, "Q": 6, "R": 8, "S": 12, "T": 14, "U": 16,
    "V": 10, "W": 22, "X": 25, "Y": 24, "Z": 23,
})

EVEN_VALUES = MappingProxyType({
    "0": 0, "1": 1, "2": 2, "3": 3, "4": 4, "5": 5, "6": 6,
    "7": 7, "8": 8, "9": 9,
    "A": 0, "B": 1, "C": 2, "D": 3, "E": 4, "F": 5, "G": 6,
    "H": 7, "I": 8, "J": 9, "K": 10, "L": 11, "M": 12, "N": 13,
    "O": 14, "P": 15, "Q": 16, "R": 17, "S": 18, "T": 19, "U": 20,
    "V": 21, "W": 22, "X": 23, "Y": 24, "Z": 25,
})


def _is_body(body: str) -> bool:
    return len(body) == BODY_LENGTH and all(char in ODD_VALUES for char in body)


def checksum(body: str) -> str:
    """Compute the check character for a 15-character body.

    Args:
        body: Uppercase body made of A–Z and 0–9.

    Returns:
        A single letter A–Z.

    Raises:
        ValueError: If the body has the wrong length or an unknown symbol.
    """
    if not _is_body(body):
        msg = f"Checksum body must be {BODY_LENGTH} characters from A-Z0-9, got {body!r}"
        raise ValueError(msg)
    total = 0
    for i, char in enumerate(body):
        if i % 2 == 0:  # odd position (1-indexed)
            total += ODD_VALUES[char]
        else:  # even position (1-indexed)
            total += EVEN_VALUES[char]
    return CHECK_ALPHABET[total % 26]


def validate(body: str, check_char: str) -> bool:
    """True when ``check_char`` is the checksum of ``body``."""
    if not _is_body(body):
        return False
    return checksum(body) == check_char
