"""Domain enums used across the codec and its pydantic schemas.

All enums use the str mixin so they serialize as plain strings.
"""

from __future__ import annotations

from enum import Enum


class Sex(str, Enum):
    """Sex as encoded in the day fragment (female days are offset by 40)."""

    MALE = "M"
    FEMALE = "F"


class CfError(str, Enum):
    """Why an encode or parse was rejected."""

    INVALID_BIRTHDATE = "invalid-birthdate"
    INVALID_BIRTHMONTH = "invalid-birthmonth"
    INVALID_BIRTHYEAR = "invalid-birthyear"
    INVALID_BELFIORE_CODE = "invalid-belfiore-code"
    INVALID_LENGTH = "invalid-length"
    INVALID_CHECK_CHAR = "invalid-checkchar"
    INVALID_SURNAME = "invalid-surname"
    INVALID_NAME = "invalid-name"
