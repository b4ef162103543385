"""Birthdate and sex fragment (characters 7–11 of the code).

Layout: YY M DD
  - YY: last two digits of the birth year
  - M:  month letter (A–T, non-sequential)
  - DD: day of birth (01–31 male, 41–71 female)

The year is stored without its century. Decoding resolves it against a
century base: base + YY, or one century earlier when that lands after the
current year. A code for someone born in 1925 and one for 2025 are identical.
"""

from __future__ import annotations

from datetime import date
from types import MappingProxyType

from codice_fiscale.errors import CodiceFiscaleError
from codice_fiscale.models.enums import CfError, Sex

FEMALE_DAY_OFFSET = 40
DEFAULT_CENTURY_BASE = 2000

MONTH_LETTERS = "ABCDEHLMPRST"

MONTH_MAP = MappingProxyType({letter: month for month, letter in enumerate(MONTH_LETTERS, start=1)})


def parse_birthdate(birthdate: str) -> date:
    """Parse ISO-8601 text (YYYY-MM-DD).

    Raises:
        CodiceFiscaleError: INVALID_BIRTHDATE for unparsable or impossible dates.
    """
    try:
        return date.fromisoformat(birthdate.strip())
    except ValueError as exc:
        raise CodiceFiscaleError(
            CfError.INVALID_BIRTHDATE,
            f"Data di nascita non valida: {birthdate!r}",
        ) from exc


def encode_birthdate(birthdate: date | str, sex: Sex) -> str:
    """Encode a birthdate and sex into the 5-character fragment.

    Args:
        birthdate: A date, or ISO-8601 text (YYYY-MM-DD).
        sex: Adds 40 to the day for females.

    Raises:
        CodiceFiscaleError: INVALID_BIRTHDATE for unparsable or impossible dates.
    """
    born = birthdate if isinstance(birthdate, date) else parse_birthdate(birthdate)
    day = born.day + FEMALE_DAY_OFFSET if sex == Sex.FEMALE else born.day
    return f"{born.year % 100:02d}{MONTH_LETTERS[born.month - 1]}{day:02d}"


def resolve_year(two_digit: int, current_year: int, century_base: int = DEFAULT_CENTURY_BASE) -> int:
    """Most recent year ending in ``two_digit`` that is not after ``current_year``,
    searched from ``century_base``."""
    year = century_base + two_digit
    if year > current_year:
        year -= 100
    return year


def decode_birthdate(
    fragment: str,
    current_year: int,
    century_base: int = DEFAULT_CENTURY_BASE,
) -> tuple[date, Sex]:
    """Decode the 5-character fragment into (birthdate, sex).

    Raises:
        CodiceFiscaleError: INVALID_BIRTHYEAR, INVALID_BIRTHMONTH or
            INVALID_BIRTHDATE, in that order of checking.
    """
    year_part, month_char, day_part = fragment[0:2], fragment[2:3], fragment[3:5]

    if len(year_part) != 2 or not year_part.isdigit():
        raise CodiceFiscaleError(CfError.INVALID_BIRTHYEAR, f"Anno di nascita non valido: {year_part!r}")

    month = MONTH_MAP.get(month_char)
    if month is None:
        raise CodiceFiscaleError(CfError.INVALID_BIRTHMONTH, f"Lettera mese non valida: {month_char!r}")

    if len(day_part) != 2 or not day_part.isdigit():
        raise CodiceFiscaleError(CfError.INVALID_BIRTHDATE, f"Giorno di nascita non valido: {day_part!r}")

    day_raw = int(day_part)
    if day_raw > FEMALE_DAY_OFFSET:
        sex = Sex.FEMALE
        day = day_raw - FEMALE_DAY_OFFSET
    else:
        sex = Sex.MALE
        day = day_raw

    year = resolve_year(int(year_part), current_year, century_base)
    try:
        born = date(year, month, day)
    except ValueError as exc:
        raise CodiceFiscaleError(
            CfError.INVALID_BIRTHDATE,
            f"Data di nascita non valida: {year}-{month:02d}-{day:02d}",
        ) from exc
    return born, sex
