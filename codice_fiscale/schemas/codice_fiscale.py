"""Pydantic schemas for the codice fiscale codec.

Pure data classes, all frozen: a built code is read-only for its whole lifetime.
"""

from __future__ import annotations

import re
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from codice_fiscale.errors import CodiceFiscaleError
from codice_fiscale.models.enums import CfError, Sex

_BELFIORE_PATTERN = re.compile(r"^[A-Z][0-9]{3}$")


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


class Place(BaseModel):
    """A municipality or foreign country with its Belfiore (cadastral) code."""

    model_config = ConfigDict(frozen=True)

    name: str
    province: str = ""    # empty for foreign countries
    belfiore_code: str    # e.g. "E889"

    @field_validator("name", "province")
    @classmethod
    def normalize_text(cls, v: str) -> str:
        """Strip whitespace and uppercase."""
        return v.strip().upper()

    @field_validator("belfiore_code")
    @classmethod
    def validate_belfiore_code(cls, v: str) -> str:
        """One letter followed by three digits."""
        code = v.strip().upper()
        if not _BELFIORE_PATTERN.match(code):
            msg = f"Invalid Belfiore code: {v!r}, should be something like E889"
            raise ValueError(msg)
        return code


class Person(BaseModel):
    """Input to encode: the data a codice fiscale is derived from."""

    model_config = ConfigDict(frozen=True)

    name: str
    surname: str
    birthdate: str  # ISO-8601 "YYYY-MM-DD", parsed by the birthdate codec
    sex: Sex
    place: Place

    @field_validator("birthdate", mode="before")
    @classmethod
    def date_to_iso(cls, v: object) -> object:
        """Accept a date or datetime object as well as ISO text."""
        if isinstance(v, datetime):
            return v.date().isoformat()
        if isinstance(v, date):
            return v.isoformat()
        return v


# ---------------------------------------------------------------------------
# Outputs
# ---------------------------------------------------------------------------


class PersonData(BaseModel):
    """Person data carried by a built code.

    After parse, name and surname are the 3-letter fragments and the year is
    resolved with the century heuristic.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    surname: str
    birthdate: date
    sex: Sex
    place: Place


class CodiceFiscaleParts(BaseModel):
    """The fixed-width fragments of a code, in layout order."""

    model_config = ConfigDict(frozen=True)

    surname: str         # 3 letters
    name: str            # 3 letters
    year: str            # 2 digits
    month: str           # 1 of ABCDEHLMPRST
    day: str             # 2 digits, +40 for female
    belfiore_code: str   # 1 letter + 3 digits
    check_char: str      # 1 letter

    @property
    def body(self) -> str:
        """The 15 characters the check letter is computed over."""
        return f"{self.surname}{self.name}{self.year}{self.month}{self.day}{self.belfiore_code}"

    @property
    def code(self) -> str:
        return self.body + self.check_char


class CodiceFiscale(BaseModel):
    """A codice fiscale built by encode or parse."""

    model_config = ConfigDict(frozen=True)

    code: str
    parts: CodiceFiscaleParts
    person: PersonData

    def __str__(self) -> str:
        return self.code

    @property
    def birthdate(self) -> date:
        return self.person.birthdate

    @property
    def sex(self) -> Sex:
        return self.person.sex

    @property
    def belfiore_code(self) -> str:
        return self.parts.belfiore_code

    def age(self, on: date | None = None) -> int:
        """Completed years between the birthdate and ``on`` (default: today)."""
        today = on or date.today()
        born = self.person.birthdate
        years = today.year - born.year
        if (today.month, today.day) < (born.month, born.day):
            years -= 1
        return years


class CfResult(BaseModel):
    """Outcome of encode or parse: either a code or the reason it was rejected."""

    model_config = ConfigDict(frozen=True)

    codice_fiscale: CodiceFiscale | None = None
    error: CfError | None = None
    message: str | None = None

    @model_validator(mode="after")
    def exactly_one_outcome(self) -> CfResult:
        """Either a code or an error, never both or neither."""
        if (self.codice_fiscale is None) == (self.error is None):
            msg = "CfResult needs exactly one of codice_fiscale and error"
            raise ValueError(msg)
        return self

    @classmethod
    def ok(cls, codice_fiscale: CodiceFiscale) -> CfResult:
        return cls(codice_fiscale=codice_fiscale)

    @classmethod
    def fail(cls, exc: CodiceFiscaleError) -> CfResult:
        return cls(error=exc.error, message=exc.message)

    @property
    def valid(self) -> bool:
        return self.error is None

    def is_ok(self) -> bool:
        return self.valid

    def is_err(self) -> bool:
        return not self.valid

    def unwrap(self) -> CodiceFiscale:
        """Return the code, or raise CodiceFiscaleError for an error result."""
        if self.error is not None:
            raise CodiceFiscaleError(self.error, self.message)
        return self.codice_fiscale  # type: ignore[return-value]
