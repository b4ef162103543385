"""Italian Codice Fiscale (CF) encoder, parser and validator.

Pure Python, no I/O beyond the birthplace directory loaded at startup.

CF format: AAABBB 00C00 D000 E
  - AAA:  surname consonants (then vowels, then X)
  - BBB:  name consonants (then vowels, then X)
  - 00:   year of birth (last 2 digits)
  - C:    month of birth (letter A–T, non-sequential)
  - 00:   day of birth (1–31 male, 41–71 female)
  - D000: birthplace code (codice catastale / Belfiore)
  - E:    check character

Reference: DPR 605/1973, Decreto MEF 12/03/1974.
"""

from __future__ import annotations

import logging
import re
from datetime import date
from functools import lru_cache

from codice_fiscale.codec import birthdate, checksum
from codice_fiscale.codec.names import name_component, surname_component
from codice_fiscale.config import Settings, settings as default_settings
from codice_fiscale.directory.belfiore import MunicipalityDirectory, load_default_directory
from codice_fiscale.errors import CodiceFiscaleError
from codice_fiscale.models.enums import CfError
from codice_fiscale.schemas.codice_fiscale import (
    CfResult,
    CodiceFiscale,
    CodiceFiscaleParts,
    Person,
    PersonData,
)

logger = logging.getLogger(__name__)

CF_LENGTH = 16

_FRAGMENT_PATTERN = re.compile(r"^[A-Z]{3}$")


def _mask(code: str) -> str:
    """Keep the name fragments, hide birth data and birthplace."""
    return code[:6] + "X" * max(len(code) - 6, 0)


class CodiceFiscaleCodec:
    """Encode persons into codes and parse codes back into (lossy) person data.

    Usage:
        codec = CodiceFiscaleCodec()
        result = codec.encode(person)
        if result.is_ok():
            print(result.unwrap().code)
    """

    def __init__(
        self,
        directory: MunicipalityDirectory | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings or default_settings
        self._directory = directory if directory is not None else load_default_directory()

    @property
    def directory(self) -> MunicipalityDirectory:
        return self._directory

    # -----------------------------------------------------------------------
    # Encode
    # -----------------------------------------------------------------------

    def encode(self, person: Person) -> CfResult:
        """Build the codice fiscale of ``person``.

        Returns:
            CfResult with the code, or INVALID_BIRTHDATE when the birthdate is
            not a real calendar date.
        """
        try:
            born_on = birthdate.parse_birthdate(person.birthdate)
        except CodiceFiscaleError as exc:
            logger.debug("Encode rejected: %s", exc.message)
            return CfResult.fail(exc)

        born = birthdate.encode_birthdate(born_on, person.sex)
        body_parts = {
            "surname": surname_component(person.surname),
            "name": name_component(person.name),
            "year": born[0:2],
            "month": born[2],
            "day": born[3:5],
            "belfiore_code": person.place.belfiore_code,
        }
        body = "".join(body_parts.values())
        parts = CodiceFiscaleParts(**body_parts, check_char=checksum.checksum(body))

        person_data = PersonData(
            name=person.name,
            surname=person.surname,
            birthdate=born_on,
            sex=person.sex,
            place=person.place,
        )
        cf = CodiceFiscale(code=parts.code, parts=parts, person=person_data)
        logger.debug("Encoded %s", _mask(cf.code))
        return CfResult.ok(cf)

    # -----------------------------------------------------------------------
    # Parse
    # -----------------------------------------------------------------------

    def parse(self, code: str, current_year: int | None = None) -> CfResult:
        """Decode and structurally validate a codice fiscale.

        Args:
            code: The 16-character code; case and surrounding whitespace are ignored.
            current_year: Reference year for the century heuristic (default: today).

        Returns:
            CfResult with the decoded code, or the first error found.
        """
        try:
            cf = self._parse(code, current_year if current_year is not None else date.today().year)
        except CodiceFiscaleError as exc:
            logger.debug("Parse rejected %s: %s", _mask(code.strip().upper()), exc.error.value)
            return CfResult.fail(exc)
        return CfResult.ok(cf)

    def _parse(self, code: str, current_year: int) -> CodiceFiscale:
        # Uppercase before measuring: "ß".upper() is "SS"
        cf_clean = code.strip().upper()
        if len(cf_clean) != CF_LENGTH:
            raise CodiceFiscaleError(
                CfError.INVALID_LENGTH,
                f"Il codice fiscale deve essere di {CF_LENGTH} caratteri, ricevuti {len(cf_clean)}",
            )
        body, check_char = cf_clean[:15], cf_clean[15]

        if not checksum.validate(body, check_char):
            raise CodiceFiscaleError(CfError.INVALID_CHECK_CHAR, "Carattere di controllo non valido")

        surname, name = cf_clean[0:3], cf_clean[3:6]
        if not _FRAGMENT_PATTERN.match(surname):
            raise CodiceFiscaleError(CfError.INVALID_SURNAME, f"Cognome non valido: {surname}")
        if not _FRAGMENT_PATTERN.match(name):
            raise CodiceFiscaleError(CfError.INVALID_NAME, f"Nome non valido: {name}")

        born, sex = birthdate.decode_birthdate(
            cf_clean[6:11],
            current_year=current_year,
            century_base=self._settings.century_base,
        )

        belfiore_code = cf_clean[11:15]
        place = self._directory.lookup_by_code(belfiore_code)
        if place is None:
            raise CodiceFiscaleError(
                CfError.INVALID_BELFIORE_CODE,
                f"Codice catastale sconosciuto: {belfiore_code}",
            )

        parts = CodiceFiscaleParts(
            surname=surname,
            name=name,
            year=cf_clean[6:8],
            month=cf_clean[8],
            day=cf_clean[9:11],
            belfiore_code=belfiore_code,
            check_char=check_char,
        )
        person_data = PersonData(name=name, surname=surname, birthdate=born, sex=sex, place=place)
        return CodiceFiscale(code=cf_clean, parts=parts, person=person_data)

    # -----------------------------------------------------------------------
    # Validation
    # -----------------------------------------------------------------------

    def is_valid(self, code: str) -> bool:
        """True when ``code`` parses without errors."""
        return self.parse(code).is_ok()

    def check(self, code: str) -> bool:
        """Alias of :meth:`is_valid`."""
        return self.is_valid(code)

    @staticmethod
    def is_name_consistent(cf: CodiceFiscale, candidate_name: str) -> bool:
        """True when ``candidate_name`` yields the code's name fragment.

        Many names share a fragment, so this can only rule names out.
        """
        return name_component(candidate_name) == cf.parts.name

    @staticmethod
    def is_surname_consistent(cf: CodiceFiscale, candidate_surname: str) -> bool:
        """True when ``candidate_surname`` yields the code's surname fragment."""
        return surname_component(candidate_surname) == cf.parts.surname


# ---------------------------------------------------------------------------
# Module-level helpers
# ---------------------------------------------------------------------------


@lru_cache(maxsize=1)
def default_codec() -> CodiceFiscaleCodec:
    """Codec over the bundled directory, built on first use."""
    return CodiceFiscaleCodec()


def encode_cf(person: Person) -> CfResult:
    return default_codec().encode(person)


def parse_cf(code: str, current_year: int | None = None) -> CfResult:
    return default_codec().parse(code, current_year=current_year)


def is_valid_cf(code: str) -> bool:
    return default_codec().is_valid(code)
