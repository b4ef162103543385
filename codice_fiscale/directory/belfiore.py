"""Belfiore (cadastral) code directory for municipalities and foreign countries.

Loads a flat file of ``code,province,name`` rows once and answers lookups by
name or by code. The directory is never mutated after construction, so one
instance can be shared freely.
"""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterable, Iterator
from functools import lru_cache
from pathlib import Path

from pydantic import ValidationError

from codice_fiscale.config import settings
from codice_fiscale.schemas.codice_fiscale import Place

logger = logging.getLogger(__name__)


class MunicipalityDirectory:
    """Read-only lookup table of places keyed by Belfiore code and by name."""

    def __init__(self, places: Iterable[Place]) -> None:
        by_code: dict[str, Place] = {}
        by_name: dict[str, Place] = {}
        for place in places:
            if place.belfiore_code in by_code:
                msg = f"Duplicate Belfiore code: {place.belfiore_code}"
                raise ValueError(msg)
            by_code[place.belfiore_code] = place
            # First entry wins for homonymous places
            by_name.setdefault(place.name, place)
        self._by_code = by_code
        self._by_name = by_name

    @classmethod
    def from_file(cls, path: Path | str) -> MunicipalityDirectory:
        """Load a directory from a ``code,province,name`` file.

        Raises:
            ValueError: On a malformed row or a duplicate code.
        """
        path = Path(path)
        places: list[Place] = []
        with open(path, encoding="utf-8", newline="") as f:
            for lineno, row in enumerate(csv.reader(f), start=1):
                if not row or not "".join(row).strip():
                    continue
                if len(row) != 3:
                    msg = f"{path}:{lineno}: expected code,province,name, got {row!r}"
                    raise ValueError(msg)
                code, province, name = row
                try:
                    places.append(Place(name=name, province=province, belfiore_code=code))
                except ValidationError as exc:
                    msg = f"{path}:{lineno}: {exc.errors()[0]['msg']}"
                    raise ValueError(msg) from exc

        directory = cls(places)
        logger.debug("Loaded %d places from %s", len(directory), path)
        return directory

    def lookup_by_name(self, name: str) -> Place | None:
        """Find a place by name (case-insensitive)."""
        return self._by_name.get(name.strip().upper())

    def lookup_by_code(self, code: str) -> Place | None:
        """Find a place by Belfiore code (case-insensitive)."""
        return self._by_code.get(code.strip().upper())

    def __len__(self) -> int:
        return len(self._by_code)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code.strip().upper() in self._by_code

    def __iter__(self) -> Iterator[Place]:
        return iter(self._by_code.values())


@lru_cache(maxsize=1)
def load_default_directory() -> MunicipalityDirectory:
    """The directory at ``settings.belfiore_path``, loaded once per process.

    The bundled table is a sample of major municipalities and foreign
    countries; codes born elsewhere fail with INVALID_BELFIORE_CODE. Point
    CF_BELFIORE_PATH at a complete code,province,name file for full coverage.
    """
    return MunicipalityDirectory.from_file(settings.belfiore_path)
