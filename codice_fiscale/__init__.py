"""Encode, parse and validate the Italian codice fiscale."""

from codice_fiscale.codec import CodiceFiscaleCodec, encode_cf, is_valid_cf, parse_cf
from codice_fiscale.directory import MunicipalityDirectory
from codice_fiscale.errors import CodiceFiscaleError
from codice_fiscale.models.enums import CfError, Sex
from codice_fiscale.schemas.codice_fiscale import CfResult, CodiceFiscale, Person, Place

__all__ = [
    "CfError",
    "CfResult",
    "CodiceFiscale",
    "CodiceFiscaleCodec",
    "CodiceFiscaleError",
    "MunicipalityDirectory",
    "Person",
    "Place",
    "Sex",
    "encode_cf",
    "is_valid_cf",
    "parse_cf",
]
