"""Codice fiscale codec: name fragments, birthdate fragment, check character."""

from codice_fiscale.codec.codice_fiscale import (
    CodiceFiscaleCodec,
    default_codec,
    encode_cf,
    is_valid_cf,
    parse_cf,
)

__all__ = [
    "CodiceFiscaleCodec",
    "default_codec",
    "encode_cf",
    "is_valid_cf",
    "parse_cf",
]
