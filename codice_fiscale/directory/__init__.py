"""Birthplace code directory (the bundled Belfiore table)."""

from codice_fiscale.directory.belfiore import MunicipalityDirectory, load_default_directory

__all__ = ["MunicipalityDirectory", "load_default_directory"]
