"""Domain enums for the codice fiscale codec."""

from __future__ import annotations

from codice_fiscale.models.enums import CfError, Sex

__all__ = ["CfError", "Sex"]
