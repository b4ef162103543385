"""Exception raised by the codec components."""

from __future__ import annotations

from codice_fiscale.models.enums import CfError


class CodiceFiscaleError(Exception):
    """A code or person could not be encoded or parsed.

    Component functions raise it; the codec turns it into an error ``CfResult``.
    """

    def __init__(self, error: CfError, message: str | None = None) -> None:
        self.error = error
        self.message = message or error.value
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.error.value
