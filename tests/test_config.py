"""Tests for settings loading and validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from codice_fiscale.config import DEFAULT_BELFIORE_PATH, Settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CF_CENTURY_BASE", raising=False)
        monkeypatch.delenv("CF_LOG_LEVEL", raising=False)
        s = Settings()
        assert s.century_base == 2000
        assert s.belfiore_path == DEFAULT_BELFIORE_PATH
        assert s.belfiore_path.exists()
        assert s.log_level == "INFO"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CF_CENTURY_BASE", "1900")
        monkeypatch.setenv("CF_LOG_LEVEL", "debug")
        s = Settings()
        assert s.century_base == 1900
        assert s.log_level == "DEBUG"

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    @pytest.mark.parametrize("base", [1950, 0, -100])
    def test_invalid_century_base(self, base: int) -> None:
        with pytest.raises(ValidationError):
            Settings(century_base=base)

    def test_unknown_keys_ignored(self) -> None:
        """Unknown keys are ignored."""
        s = Settings(environment="production")
        assert not hasattr(s, "environment")
