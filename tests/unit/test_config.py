"""Unit tests for platform-aware configuration defaults."""

from __future__ import annotations

from pathlib import Path

import platformdirs
import pytest
from pydantic import ValidationError

from typings_registry.config import _DEFAULT_DATA_DIR, DataSettings, LoggingSettings, Settings


class TestPlatformDefaults:
    """Verify config defaults use platformdirs instead of hardcoded Unix paths."""

    def test_default_data_dir_matches_platformdirs(self) -> None:
        expected = platformdirs.user_data_dir("typings-registry")
        assert expected == _DEFAULT_DATA_DIR

    def test_types_data_path_under_data_dir(self) -> None:
        settings = DataSettings()
        assert settings.types_data_path == Path(_DEFAULT_DATA_DIR) / "definitions.json"

    def test_not_needed_path_under_definitely_typed(self) -> None:
        settings = DataSettings(definitely_typed_path="/src/DefinitelyTyped")
        assert settings.not_needed_path == Path("/src/DefinitelyTyped/notNeededPackages.json")


class TestEnvironmentOverrides:
    def test_nested_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TYPINGS_REGISTRY__LOGGING__LEVEL", "DEBUG")
        assert Settings().logging.level == "DEBUG"

    def test_init_args_beat_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TYPINGS_REGISTRY__DATA__DATA_DIR", "/from/env")
        settings = Settings(data={"data_dir": "/from/init"})  # type: ignore[arg-type]
        assert settings.data.data_dir == "/from/init"


class TestConfigValidation:
    def test_wrong_literal_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            LoggingSettings(format="xml")  # type: ignore[arg-type]

    def test_unknown_top_level_field_raises_validation_error(self) -> None:
        """A YAML typo at the top level (e.g. 'dat:' instead of 'data:') is caught."""
        with pytest.raises(ValidationError):
            Settings(completely_unknown_field="oops")  # type: ignore[call-arg]

    def test_unknown_nested_field_raises_validation_error(self) -> None:
        """A typo like 'data_dri' is caught rather than silently using the default."""
        with pytest.raises(ValidationError):
            DataSettings(data_dri="/intended/path")  # type: ignore[call-arg]
