"""YAML settings source merging base files with per-environment overrides."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml
from pydantic_settings import PydanticBaseSettingsSource


if TYPE_CHECKING:
    from pydantic.fields import FieldInfo


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``.

    Args:
        base: Dictionary providing default values.
        override: Dictionary whose values win on conflict.

    Returns:
        New merged dictionary.
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class MultiYamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by ``config/base`` and ``config/environments``.

    Every ``*.yaml`` file under ``config/base/`` is loaded in name order, then
    the files in ``config/environments/{APP_ENV}/`` are deep-merged on top.
    """

    def __init__(
        self,
        settings_cls: type[Any],
        config_dir: Path | None = None,
    ) -> None:
        """Initialize the source and load the YAML tree eagerly.

        Args:
            settings_cls: The settings class being populated.
            config_dir: Override for the ``config`` directory location.
        """
        super().__init__(settings_cls)
        self._config_dir = config_dir or self._find_config_dir()
        self._app_env = os.getenv("APP_ENV", "development")
        self._yaml_data = self._load_yaml_files()

    @staticmethod
    def _find_config_dir() -> Path:
        # src/price_checker/core/config/yaml_source.py -> project root
        project_root = Path(__file__).resolve().parents[4]
        return project_root / "config"

    def _load_dir(self, directory: Path, merged: dict[str, Any]) -> dict[str, Any]:
        if not directory.exists():
            return merged
        for yaml_file in sorted(directory.glob("*.yaml")):
            with yaml_file.open(encoding="utf-8") as f:
                merged = deep_merge(merged, yaml.safe_load(f) or {})
        return merged

    def _load_yaml_files(self) -> dict[str, Any]:
        merged = self._load_dir(self._config_dir / "base", {})
        return self._load_dir(
            self._config_dir / "environments" / self._app_env, merged
        )

    def get_field_value(
        self,
        _field: FieldInfo,
        field_name: str,
    ) -> tuple[Any, str, bool]:
        """Return the YAML value for a single top-level field."""
        value = self._yaml_data.get(field_name)
        return value, field_name, isinstance(value, (dict, list))

    def __call__(self) -> dict[str, Any]:
        """Return the merged YAML configuration."""
        return self._yaml_data
