"""Configuration management for TimeTally."""

import copy
from pathlib import Path
from typing import Any, Optional

import yaml  # type: ignore[import-untyped]
from jsonschema import ValidationError, validate  # type: ignore[import-untyped]


class ConfigManager:
    """YAML-backed settings with schema validation and dot-notation access."""

    DEFAULT_CONFIG = {
        "version": "1.0",
        "general": {
            "log_level": "WARNING",
            "log_file": None,
        },
        "display": {
            "show_bars": True,
            "bar_width": 25,
            "auto_refresh": True,
        },
        "export": {
            "default_format": "json",
            "include_metadata": True,
        },
    }

    CONFIG_SCHEMA = {
        "type": "object",
        "properties": {
            "version": {"type": "string"},
            "general": {
                "type": "object",
                "properties": {
                    "log_level": {
                        "type": "string",
                        "enum": ["DEBUG", "INFO", "WARNING", "ERROR"],
                    },
                    "log_file": {"type": ["string", "null"]},
                },
            },
            "display": {
                "type": "object",
                "properties": {
                    "show_bars": {"type": "boolean"},
                    "bar_width": {"type": "integer", "minimum": 5, "maximum": 80},
                    "auto_refresh": {"type": "boolean"},
                },
            },
            "export": {
                "type": "object",
                "properties": {
                    "default_format": {"type": "string", "enum": ["json", "markdown"]},
                    "include_metadata": {"type": "boolean"},
                },
            },
        },
        "required": ["version"],
    }

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            config_path: Path to config file. Defaults to ~/.time-tally/config.yml

        Raises:
            ValueError: If the existing file was unreadable or invalid. It is
                moved to config.yml.backup and defaults are written first.
        """
        if config_path is None:
            config_path = Path.home() / ".time-tally" / "config.yml"
        self.config_path = config_path
        self._config: dict[str, Any] = {}
        self._load_or_create()

    def _load_or_create(self) -> None:
        if not self.config_path.exists():
            self.reset()
            return

        try:
            self._config = self._merge_with_defaults(self._read_file())
            self.validate()
        except ValueError as e:
            backup_path = self.config_path.with_suffix(".yml.backup")
            self.config_path.replace(backup_path)
            self.reset()
            raise ValueError(
                f"Config validation failed, backed up to {backup_path}. "
                f"Using defaults. Error: {e}"
            )

    def _read_file(self) -> dict[str, Any]:
        """Parse the config file into a mapping.

        Raises:
            ValueError: If the file is not YAML or its top level is not a mapping
        """
        try:
            with open(self.config_path, encoding="utf-8") as f:
                loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML: {e}")

        if loaded is None:
            return {}
        if not isinstance(loaded, dict):
            raise ValueError(
                f"Invalid configuration: expected a mapping, got {type(loaded).__name__}"
            )
        return loaded

    def _merge_with_defaults(self, config: dict[str, Any]) -> dict[str, Any]:
        merged = copy.deepcopy(self.DEFAULT_CONFIG)
        _deep_merge(merged, config)
        return merged

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a dotted key such as 'display.bar_width'.

        Missing keys and null values both give back ``default``.
        """
        node: Any = self._config
        for part in key.split("."):
            if not isinstance(node, dict) or node.get(part) is None:
                return default
            node = node[part]
        return node

    def set(self, key: str, value: Any) -> None:
        """Set a dotted key and save.

        Raises:
            ValueError: If the result fails validation; nothing is changed
        """
        previous = copy.deepcopy(self._config)

        *parents, leaf = key.split(".")
        node = self._config
        for part in parents:
            if not isinstance(node.get(part), dict):
                node[part] = {}
            node = node[part]
        node[leaf] = value

        try:
            self.validate()
        except ValueError:
            self._config = previous
            raise
        self.save()

    def validate(self) -> bool:
        """Check the current settings against CONFIG_SCHEMA.

        Raises:
            ValueError: If the settings do not match the schema
        """
        try:
            validate(instance=self._config, schema=self.CONFIG_SCHEMA)
        except ValidationError as e:
            raise ValueError(f"Invalid configuration: {e.message}")
        return True

    def save(self) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(self._config, f, sort_keys=False, allow_unicode=True)

    def reset(self) -> None:
        """Replace every setting with the defaults and save."""
        self._config = copy.deepcopy(self.DEFAULT_CONFIG)
        self.save()

    def to_dict(self) -> dict[str, Any]:
        return copy.deepcopy(self._config)

    def get_all_keys(self) -> list[str]:
        """Dotted names of every leaf setting, in file order."""
        return list(_leaf_keys(self._config))


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> None:
    """Merge override into base in place, recursing into nested mappings."""
    for key, value in override.items():
        if isinstance(base.get(key), dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value


def _leaf_keys(node: dict[str, Any], prefix: str = "") -> Any:
    for key, value in node.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, dict):
            yield from _leaf_keys(value, f"{full_key}.")
        else:
            yield full_key
