"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ...logging_config import get_logger
from .errors import GeneratorError

logger = get_logger(__name__)

HOOKS_LAYOUTS = ("single", "per_operation")


class ConfigError(GeneratorError):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class GeneratorConfig:
    """Settings shared by every emitter and the materializer."""

    # Output settings
    output_dir: str = "."
    extension: str = "ts"
    manifest_name: str = "index"

    # Generated client settings
    http_module: str = "@shared"
    base_url_symbol: str = "BASE_URL"
    http_client_symbol: str = "httpClient"
    id_type: str = "string"

    # Generated hooks settings
    query_package: str = "react-query"
    hooks_layout: str = "single"  # single, per_operation

    # Unrecognized keys from config files
    custom: Dict[str, Any] = field(default_factory=dict)

    @property
    def manifest_file(self) -> str:
        return f"{self.manifest_name}.{self.extension}"

    def file_name(self, stem: str) -> str:
        return f"{stem}.{self.extension}"


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._defaults: Dict[str, Any] = asdict(GeneratorConfig())

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration.

        Args:
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Defaults, overlaid with the file, overlaid with custom_config
        """
        base_config = dict(self._defaults)
        base_config["custom"] = {}

        if config_file:
            file_config = self._load_config_file(config_file)
            base_config.update(file_config)

        if custom_config:
            base_config.update(
                {k: v for k, v in custom_config.items() if v is not None}
            )

        config = self._dict_to_config(base_config)
        self._check_config(config)
        return config

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {str(e)}")
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {str(e)}")

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug("Loaded configuration from %s", path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in fields(GeneratorConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        if custom_args:
            logger.debug("Unrecognized config keys: %s", ", ".join(sorted(custom_args)))
            existing_custom = config_args.get("custom") or {}
            if not isinstance(existing_custom, dict):
                raise ConfigError("custom must be a JSON object")
            existing_custom = dict(existing_custom)
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        return GeneratorConfig(**config_args)

    def _check_config(self, config: GeneratorConfig):
        """Reject settings that would produce broken output."""
        for config_field in fields(GeneratorConfig):
            value = getattr(config, config_field.name)
            if isinstance(config_field.default, str) and not isinstance(value, str):
                raise ConfigError(
                    f"{config_field.name} must be a string, got {type(value).__name__}"
                )

        if not isinstance(config.custom, dict):
            raise ConfigError("custom must be a JSON object")

        if config.hooks_layout not in HOOKS_LAYOUTS:
            raise ConfigError(
                f"Invalid hooks_layout: {config.hooks_layout} "
                f"(expected one of {', '.join(HOOKS_LAYOUTS)})"
            )

        if not config.extension or not config.extension.strip("."):
            raise ConfigError("extension must not be empty")
        config.extension = config.extension.lstrip(".")

        if not config.manifest_name:
            raise ConfigError("manifest_name must not be empty")

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = asdict(config)
        custom = config_dict.pop("custom")
        config_dict.update(custom)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {str(e)}")

    def validate_config(self, config: GeneratorConfig) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        if config.extension not in {"ts", "tsx"}:
            warnings.append(
                f"Unusual extension '{config.extension}' for TypeScript output"
            )

        for attr in ("base_url_symbol", "http_client_symbol"):
            value = getattr(config, attr)
            if not value.isidentifier():
                warnings.append(f"Invalid {attr}: {value}")

        if not config.query_package:
            warnings.append("query_package is empty")

        if config.custom:
            warnings.append(f"Ignored settings: {', '.join(sorted(config.custom))}")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    manager = get_config_manager()
    return manager.get_config(custom_config, config_file)

