"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for emitter settings.
"""

import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


# Case styles that always give valid identifiers in every target language
TYPE_CASES = ("pascal", "camel", "snake")


@dataclass
class EmitterConfig:
    """Base configuration for emitters."""

    # Naming settings
    root_name: Optional[str] = None  # overrides the name derived from the schema id
    default_root_name: str = "Default"  # used for roots without an id
    type_case: str = "pascal"  # pascal, camel, snake

    # Code style settings
    indent_size: int = 2
    use_tabs: bool = False

    # Output settings
    add_comments: bool = False
    export_types: bool = True

    # Custom settings (language-specific)
    custom: Dict[str, Any] = field(default_factory=dict)

    @property
    def indent(self) -> str:
        """One level of indentation."""
        return "\t" if self.use_tabs else " " * self.indent_size


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default configurations for supported languages."""
        self._configs["typescript"] = {
            "type_case": "pascal",
            "indent_size": 2,
            "export_types": True,
            "add_comments": False,
            "custom": {
                "array_style": "brackets",  # brackets: T[], generic: Array<T>
            },
        }

        self._configs["python"] = {
            "type_case": "pascal",
            "indent_size": 4,
            "export_types": True,
            "add_comments": False,
            "custom": {
                "alias_style": "assignment",  # assignment: N = T, type_statement: type N = T
                "typing_module": "typing",  # typing (Python 3.11+) or typing_extensions
            },
        }

    def get_config(
        self,
        language: Optional[str] = None,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> EmitterConfig:
        """
        Get complete configuration for a language.

        Args:
            language: Target language name
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration for the language
        """
        defaults = self._configs.get((language or "").lower(), {})
        base_config = dict(defaults)
        base_config["custom"] = dict(defaults.get("custom", {}))

        if config_file:
            self._merge(base_config, self._load_config_file(config_file))

        if custom_config:
            self._merge(base_config, custom_config)

        config = self._dict_to_config(base_config)
        if config.type_case not in TYPE_CASES:
            raise ConfigError(
                f"Invalid type_case: {config.type_case!r} "
                f"(expected one of: {', '.join(TYPE_CASES)})"
            )
        return config

    def _merge(self, target: Dict[str, Any], overrides: Dict[str, Any]):
        """Merge overrides into target, combining the ``custom`` sections."""
        for key, value in overrides.items():
            if key == "custom" and isinstance(value, dict):
                target.setdefault("custom", {}).update(value)
            else:
                target[key] = value

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

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> EmitterConfig:
        """Convert dictionary to EmitterConfig instance."""
        known_fields = {f.name for f in fields(EmitterConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        # Unknown top-level keys are language-specific settings
        if custom_args:
            existing_custom = dict(config_args.get("custom", {}))
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        return EmitterConfig(**config_args)

    def save_config(self, config: EmitterConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)
        config_dict = asdict(config)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {str(e)}")

    def list_languages(self) -> List[str]:
        """Get list of languages with built-in defaults."""
        return list(self._configs.keys())

    def validate_config(self, config: EmitterConfig, language: str) -> List[str]:
        """
        Validate configuration for a language.

        Returns:
            List of validation warnings
        """
        warnings = []

        if config.type_case not in TYPE_CASES:
            warnings.append(f"Invalid type_case: {config.type_case}")

        if not isinstance(config.indent_size, int) or config.indent_size < 1:
            warnings.append(f"Invalid indent_size: {config.indent_size}")

        if language == "typescript":
            array_style = config.custom.get("array_style", "brackets")
            if array_style not in {"brackets", "generic"}:
                warnings.append(f"Invalid array_style: {array_style}")

        elif language == "python":
            alias_style = config.custom.get("alias_style", "assignment")
            if alias_style not in {"assignment", "type_statement"}:
                warnings.append(f"Invalid alias_style: {alias_style}")

            typing_module = config.custom.get("typing_module", "typing")
            if typing_module not in {"typing", "typing_extensions"}:
                warnings.append(f"Invalid typing_module: {typing_module}")

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
    language: Optional[str] = None,
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> EmitterConfig:
    """
    Convenience function to load configuration.

    Args:
        language: Target language name
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration for the language
    """
    manager = get_config_manager()
    return manager.get_config(language, custom_config, config_file)
