"""
Emitter registry system for managing available target languages.

Provides registration and instantiation of language emitters.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

from .core.config import ConfigError, EmitterConfig, load_config
from .core.emitter import Emitter
from .logging_config import get_logger

logger = get_logger(__name__)


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class EmitterRegistry:
    """Registry for managing available emitters."""

    def __init__(self):
        """Initialize empty registry."""
        self._emitters: Dict[str, Type[Emitter]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        language: str,
        emitter_class: Type[Emitter],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register an emitter for a language.

        Args:
            language: Primary language name (e.g., 'typescript')
            emitter_class: Class implementing Emitter
            aliases: Alternative names for this language
            replace: If True, replace existing registration. If False, skip if exists.

        Raises:
            RegistryError: If emitter class is invalid or conflicts exist
        """
        if not (isinstance(emitter_class, type) and issubclass(emitter_class, Emitter)):
            raise RegistryError("Emitter class must inherit from Emitter")

        language_key = language.lower()

        if language_key in self._emitters and not replace:
            logger.debug("Emitter for %s already registered", language_key)
            return

        self._emitters[language_key] = emitter_class

        for alias in aliases or []:
            alias_key = alias.lower()

            if alias_key == language_key:
                continue

            if not replace:
                if alias_key in self._emitters:
                    raise RegistryError(
                        f"Alias '{alias}' conflicts with existing primary language"
                    )
                if alias_key in self._aliases and self._aliases[alias_key] != language_key:
                    raise RegistryError(
                        f"Alias '{alias}' already points to '{self._aliases[alias_key]}'"
                    )

            self._aliases[alias_key] = language_key

    def unregister(self, language: str):
        """
        Unregister an emitter and its aliases.

        Args:
            language: Language name to unregister
        """
        language_key = language.lower()
        self._emitters.pop(language_key, None)

        aliases_to_remove = [
            alias for alias, target in self._aliases.items() if target == language_key
        ]
        for alias in aliases_to_remove:
            del self._aliases[alias]

    def resolve(self, language: str) -> str:
        """
        Resolve a language name or alias to its primary name.

        Raises:
            RegistryError: If language not found
        """
        language_key = language.lower()

        if language_key in self._emitters:
            return language_key

        if language_key in self._aliases:
            return self._aliases[language_key]

        available = self.list_languages()
        raise RegistryError(
            f"No emitter registered for language: {language}. "
            f"Available: {', '.join(available)}"
        )

    def get_emitter_class(self, language: str) -> Type[Emitter]:
        """Get emitter class for a language name or alias."""
        return self._emitters[self.resolve(language)]

    def create_emitter(
        self,
        language: str,
        config: Optional[Union[EmitterConfig, Dict[str, Any], str, Path]] = None,
    ) -> Emitter:
        """
        Create emitter instance for language.

        Args:
            language: Language name
            config: Configuration as EmitterConfig, dict, or file path

        Returns:
            Configured emitter instance

        Raises:
            RegistryError: If the language or configuration is invalid
        """
        language_key = self.resolve(language)
        emitter_class = self._emitters[language_key]

        try:
            if isinstance(config, EmitterConfig):
                final_config = config
            elif isinstance(config, (str, Path)):
                final_config = load_config(language_key, config_file=config)
            elif isinstance(config, dict):
                final_config = load_config(language_key, custom_config=config)
            elif config is None:
                final_config = load_config(language_key)
            else:
                raise RegistryError(f"Invalid config type: {type(config)}")
        except ConfigError as e:
            raise RegistryError(f"Failed to configure {language_key} emitter: {e}") from e

        return emitter_class(final_config)

    def list_languages(self) -> List[str]:
        """Get list of registered primary language names."""
        return sorted(self._emitters.keys())

    def get_aliases_for_language(self, language: str) -> List[str]:
        """Get all aliases for a specific language."""
        language_key = language.lower()
        return sorted(
            alias for alias, target in self._aliases.items() if target == language_key
        )

    def is_supported(self, language: str) -> bool:
        """Check if a language name or alias is registered."""
        language_key = language.lower()
        return language_key in self._emitters or language_key in self._aliases

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """
        Get information about a registered language.

        Raises:
            RegistryError: If language not found
        """
        language_key = self.resolve(language)
        emitter = self.create_emitter(language_key)

        return {
            "name": emitter.language_name,
            "class": type(emitter).__name__,
            "file_extension": emitter.file_extension,
            "aliases": self.get_aliases_for_language(language_key),
            "module": type(emitter).__module__,
        }


# Global registry instance - created once
_global_registry: Optional[EmitterRegistry] = None


def get_registry() -> EmitterRegistry:
    """Get the global emitter registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = EmitterRegistry()
        _register_builtin_emitters(_global_registry)
    return _global_registry


def _register_builtin_emitters(registry: EmitterRegistry):
    """Register the emitters shipped with this package."""
    from .languages.python import PythonEmitter
    from .languages.typescript import TypeScriptEmitter

    registry.register("typescript", TypeScriptEmitter, aliases=["ts"])
    registry.register("python", PythonEmitter, aliases=["py"])


def register_emitter(
    language: str,
    emitter_class: Type[Emitter],
    aliases: Optional[List[str]] = None,
):
    """Register an emitter in the global registry."""
    get_registry().register(language, emitter_class, aliases)


def get_emitter(
    language: str,
    config: Optional[Union[EmitterConfig, Dict[str, Any], str, Path]] = None,
) -> Emitter:
    """Get emitter instance from global registry."""
    return get_registry().create_emitter(language, config)


def list_supported_languages() -> List[str]:
    """List all supported languages from global registry."""
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    """Check if language is supported by global registry."""
    return get_registry().is_supported(language)


def get_language_info(language: str) -> Dict[str, Any]:
    """Get information about a supported language."""
    return get_registry().get_language_info(language)
