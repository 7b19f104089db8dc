"""
Source Registry — Routes files to extractor configurations.

Central registry that maps file extensions to SourceConfig instances.
Enables adding new file types without modifying the scanner.

Usage:
    registry = SourceRegistry()
    registry.register(MARKUP_CONFIG)
    registry.register(STYLESHEET_CONFIG)

    config = registry.get_config(Path("src/App.tsx"))
    # Returns MARKUP_CONFIG
"""

from pathlib import Path
from typing import Dict, List, Optional, Set

from .config import SourceConfig


class SourceRegistry:
    """
    Registry of source configurations.

    Maps file extensions to SourceConfig instances for routing.
    """

    def __init__(self):
        """Initialize empty registry."""
        self._configs: Dict[str, SourceConfig] = {}  # name -> config
        self._extension_map: Dict[str, str] = {}  # ext -> config name

    def register(self, config: SourceConfig) -> None:
        """
        Register a source configuration.

        Args:
            config: SourceConfig to register

        Raises:
            ValueError: If extension already registered to different config
        """
        for ext in config.extensions:
            existing = self._extension_map.get(ext.lower())
            if existing is not None and existing != config.name:
                raise ValueError(
                    f"Extension {ext} already registered to {existing}, "
                    f"cannot register to {config.name}"
                )

        self._configs[config.name] = config
        for ext in config.extensions:
            self._extension_map[ext.lower()] = config.name

    def unregister(self, name: str) -> bool:
        """
        Unregister a source configuration by name.

        Returns:
            True if unregistered, False if not found
        """
        config = self._configs.pop(name, None)
        if config is None:
            return False

        for ext in config.extensions:
            if self._extension_map.get(ext.lower()) == name:
                del self._extension_map[ext.lower()]
        return True

    def get_config(self, file_path: Path) -> Optional[SourceConfig]:
        """
        Get source config for a file based on extension.

        Returns:
            SourceConfig if extension is supported, None otherwise
        """
        config_name = self._extension_map.get(file_path.suffix.lower())
        return self._configs.get(config_name) if config_name else None

    def get_config_by_name(self, name: str) -> Optional[SourceConfig]:
        """Get source config by name (e.g., "Markup")."""
        return self._configs.get(name)

    def supported_extensions(self) -> Set[str]:
        """Get all supported file extensions (e.g., {'.tsx', '.css'})."""
        return set(self._extension_map.keys())

    def supported_sources(self) -> List[str]:
        """Get registered config names, in registration order."""
        return list(self._configs.keys())

    def is_supported(self, file_path: Path) -> bool:
        """Check if a file type is supported."""
        return file_path.suffix.lower() in self._extension_map

    def __len__(self) -> int:
        return len(self._configs)

    def __contains__(self, name: str) -> bool:
        return name in self._configs


def default_registry() -> SourceRegistry:
    """Build a registry holding the builtin markup, stylesheet and HTML sources."""
    from .sources import BUILTIN_SOURCES

    registry = SourceRegistry()
    for config in BUILTIN_SOURCES:
        registry.register(config)
    return registry
