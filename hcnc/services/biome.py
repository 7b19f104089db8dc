"""
Biome -- Registers the HCNC lint plugins in biome.json

Reads (or creates) the project's biome.json and appends the two GritQL
plugin paths if they are missing. Running it twice changes nothing the
second time.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List


logger = logging.getLogger(__name__)


BIOME_CONFIG_NAME = "biome.json"

HCNC_PLUGINS = (
    "./node_modules/@hikasami/naming/rules/hcnc-jsx.grit",
    "./node_modules/@hikasami/naming/rules/hcnc-css.grit",
)

BIOME_SCHEMA = "https://biomejs.dev/schemas/1.9.4/schema.json"


class BiomeConfigError(RuntimeError):
    """An existing biome.json could not be read or has the wrong shape."""


@dataclass
class InitResult:
    """What BiomeInitializer.init() did."""
    path: Path
    created: bool
    added: int  # Plugin paths appended (all of them for a new file)

    @property
    def changed(self) -> bool:
        return self.created or self.added > 0


def default_biome_config() -> Dict[str, Any]:
    """Config written when no biome.json exists yet."""
    return {
        "$schema": BIOME_SCHEMA,
        "linter": {
            "enabled": True,
            "rules": {
                "recommended": True,
            },
        },
        "plugins": list(HCNC_PLUGINS),
    }


class BiomeInitializer:
    """
    Adds HCNC plugins to a biome.json.

    Usage:
        result = BiomeInitializer(Path.cwd()).init()
        if result.created: ...
    """

    def __init__(self, project_dir: Path, plugins: List[str] = None):
        self.path = Path(project_dir) / BIOME_CONFIG_NAME
        self.plugins = list(plugins) if plugins is not None else list(HCNC_PLUGINS)

    def init(self) -> InitResult:
        """
        Create or update biome.json.

        Returns:
            InitResult describing the change (possibly none)

        Raises:
            BiomeConfigError: If the existing file is unreadable, not JSON,
                or its "plugins" entry is not a list
        """
        if not self.path.exists():
            config = default_biome_config()
            config["plugins"] = list(self.plugins)
            self._write(config)
            logger.debug("Created %s", self.path)
            return InitResult(path=self.path, created=True, added=len(self.plugins))

        config = self._read()
        plugins = config.setdefault("plugins", [])
        if not isinstance(plugins, list):
            raise BiomeConfigError(f'"plugins" in {self.path} must be a list')

        added = 0
        for plugin in self.plugins:
            if plugin not in plugins:
                plugins.append(plugin)
                added += 1

        if added:
            self._write(config)
            logger.debug("Added %d plugin(s) to %s", added, self.path)

        return InitResult(path=self.path, created=False, added=added)

    def _read(self) -> Dict[str, Any]:
        try:
            config = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise BiomeConfigError(f"Error updating {self.path}: {e}") from e

        if not isinstance(config, dict):
            raise BiomeConfigError(f"{self.path} must contain a JSON object")
        return config

    def _write(self, config: Dict[str, Any]) -> None:
        self.path.write_text(json.dumps(config, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
