"""
Configuration — Centralized settings management

Config hierarchy (highest to lowest priority):
  1. Project config (.hcnc/config.yaml)
  2. User config (~/.hcnc/config.yaml)
  3. Environment variables (HCNC_STRICT_BEM, HCNC_ALLOW_UNKNOWN,
     HCNC_CUSTOM_UTILITIES as a comma-separated list)
  4. Defaults

Example .hcnc/config.yaml:

    rules:
      strict_bem: false
      allow_unknown: false
      custom_utilities:
        - "^u-[a-z]+$"
    display:
      symbols: auto
      format: auto
    scan:
      exclude_dirs: [dist, build]
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .core.config import CustomUtilityError, NamingConfig, compile_custom_utilities, parse_bool
from .presentation.symbols import get_symbols


logger = logging.getLogger(__name__)


def _split_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _bool_setting(section: Dict[str, Any], key: str) -> bool:
    """Read a YAML flag; text like "false" counts, anything else falls back to False."""
    value = section.get(key)
    if value is None:
        return False
    parsed = parse_bool(value)
    if parsed is None:
        logger.warning("Ignoring %s=%r (expected true/false)", key, value)
        return False
    return parsed


def _list_setting(section: Dict[str, Any], key: str) -> List[str]:
    """Read a YAML list; a single string becomes a one-element list."""
    value = section.get(key)
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        logger.warning("Ignoring %s=%r (expected a list)", key, value)
        return []
    return list(value)


@dataclass
class RulesConfig:
    """Naming rule knobs fed to the classification engine."""
    strict_bem: bool = False
    allow_unknown: bool = False
    custom_utilities: List[str] = field(default_factory=list)

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        try:
            compile_custom_utilities(self.custom_utilities)
        except CustomUtilityError as e:
            return str(e)
        return None


@dataclass
class DisplayConfig:
    """Display preferences."""
    symbols: str = "auto"  # "unicode" | "ascii" | "auto"
    format: str = "auto"   # "auto" | "list" | "summary" | "json"

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        valid_symbols = ("unicode", "ascii", "auto")
        if self.symbols not in valid_symbols:
            return f"Unknown symbols setting '{self.symbols}'. Valid: {', '.join(valid_symbols)}"

        valid_formats = ("auto", "list", "summary", "json")
        if self.format not in valid_formats:
            return f"Unknown format '{self.format}'. Valid: {', '.join(valid_formats)}"
        return None


@dataclass
class ScanConfig:
    """Directory scan preferences."""
    exclude_dirs: List[str] = field(default_factory=list)  # On top of dot-dirs and node_modules

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        for name in self.exclude_dirs:
            if "/" in name or "\\" in name:
                return f"exclude_dirs entries are directory names, not paths: '{name}'"
        return None


@dataclass
class Config:
    """Application configuration."""
    rules: RulesConfig = field(default_factory=RulesConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    scan: ScanConfig = field(default_factory=ScanConfig)

    def naming_config(self) -> NamingConfig:
        """
        Build the immutable engine configuration.

        Raises:
            CustomUtilityError: If a custom utility pattern does not compile
        """
        return NamingConfig(
            custom_utilities=tuple(self.rules.custom_utilities),
            allow_unknown=self.rules.allow_unknown,
            strict_bem=self.rules.strict_bem,
        )

    def validate(self) -> Optional[str]:
        """First section error, or None if every section is valid."""
        for section in (self.rules, self.display, self.scan):
            error = section.validate()
            if error:
                return error
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "rules": {
                "strict_bem": self.rules.strict_bem,
                "allow_unknown": self.rules.allow_unknown,
                "custom_utilities": list(self.rules.custom_utilities),
            },
            "display": {
                "symbols": self.display.symbols,
                "format": self.display.format,
            },
            "scan": {
                "exclude_dirs": list(self.scan.exclude_dirs),
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """Create from dictionary."""
        rules_data = data.get("rules") or {}
        display_data = data.get("display") or {}
        scan_data = data.get("scan") or {}

        return cls(
            rules=RulesConfig(
                strict_bem=_bool_setting(rules_data, "strict_bem"),
                allow_unknown=_bool_setting(rules_data, "allow_unknown"),
                custom_utilities=_list_setting(rules_data, "custom_utilities"),
            ),
            display=DisplayConfig(
                symbols=display_data.get("symbols", "auto"),
                format=display_data.get("format", "auto"),
            ),
            scan=ScanConfig(
                exclude_dirs=[str(name) for name in _list_setting(scan_data, "exclude_dirs")],
            ),
        )


class ConfigManager:
    """
    Manages configuration loading and persistence.

    Hierarchy:
      1. Project config (.hcnc/config.yaml)
      2. User config (~/.hcnc/config.yaml)
      3. Environment variables
      4. Defaults
    """

    USER_CONFIG_DIR = Path.home() / ".hcnc"
    PROJECT_CONFIG_DIR = ".hcnc"
    CONFIG_FILE = "config.yaml"

    def __init__(self, project_dir: Optional[Path] = None):
        self.project_dir = Path(project_dir) if project_dir else Path.cwd()
        self._config: Optional[Config] = None

    @property
    def project_config_path(self) -> Path:
        return self.project_dir / self.PROJECT_CONFIG_DIR / self.CONFIG_FILE

    @property
    def user_config_path(self) -> Path:
        return self.USER_CONFIG_DIR / self.CONFIG_FILE

    def load(self) -> Config:
        """Load configuration from all sources."""
        if self._config is not None:
            return self._config

        # Lowest layer above defaults: environment
        config_data: Dict[str, Any] = self._env_overrides()

        for path in (self.user_config_path, self.project_config_path):
            file_data = self._read_yaml(path)
            if file_data:
                config_data = self._merge(config_data, file_data)

        self._config = Config.from_dict(config_data)
        return self._config

    def _env_overrides(self) -> Dict[str, Any]:
        rules: Dict[str, Any] = {}

        for key, env in (("strict_bem", "HCNC_STRICT_BEM"), ("allow_unknown", "HCNC_ALLOW_UNKNOWN")):
            raw = os.environ.get(env)
            if raw is None:
                continue
            value = parse_bool(raw)
            if value is None:
                logger.warning("Ignoring %s=%r (expected true/false)", env, raw)
            else:
                rules[key] = value

        if os.environ.get("HCNC_CUSTOM_UTILITIES"):
            rules["custom_utilities"] = _split_list(os.environ["HCNC_CUSTOM_UTILITIES"])

        return {"rules": rules} if rules else {}

    def _read_yaml(self, path: Path) -> Dict[str, Any]:
        """Read one config layer. A malformed file is skipped with a warning."""
        if not path.exists():
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Ignoring malformed config %s: %s", path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring config %s: top level must be a mapping", path)
            return {}
        return data

    def save_project(self, config: Config):
        """Save configuration to project config file."""
        self._save(self.project_config_path, config)

    def save_user(self, config: Config):
        """Save configuration to user config file."""
        self._save(self.user_config_path, config)

    def _save(self, path: Path, config: Config):
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding="utf-8") as f:
            yaml.safe_dump(config.to_dict(), f, default_flow_style=False)
        self._config = config

    def set(self, key: str, value: str, scope: str = "project") -> Optional[str]:
        """
        Set a configuration value.

        List settings (rules.custom_utilities, scan.exclude_dirs) take a
        comma-separated value and replace the whole list.

        Args:
            key: Dot-separated key (e.g., "rules.strict_bem")
            value: Value to set
            scope: "project" or "user"

        Returns:
            Error message or None if successful
        """
        config = self.load()

        parts = key.split(".")
        if len(parts) != 2:
            return f"Invalid key format: {key}. Use 'section.setting' (e.g., 'rules.strict_bem')"

        section, setting = parts

        if section == "rules":
            if setting in ("strict_bem", "allow_unknown"):
                parsed = parse_bool(value)
                if parsed is None:
                    return f"Invalid boolean for {key}: '{value}'. Use true or false"
                setattr(config.rules, setting, parsed)
            elif setting == "custom_utilities":
                config.rules.custom_utilities = _split_list(value)
            else:
                return f"Unknown rules setting: {setting}. Valid: strict_bem, allow_unknown, custom_utilities"
            error = config.rules.validate()

        elif section == "display":
            if setting == "symbols":
                config.display.symbols = value
            elif setting == "format":
                config.display.format = value
            else:
                return f"Unknown display setting: {setting}. Valid: symbols, format"
            error = config.display.validate()

        elif section == "scan":
            if setting == "exclude_dirs":
                config.scan.exclude_dirs = _split_list(value)
            else:
                return f"Unknown scan setting: {setting}. Valid: exclude_dirs"
            error = config.scan.validate()

        else:
            return f"Unknown section: {section}. Valid: rules, display, scan"

        if error:
            # Drop the half-applied change
            self._config = None
            return error

        if scope == "project":
            self.save_project(config)
        else:
            self.save_user(config)

        return None

    def get(self, key: str) -> Optional[str]:
        """Get a configuration value as display text."""
        data = self.load().to_dict()

        parts = key.split(".")
        if len(parts) != 2:
            return None

        section, setting = parts
        value = data.get(section, {}).get(setting)
        if value is None:
            return None
        if isinstance(value, bool):
            return str(value).lower()
        if isinstance(value, list):
            return ",".join(value)
        return str(value)

    def _merge(self, base: Dict, override: Dict) -> Dict:
        """Deep merge two dicts, override wins."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge(result[key], value)
            else:
                result[key] = value
        return result

    def display(self) -> str:
        """Format config for display."""
        config = self.load()
        symbols = get_symbols(config.display.symbols)

        utilities = config.rules.custom_utilities
        excludes = config.scan.exclude_dirs
        lines = [
            "Configuration:",
            "",
            "Rules:",
            f"  Strict BEM: {config.rules.strict_bem}",
            f"  Allow unknown: {config.rules.allow_unknown}",
            f"  Custom utilities: {', '.join(utilities) if utilities else '(none)'}",
            "",
            "Display:",
            f"  Symbols: {config.display.symbols}",
            f"  Format: {config.display.format}",
            "",
            "Scan:",
            f"  Exclude dirs: {', '.join(excludes) if excludes else '(none)'}",
            "",
            "Config files:",
            f"  {symbols.bullet} User: {self.user_config_path}",
            f"  {symbols.bullet} Project: {self.project_config_path}",
        ]

        return "\n".join(lines)


# Convenience function
def get_config(project_dir: Optional[Path] = None) -> Config:
    """Load configuration for a project."""
    return ConfigManager(project_dir).load()
