"""
BaseCommand — Shared foundation for all CLI commands

Provides access to CLI resources via composition.
Commands receive the CLI instance and access its resources through properties.
"""

from typing import TYPE_CHECKING, Optional

from ..core.config import NamingConfig

if TYPE_CHECKING:
    from ..cli import HcncCLI
    from ..output import OutputSpec


class BaseCommand:
    """
    Base class for CLI commands with access to shared resources.

    Commands don't reinitialize resources; they access them via the CLI instance.
    """

    def __init__(self, cli: 'HcncCLI'):
        self._cli = cli

    @property
    def project_dir(self):
        """Project root directory."""
        return self._cli.project_dir

    @property
    def config(self):
        """Application configuration."""
        return self._cli.config

    @property
    def symbols(self):
        """Symbol set for display (Unicode/ASCII)."""
        return self._cli.symbols

    def naming_config(self, strict: bool = False, allow_unknown: bool = False) -> NamingConfig:
        """
        Engine config from settings, with per-invocation flags switched on.

        Raises:
            CustomUtilityError: If a configured custom utility does not compile
        """
        config = self._cli.naming_config
        changes = {}
        if strict:
            changes["strict_bem"] = True
        if allow_unknown:
            changes["allow_unknown"] = True
        return config.replace(**changes) if changes else config

    def output_format(self, requested: Optional[str]) -> str:
        """Explicit --format wins, then display.format from config."""
        return requested or self.config.display.format

    def render(self, spec: 'OutputSpec', format: str = 'auto') -> str:
        return self._cli.render(spec, format=format)
