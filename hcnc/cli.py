"""
CLI -- Command interface for the HCNC validator

Quiet by default: results on stdout, warnings on stderr, debug logging
only with --verbose. Exit code 1 whenever a class fails validation.
"""

import argparse
import atexit
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .commands.check import CheckCommand
from .commands.config_cmd import ConfigCommand
from .commands.init_cmd import InitCommand
from .commands.patterns_cmd import PatternsCommand
from .commands.validate_cmd import ValidateCommand
from .config import ConfigManager
from .core.config import NamingConfig
from .orchestrator import get_orchestrator
from .presentation.symbols import get_symbols


LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"

_log_handler: Optional[logging.Handler] = None


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Attach a single stderr handler to the package logger.

    Repeated calls (tests invoking main() several times) replace the
    handler instead of stacking them.
    """
    global _log_handler

    logger = logging.getLogger("hcnc")
    if _log_handler is not None:
        logger.removeHandler(_log_handler)

    _log_handler = logging.StreamHandler(sys.stderr)
    _log_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_log_handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger


class HcncCLI:
    """Command-line interface for the HCNC class name validator."""

    def __init__(self, project_dir: Path):
        self.project_dir = Path(project_dir)
        self.config_manager = ConfigManager(self.project_dir)
        self.config = self.config_manager.load()

        # Initialize symbols based on config
        self.symbols = get_symbols(self.config.display.symbols)

        # Compiled on first use so a bad custom utility only fails commands that classify
        self._naming_config: Optional[NamingConfig] = None

        # Initialize task orchestrator for parallel scans (lazy, respects env)
        self._orchestrator = None
        atexit.register(self._shutdown_orchestrator)

        # Initialize command handlers (modular architecture)
        self._validate_cmd = ValidateCommand(self)
        self._check_cmd = CheckCommand(self)
        self._init_cmd = InitCommand(self)
        self._patterns_cmd = PatternsCommand(self)
        self._config_cmd = ConfigCommand(self)

    @property
    def naming_config(self) -> NamingConfig:
        """
        Engine configuration built from the loaded settings.

        Raises:
            CustomUtilityError: If a configured custom utility does not compile
        """
        if self._naming_config is None:
            self._naming_config = self.config.naming_config()
        return self._naming_config

    def reload_config(self) -> None:
        """Re-read configuration after it was changed on disk."""
        self.config = self.config_manager.load()
        self.symbols = get_symbols(self.config.display.symbols)
        self._naming_config = None

    @property
    def orchestrator(self):
        """
        Get task orchestrator for parallel execution (lazy initialization).

        Returns global orchestrator instance, created on first access.
        Configuration loaded from environment variables.
        """
        if self._orchestrator is None:
            self._orchestrator = get_orchestrator()
        return self._orchestrator

    def _shutdown_orchestrator(self):
        """Shutdown orchestrator on process exit (atexit handler)."""
        if self._orchestrator is not None:
            self._orchestrator.shutdown(wait=True)

    def render(self, spec: 'OutputSpec', format: str = 'auto') -> str:
        """
        Render OutputSpec with the configured symbols.

        Centralized render method for all command output. Commands should
        use this instead of calling output.render() directly.
        """
        from hcnc.output import render as output_render
        return output_render(spec, format=format, symbols=self.symbols)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the HCNC CLI.

    Uses command registry pattern for modular command handling.
    Parser definitions and dispatch logic are in individual command modules.

    Returns:
        Process exit code
    """
    parser = argparse.ArgumentParser(
        prog="hcnc",
        description="HCNC -- Hikasami CSS Naming Convention validator",
        epilog="Run 'hcnc help' for the naming rules.",
    )

    parser.add_argument(
        '--project', '-p',
        default=os.environ.get("HCNC_PROJECT_PATH", "."),
        help='Project directory (default: HCNC_PROJECT_PATH or current)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Debug logging on stderr'
    )

    parser.add_argument(
        '--version', '-V',
        action='version',
        version=f'hcnc {__version__}'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Register all commands from command modules (self-registration pattern)
    from .commands import register_all, dispatch
    register_all(subparsers)

    # Parse arguments and dispatch to registered handler
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    setup_logging(args.verbose)

    # Initialize CLI and dispatch to command handler
    cli = HcncCLI(Path(args.project))

    try:
        return dispatch(args.command, cli, args)
    except KeyError as e:
        print(f"Error: {e}", file=sys.stderr)
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
