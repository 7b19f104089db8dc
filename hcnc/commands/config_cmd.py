"""
ConfigCommand — Configuration management and help

Handles:
- Displaying current configuration
- Setting configuration values (project or user scope)
- Printing the naming-rule help
"""

from ..commands.base import BaseCommand
from ..content import HELP_TEXT
from ..presentation.symbols import safe_print
from ..presentation.template import OutputTemplate


class ConfigCommand(BaseCommand):
    """Command for configuration display and modification."""

    def show_config(self) -> int:
        """Show current configuration."""
        template = OutputTemplate(symbols=self.symbols)
        template.header("HCNC CONFIG", "Current Configuration")
        template.section("SETTINGS", self._cli.config_manager.display())
        safe_print(template.render(command="config", context={}))
        return 0

    def set_config(self, key: str, value: str, scope: str = "project") -> int:
        """Set a configuration value. Returns 1 when the value is rejected."""
        symbols = self.symbols
        manager = self._cli.config_manager
        error = manager.set(key, value, scope)

        template = OutputTemplate(symbols=symbols)

        if error:
            template.header("HCNC CONFIG", "Error")
            template.section("ERROR", error)
            safe_print(template.render(command="config", context={"error": True}))
            return 1

        template.header("HCNC CONFIG", "Configuration Updated")
        template.section("SETTING", f"Set {key} = {value}")
        path = manager.project_config_path if scope == "project" else manager.user_config_path
        template.section("SAVED TO", str(path))
        template.footer(f"{symbols.check_pass} Configuration saved")
        safe_print(template.render(command="config", context={"updated": True}))

        # Later commands in this process see the new value
        self._cli.reload_config()
        return 0

    def help(self) -> int:
        """Print naming rules and usage."""
        safe_print(HELP_TEXT)
        return 0


# =============================================================================
# Command Registration (Self-Registration Pattern)
# =============================================================================

# Multiple commands registered by this module
COMMAND_NAMES = ['config', 'help']


def register_parser(subparsers):
    """Register config and help command parsers."""
    p1 = subparsers.add_parser('config', help='View or set configuration')
    p1.add_argument('--set', metavar='KEY=VALUE',
                    help='Set config value (e.g., rules.strict_bem=true)')
    p1.add_argument('--user', action='store_true',
                    help='Apply to user config instead of project')

    subparsers.add_parser('help', help='Show naming rules and usage')

    return p1


def handle(cli, args):
    """Handle config or help command dispatch."""
    if args.command == 'help':
        return cli._config_cmd.help()

    if args.set:
        if '=' not in args.set:
            print("Error: Use format KEY=VALUE (e.g., rules.strict_bem=true)")
            return 1
        key, value = args.set.split('=', 1)
        scope = "user" if args.user else "project"
        return cli._config_cmd.set_config(key.strip(), value.strip(), scope)

    return cli._config_cmd.show_config()
