"""
InitCommand — Register the HCNC lint plugins with BiomeJS

Creates biome.json (schema, recommended linter rules, plugins) or adds
the missing plugin paths to an existing one. Safe to run repeatedly.
"""

import sys

from ..commands.base import BaseCommand
from ..presentation.symbols import safe_print
from ..presentation.template import OutputTemplate
from ..services.biome import BiomeConfigError, BiomeInitializer


class InitCommand(BaseCommand):
    """Command for BiomeJS setup."""

    def init(self) -> int:
        """
        Create or update biome.json in the project directory.

        Returns:
            0 on success (including "nothing to do"), 1 on a bad biome.json
        """
        symbols = self.symbols
        initializer = BiomeInitializer(self.project_dir)

        try:
            result = initializer.init()
        except BiomeConfigError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        name = result.path.name
        if result.created:
            status = f"Created {name} with HCNC plugins"
        elif result.added:
            status = f"Added {result.added} HCNC plugin(s) to {name}"
        else:
            status = f"HCNC plugins already configured in {name}"

        template = OutputTemplate(symbols=symbols)
        template.header("HCNC INIT", "Initializing HCNC for BiomeJS")
        template.section("STATUS", f"{symbols.check_pass} {status}")
        template.section("PLUGINS", "\n".join(
            f"  {symbols.bullet} {plugin}" for plugin in initializer.plugins
        ))
        template.footer(str(result.path))
        safe_print(template.render(command="init", context={"changed": result.changed}))
        return 0


# =============================================================================
# Command Registration (Self-Registration Pattern)
# =============================================================================

def register_parser(subparsers):
    """Register init command parser."""
    p = subparsers.add_parser('init', help='Add HCNC plugins to biome.json')
    return p


def handle(cli, args):
    """Handle init command dispatch."""
    return cli._init_cmd.init()
