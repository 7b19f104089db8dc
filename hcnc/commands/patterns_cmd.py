"""
PatternsCommand — Print the exported pattern sources

Lets editor plugins and lint rules consume the same grammar the
validator uses. Output is JSON unless --list is given.
"""

import json

from ..commands.base import BaseCommand
from ..core.patterns import GRIT_PATTERNS, PATTERNS, UTILITY_CATALOG
from ..presentation.symbols import safe_print


class PatternsCommand(BaseCommand):
    """Command for exporting regex sources."""

    def patterns(self, grit: bool = False, utilities: bool = False, as_list: bool = False) -> int:
        """
        Print pattern sources.

        Args:
            grit: Export the lint-rule names instead of the library names
            utilities: Export the utility catalog grouped by category
            as_list: Human-readable name/source lines instead of JSON
        """
        if utilities:
            data = {category: list(sources) for category, sources in UTILITY_CATALOG.items()}
        else:
            data = dict(GRIT_PATTERNS if grit else PATTERNS)

        if not as_list:
            safe_print(json.dumps(data, indent=2, ensure_ascii=False))
            return 0

        lines = []
        for name, value in data.items():
            if isinstance(value, list):
                lines.append(f"{name}:")
                lines.extend(f"  {self.symbols.bullet} {source}" for source in value)
            else:
                lines.append(f"{name}: {value}")
        safe_print("\n".join(lines))
        return 0


# =============================================================================
# Command Registration (Self-Registration Pattern)
# =============================================================================

COMMAND_NAME = 'patterns'


def register_parser(subparsers):
    """Register patterns command parser."""
    p = subparsers.add_parser('patterns', help='Print the HCNC regex sources')
    p.add_argument('--grit', action='store_true',
                   help='Use the lint-rule names (validHcncClass, ...)')
    p.add_argument('--utilities', action='store_true',
                   help='Print the utility catalog by category')
    p.add_argument('--list', dest='as_list', action='store_true',
                   help='One pattern per line instead of JSON')
    return p


def handle(cli, args):
    """Handle patterns command dispatch."""
    return cli._patterns_cmd.patterns(
        grit=args.grit,
        utilities=args.utilities,
        as_list=args.as_list,
    )
