"""
CheckCommand — Validate every class name in a source tree

Walks the directory (see services.scanner for the walk rules), then
prints the invalid classes grouped by file, or a summary when all pass.
"""

import sys
from pathlib import Path
from typing import Optional

from ..commands.base import BaseCommand
from ..core.config import CustomUtilityError
from ..core.parsing import ExclusionConfig
from ..output import OutputSpec
from ..presentation.symbols import safe_print
from ..services.scanner import Scanner, ScanResult


class CheckCommand(BaseCommand):
    """Batch-check a directory against the naming convention."""

    def check(
        self,
        path: str,
        strict: bool = False,
        allow_unknown: bool = False,
        output_format: Optional[str] = None,
    ) -> int:
        """
        Scan path and report.

        Returns:
            0 if no invalid class was found, 1 otherwise (or on errors)
        """
        try:
            config = self.naming_config(strict=strict, allow_unknown=allow_unknown)
        except CustomUtilityError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        scanner = Scanner(
            config=config,
            exclusions=ExclusionConfig(self.config.scan.exclude_dirs),
            orchestrator=self._cli.orchestrator,
        )

        try:
            result = scanner.scan(Path(path))
        except FileNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        safe_print(self.render(self._build_spec(result), format=self.output_format(output_format)))
        return 0 if result.passed else 1

    def _build_spec(self, result: ScanResult) -> OutputSpec:
        invalid = result.invalid_count
        groups = [
            {
                "name": file,
                "items": [
                    {"token": f.token, "valid": False, "kind": None, "message": f.message}
                    for f in findings
                ],
            }
            for file, findings in result.invalid_by_file().items()
        ]

        data = result.to_dict()
        data["_groups"] = groups
        data["_metrics"] = {
            "Files checked": result.total_files,
            "Classes found": result.total_classes,
            "Invalid classes": invalid,
            "Unreadable files": len(result.unreadable),
        }
        data["_warnings"] = [f"Could not scan {r.path}: {r.error}" for r in result.unreadable]
        data["_status"] = {
            "ok": result.passed,
            "message": "All classes are valid!" if result.passed
            else f"Found {invalid} invalid class(es)",
        }

        return OutputSpec(
            data=data,
            shape="list" if groups else "summary",
            title=f"Checking directory: {result.root}",
            empty_message="No invalid classes found.",
            command="check",
            context={
                "passed": result.passed,
                "has_invalid": not result.passed,
                "has_unreadable": bool(result.unreadable),
            },
        )


# =============================================================================
# Command Registration (Self-Registration Pattern)
# =============================================================================

COMMAND_NAME = 'check'


def register_parser(subparsers):
    """Register check command parser."""
    p = subparsers.add_parser('check', help='Check class names in files under a directory')
    p.add_argument('path', help='Directory (or single file) to check')
    p.add_argument('--strict', action='store_true',
                   help='Reject utility classes (strict BEM)')
    p.add_argument('--allow-unknown', action='store_true',
                   help='Pass unknown classes with a note')
    p.add_argument('--format', choices=['auto', 'list', 'summary', 'json'],
                   help='Output format (default: display.format)')
    return p


def handle(cli, args):
    """Handle check command dispatch."""
    return cli._check_cmd.check(
        args.path,
        strict=args.strict,
        allow_unknown=args.allow_unknown,
        output_format=args.format,
    )
