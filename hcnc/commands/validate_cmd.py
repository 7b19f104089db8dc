"""
ValidateCommand — Validate class names given on the command line

Three input modes:
- Class string (default): "card card_info isActive"
- CSS selector (--selector): ".card:hover .card_info.isActive"
- SCSS file (--scss FILE): nested selectors are expanded first
"""

import sys
from pathlib import Path
from typing import List, Optional

from ..commands.base import BaseCommand
from ..core.config import CustomUtilityError
from ..core.parsing import extract_class_selectors, parse_class_string
from ..core.validation import TokenResult, validate_class_name, validate_scss
from ..output import OutputSpec
from ..presentation.symbols import safe_print


class ValidateCommand(BaseCommand):
    """Validate tokens and report each result with its explanation."""

    def validate(
        self,
        classes: List[str],
        selector: bool = False,
        scss: Optional[str] = None,
        strict: bool = False,
        allow_unknown: bool = False,
        output_format: Optional[str] = None,
    ) -> int:
        """
        Validate the given input.

        Returns:
            0 if every token is valid, 1 otherwise (or on input errors)
        """
        try:
            config = self.naming_config(strict=strict, allow_unknown=allow_unknown)
        except CustomUtilityError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        if scss:
            try:
                content = Path(scss).read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                print(f"Error reading {scss}: {e}", file=sys.stderr)
                return 1
            source = scss
            checked = validate_scss(content, config)
        else:
            source = " ".join(classes)
            tokens = extract_class_selectors(source) if selector else parse_class_string(source)
            checked = [TokenResult(token=t, result=validate_class_name(t, config)) for t in tokens]

        invalid = [c for c in checked if not c.result.valid]
        passed = not invalid

        spec = OutputSpec(
            data={
                "input": source,
                "items": [c.to_dict() for c in checked],
                "summary": {"total": len(checked), "invalid": len(invalid)},
                "_status": {
                    "ok": passed,
                    "message": "All classes are valid!" if passed
                    else "Some classes do not follow HCNC convention.",
                },
            },
            shape="list",
            title=f"Validating classes: {source}",
            empty_message="No classes found.",
            command="validate",
            context={"passed": passed, "has_invalid": not passed},
        )
        safe_print(self.render(spec, format=self.output_format(output_format)))
        return 0 if passed else 1


# =============================================================================
# Command Registration (Self-Registration Pattern)
# =============================================================================

COMMAND_NAME = 'validate'


def register_parser(subparsers):
    """Register validate command parser."""
    p = subparsers.add_parser('validate', help='Validate a class string, selector, or SCSS file')
    p.add_argument('classes', nargs='*',
                   help='Class names (e.g., "card card_info isActive")')
    p.add_argument('--selector', action='store_true',
                   help='Treat the input as a CSS selector')
    p.add_argument('--scss', metavar='FILE',
                   help='Expand and validate the selectors of an SCSS file')
    p.add_argument('--strict', action='store_true',
                   help='Reject utility classes (strict BEM)')
    p.add_argument('--allow-unknown', action='store_true',
                   help='Pass unknown classes with a note')
    p.add_argument('--format', choices=['auto', 'list', 'json'],
                   help='Output format (default: display.format)')
    p.set_defaults(validate_parser=p)
    return p


def handle(cli, args):
    """Handle validate command dispatch."""
    if not args.classes and not args.scss:
        # Exits with status 2, like any other argparse usage error
        args.validate_parser.error("provide class names to validate or --scss FILE")
    return cli._validate_cmd.validate(
        args.classes,
        selector=args.selector,
        scss=args.scss,
        strict=args.strict,
        allow_unknown=args.allow_unknown,
        output_format=args.format,
    )
