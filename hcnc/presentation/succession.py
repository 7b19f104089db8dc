"""
Command Succession — Data-driven next-step guidance

Each command knows what usually comes next, with conditions for
context-aware hints:
- init -> biome check (lint with the installed plugins)
- validate (failed) -> help (naming rules)
- check (failed) -> validate one class for the full explanation
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class NextStep:
    """Single next-step hint with optional condition."""
    command: Optional[str]    # e.g., "validate" (None = terminal)
    label: str                # e.g., "hcnc validate <class>"
    condition: str = None     # When to show (None = always)
    why: str = None           # Brief rationale


@dataclass
class Succession:
    """Succession rules for a command."""
    default: NextStep
    alternatives: List[NextStep] = field(default_factory=list)


RULES: Dict[str, Succession] = {
    "init": Succession(
        default=NextStep(None, "biome check ./src",
                         why="HCNC validates class names in JSX/TSX and CSS/SCSS files"),
    ),

    "validate": Succession(
        default=NextStep(None, "All classes are valid", condition="passed"),
        alternatives=[
            NextStep("help", "hcnc help", condition="has_invalid",
                     why="See the naming rules"),
        ]
    ),

    "check": Succession(
        default=NextStep(None, "All classes are valid", condition="passed"),
        alternatives=[
            NextStep("config", "hcnc config", condition="has_unreadable",
                     why="Exclude directories with unreadable files"),
            NextStep("validate", "hcnc validate <class>", condition="has_invalid",
                     why="Explain a single class"),
        ]
    ),
}


def get_hint(command: str, context: dict = None) -> Optional[str]:
    """
    Get contextual next-step hint for command.

    Args:
        command: Command that just ran (e.g., "check")
        context: Result state flags (e.g., {"has_invalid": True})

    Returns:
        Formatted hint string or None
    """
    context = context or {}
    rules = RULES.get(command)

    if not rules:
        return None

    # Alternatives take precedence when their condition holds
    for alt in rules.alternatives:
        if alt.condition and context.get(alt.condition):
            return _format_hint(alt)

    if rules.default.condition and not context.get(rules.default.condition):
        return None

    return _format_hint(rules.default)


def _format_hint(step: NextStep) -> str:
    """Format NextStep as display hint."""
    if not step.command:
        return f"-> {step.label}" + (f"  ({step.why})" if step.why else "")

    hint = f"-> Next: {step.label}"
    if step.why:
        hint += f"  ({step.why})"
    return hint
