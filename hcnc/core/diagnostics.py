"""
Diagnostics — Explains why a class name failed classification

Pattern-matches the shape of the failure (not the grammars) and produces
targeted suggestions. Each check is independent; every applicable
suggestion ends up in the message.

Checks:
- Lone double underscore (card__title): probably meant an L1 element
- is/has prefix without an uppercase letter (isactive): camelCase state
- Uppercase in a non-state class: HCNC is lowercase except states
- Three or more underscores: nesting is capped at two levels
"""

import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .classifier import is_state_class


_DOUBLE_UNDERSCORE = re.compile(r"(?<!_)__(?!_)")
_SINGLE_UNDERSCORE = re.compile(r"(?<!_)_(?!_)")
_TRIPLE_UNDERSCORE = re.compile(r"___")
_UPPERCASE = re.compile(r"[A-Z]")

STATE_PREFIXES = ("is", "has")


@dataclass(frozen=True)
class Suggestion:
    """One diagnostic finding for a failed class name."""
    check: str  # Which heuristic produced it
    text: str

    def __str__(self) -> str:
        return self.text


# =============================================================================
# Heuristic checks
# =============================================================================

def _check_double_underscore(class_name: str) -> Optional[Suggestion]:
    if _DOUBLE_UNDERSCORE.search(class_name) and not _SINGLE_UNDERSCORE.search(class_name):
        fixed = _DOUBLE_UNDERSCORE.sub("_", class_name, count=1)
        return Suggestion(
            check="double-underscore",
            text=f'Use single underscore for first-level elements: "{fixed}"',
        )
    return None


def _camel_state(prefix: str, class_name: str) -> Optional[Suggestion]:
    if not class_name.startswith(prefix):
        return None
    rest = class_name[len(prefix):]
    if _UPPERCASE.match(rest):
        return None
    rest = rest.lstrip("-_")
    if not rest:
        return None
    fixed = f"{prefix}{rest[0].upper()}{rest[1:]}"
    return Suggestion(
        check=f"{prefix}-prefix",
        text=f'State classes should use camelCase: "{fixed}"',
    )


def _check_is_prefix(class_name: str) -> Optional[Suggestion]:
    return _camel_state("is", class_name)


def _check_has_prefix(class_name: str) -> Optional[Suggestion]:
    return _camel_state("has", class_name)


def _check_uppercase(class_name: str) -> Optional[Suggestion]:
    if _UPPERCASE.search(class_name) and not is_state_class(class_name):
        return Suggestion(
            check="uppercase",
            text="HCNC classes (except states) should be lowercase",
        )
    return None


def _check_nesting_depth(class_name: str) -> Optional[Suggestion]:
    if _TRIPLE_UNDERSCORE.search(class_name):
        return Suggestion(
            check="nesting-depth",
            text="Maximum nesting is 2 levels (use __ for nested elements)",
        )
    return None


CHECKS: Tuple[Callable[[str], Optional[Suggestion]], ...] = (
    _check_double_underscore,
    _check_is_prefix,
    _check_has_prefix,
    _check_uppercase,
    _check_nesting_depth,
)


# =============================================================================
# Public API
# =============================================================================

def diagnose(class_name: str) -> List[Suggestion]:
    """
    Run every heuristic check against a failed class name.

    Args:
        class_name: A token that matched no grammar

    Returns:
        All applicable suggestions, in check order (may be empty)
    """
    suggestions = []
    for check in CHECKS:
        suggestion = check(class_name)
        if suggestion is not None:
            suggestions.append(suggestion)
    return suggestions


def build_message(class_name: str, suggestions: List[Suggestion]) -> str:
    """Format the failure message for a class name."""
    if suggestions:
        joined = ". ".join(s.text for s in suggestions)
        return f'Class "{class_name}" does not match HCNC convention. {joined}'
    return f'Class "{class_name}" does not match HCNC naming convention'


def unknown_allowed_message(class_name: str) -> str:
    """Informational message for unknown classes passed by allow_unknown."""
    return f'Unknown class "{class_name}" (allowed by config)'


def explain(class_name: str) -> str:
    """Diagnose and format in one step."""
    return build_message(class_name, diagnose(class_name))
