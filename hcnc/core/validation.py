"""
Validation — Classification results with explanations

Wraps the classifier into ValidationResult records and applies it over
token sequences pulled out of class strings, selectors, and SCSS text.
Output order always follows input order.

Usage:
    from hcnc.core.validation import validate_class_name, get_invalid_classes

    validate_class_name("card_info").kind          # ClassKind.ELEMENT
    get_invalid_classes("card Card card___x")      # two InvalidClass entries
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .classifier import get_class_type
from .config import DEFAULT_CONFIG, NamingConfig
from .diagnostics import build_message, diagnose, unknown_allowed_message
from .parsing.extractors import (
    expand_scss_nesting,
    extract_class_selectors,
    parse_class_string,
)
from .patterns import ClassKind


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validating one token.

    valid=True with kind=None only happens under allow_unknown, and then
    message carries the informational note.
    """
    valid: bool
    kind: Optional[ClassKind] = None
    message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "valid": self.valid,
            "kind": self.kind.value if self.kind else None,
        }
        if self.message is not None:
            data["message"] = self.message
        return data


@dataclass(frozen=True)
class TokenResult:
    """A token paired with its result."""
    token: str
    result: ValidationResult

    def to_dict(self) -> Dict[str, Any]:
        return {"token": self.token, **self.result.to_dict()}


class InvalidClass(TokenResult):
    """A token paired with its failing result."""


def validate_class_name(class_name: str, config: Optional[NamingConfig] = None) -> ValidationResult:
    """
    Validate a single class name.

    Args:
        class_name: Candidate token
        config: NamingConfig (defaults apply if None)

    Returns:
        ValidationResult; failures carry a diagnostic message
    """
    config = config or DEFAULT_CONFIG
    kind = get_class_type(class_name, config)

    if kind is not None:
        return ValidationResult(valid=True, kind=kind)

    if config.allow_unknown:
        return ValidationResult(valid=True, kind=None, message=unknown_allowed_message(class_name))

    return ValidationResult(
        valid=False,
        kind=None,
        message=build_message(class_name, diagnose(class_name)),
    )


def validate_class_string(class_string: str, config: Optional[NamingConfig] = None) -> List[ValidationResult]:
    """Validate every token of a class attribute string, in order."""
    return [validate_class_name(token, config) for token in parse_class_string(class_string)]


def get_invalid_classes(class_string: str, config: Optional[NamingConfig] = None) -> List[InvalidClass]:
    """Return only the failing tokens of a class string, in order."""
    invalid = []
    for token in parse_class_string(class_string):
        result = validate_class_name(token, config)
        if not result.valid:
            invalid.append(InvalidClass(token=token, result=result))
    return invalid


def validate_css_selector(selector: str, config: Optional[NamingConfig] = None) -> List[ValidationResult]:
    """Validate every class referenced by a CSS selector, duplicates included."""
    return [validate_class_name(token, config) for token in extract_class_selectors(selector)]


def validate_scss(scss: str, config: Optional[NamingConfig] = None) -> List[TokenResult]:
    """
    Validate the classes produced by expanding SCSS nesting.

    Returns:
        One TokenResult per expanded class selector, in expansion order
    """
    return [
        TokenResult(token=selector, result=validate_class_name(selector, config))
        for selector in expand_scss_nesting(scss)
    ]
