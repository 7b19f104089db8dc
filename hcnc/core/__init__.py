"""
Core — The classification engine

Pure functions over immutable data: pattern library, classifier,
diagnostics, extraction, and validation. No I/O happens here.
"""

from .patterns import ClassKind, PATTERN_LIBRARY, PATTERNS, GRIT_PATTERNS, UTILITY_CATALOG
from .config import NamingConfig, CustomUtilityError, DEFAULT_CONFIG
from .classifier import (
    is_block, is_element, is_nested_element, is_modifier,
    is_state_class, is_utility_class, is_hcnc_class, get_class_type,
)
from .diagnostics import Suggestion, diagnose, explain
from .validation import (
    ValidationResult, TokenResult, InvalidClass,
    validate_class_name, validate_class_string, get_invalid_classes,
    validate_css_selector, validate_scss,
)

__all__ = [
    # Patterns
    "ClassKind", "PATTERN_LIBRARY", "PATTERNS", "GRIT_PATTERNS", "UTILITY_CATALOG",
    # Config
    "NamingConfig", "CustomUtilityError", "DEFAULT_CONFIG",
    # Classifier
    "is_block", "is_element", "is_nested_element", "is_modifier",
    "is_state_class", "is_utility_class", "is_hcnc_class", "get_class_type",
    # Diagnostics
    "Suggestion", "diagnose", "explain",
    # Validation
    "ValidationResult", "TokenResult", "InvalidClass",
    "validate_class_name", "validate_class_string", "get_invalid_classes",
    "validate_css_selector", "validate_scss",
]
