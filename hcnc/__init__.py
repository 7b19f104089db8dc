"""
HCNC — Hikasami CSS Naming Convention validator

Classifies CSS class names as blocks, elements, modifiers, states, or
utilities, and explains why a name breaks the convention.

Usage:
    hcnc validate "card card_info isActive"
    hcnc validate --selector ".card:hover .card_info"
    hcnc check ./src
    hcnc init
    hcnc patterns

    from hcnc import validate_class_name
    validate_class_name("card__title").message
"""

__version__ = "1.0.0"

# Core layer (engine)
from .core.patterns import ClassKind, PATTERNS, GRIT_PATTERNS
from .core.config import NamingConfig, CustomUtilityError
from .core.classifier import (
    is_block, is_element, is_nested_element, is_modifier,
    is_state_class, is_utility_class, is_hcnc_class, get_class_type,
)
from .core.validation import (
    ValidationResult, InvalidClass,
    validate_class_name, validate_class_string, get_invalid_classes,
    validate_css_selector, validate_scss,
)
from .core.parsing import parse_class_string, extract_class_selectors, expand_scss_nesting

# Services layer
from .services.scanner import Scanner, ScanResult
from .services.biome import BiomeInitializer

__all__ = [
    "__version__",
    # Patterns
    "ClassKind", "PATTERNS", "GRIT_PATTERNS",
    # Config
    "NamingConfig", "CustomUtilityError",
    # Classifier
    "is_block", "is_element", "is_nested_element", "is_modifier",
    "is_state_class", "is_utility_class", "is_hcnc_class", "get_class_type",
    # Validation
    "ValidationResult", "InvalidClass",
    "validate_class_name", "validate_class_string", "get_invalid_classes",
    "validate_css_selector", "validate_scss",
    # Parsing
    "parse_class_string", "extract_class_selectors", "expand_scss_nesting",
    # Services
    "Scanner", "ScanResult", "BiomeInitializer",
]
