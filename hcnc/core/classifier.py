"""
Classifier — Maps (token, config) to a single ClassKind or None

Precedence (first satisfied rule wins):
1. State (isActive, hasError) - most distinctive shape, never swallowed
2. Modifier (block--mod) - contains --
3. Nested element (block_el__nested) - contains __
4. Element (block_el) - contains single _
5. Utility (mt-2, flex) - BEFORE block, because the shapes overlap
6. Block (card, button) - most general pattern

The order lives in PRECEDENCE as data, so each rule can be audited and
tested in isolation. Classification is pure: no caches, no counters.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from .config import DEFAULT_CONFIG, NamingConfig, compile_custom_utilities
from .patterns import PATTERN_LIBRARY, ClassKind


# Syntactic BEM family (states and utilities are valid, but not BEM)
BEM_KINDS = frozenset({
    ClassKind.BLOCK,
    ClassKind.ELEMENT,
    ClassKind.NESTED_ELEMENT,
    ClassKind.MODIFIER,
})


# =============================================================================
# Grammar predicates
# =============================================================================

def is_block(class_name: str) -> bool:
    """Check if a class name is a valid HCNC block."""
    return PATTERN_LIBRARY.grammar(ClassKind.BLOCK).matches(class_name)


def is_element(class_name: str) -> bool:
    """Check if a class name is a valid HCNC element (level 1)."""
    return PATTERN_LIBRARY.grammar(ClassKind.ELEMENT).matches(class_name)


def is_nested_element(class_name: str) -> bool:
    """Check if a class name is a valid HCNC nested element (level 2)."""
    return PATTERN_LIBRARY.grammar(ClassKind.NESTED_ELEMENT).matches(class_name)


def is_modifier(class_name: str) -> bool:
    """Check if a class name is a valid HCNC modifier."""
    return PATTERN_LIBRARY.grammar(ClassKind.MODIFIER).matches(class_name)


def is_state_class(class_name: str) -> bool:
    """Check if a class name is a valid HCNC state (isActive, hasError)."""
    return PATTERN_LIBRARY.grammar(ClassKind.STATE).matches(class_name)


def is_utility_class(class_name: str, custom_patterns: Optional[Sequence[str]] = None) -> bool:
    """
    Check if a class name is a valid utility class.

    Args:
        class_name: Candidate class name
        custom_patterns: Additional regex sources, compiled for this call

    Returns:
        True if any builtin or custom utility grammar matches

    Raises:
        CustomUtilityError: If a custom pattern fails to compile
    """
    extra = compile_custom_utilities(custom_patterns) if custom_patterns else ()
    return PATTERN_LIBRARY.is_utility(class_name, extra)


# =============================================================================
# Precedence table
# =============================================================================

@dataclass(frozen=True)
class Rule:
    """One precedence slot: the kind it yields and the predicate that claims it."""
    kind: ClassKind
    predicate: Callable[[str, NamingConfig], bool]

    def applies(self, token: str, config: NamingConfig) -> bool:
        return self.predicate(token, config)


def _grammar_rule(kind: ClassKind) -> Rule:
    grammar = PATTERN_LIBRARY.grammar(kind)
    return Rule(kind=kind, predicate=lambda token, _config: grammar.matches(token))


def _utility_predicate(token: str, config: NamingConfig) -> bool:
    return PATTERN_LIBRARY.is_utility(token, config.compiled_utilities)


PRECEDENCE: Tuple[Rule, ...] = (
    _grammar_rule(ClassKind.STATE),
    _grammar_rule(ClassKind.MODIFIER),
    _grammar_rule(ClassKind.NESTED_ELEMENT),
    _grammar_rule(ClassKind.ELEMENT),
    Rule(kind=ClassKind.UTILITY, predicate=_utility_predicate),
    _grammar_rule(ClassKind.BLOCK),
)


def match_rules(class_name: str, config: Optional[NamingConfig] = None) -> List[ClassKind]:
    """
    List every kind whose rule holds for the token, in precedence order.

    Useful for explaining why an ambiguous token got its kind: the first
    entry is the winner (before strict-mode filtering).
    """
    config = config or DEFAULT_CONFIG
    return [rule.kind for rule in PRECEDENCE if rule.applies(class_name, config)]


def get_class_type(class_name: str, config: Optional[NamingConfig] = None) -> Optional[ClassKind]:
    """
    Get the kind of a class name.

    In strict mode a utility match yields None and still consumes the slot:
    a utility-shaped token is not re-offered to the block rule.

    Args:
        class_name: Candidate class name
        config: NamingConfig (defaults apply if None)

    Returns:
        ClassKind, or None if no rule matched
    """
    config = config or DEFAULT_CONFIG

    for rule in PRECEDENCE:
        if not rule.applies(class_name, config):
            continue
        if rule.kind is ClassKind.UTILITY and config.strict_bem:
            return None
        return rule.kind

    return None


def is_hcnc_class(class_name: str) -> bool:
    """
    Check if a class name is a BEM-family class (block, element, nested, modifier).

    Note: States and utilities are valid HCNC kinds but excluded here.
    """
    return get_class_type(class_name) in BEM_KINDS
