"""
Tests for the Classifier — precedence, strict mode, and custom utilities.

Tests validate:
- First-match-wins precedence (state, modifier, nested, element, utility, block)
- Strict mode rejects utility-shaped tokens without falling back to block
- is_hcnc_class covers the BEM family only
- Custom utility sources are compiled eagerly and matched as full tokens
- Classification is deterministic
"""

import pytest

from hcnc.core.classifier import (
    BEM_KINDS,
    PRECEDENCE,
    get_class_type,
    is_block,
    is_element,
    is_hcnc_class,
    is_modifier,
    is_nested_element,
    is_state_class,
    is_utility_class,
    match_rules,
)
from hcnc.core.config import CustomUtilityError, NamingConfig
from hcnc.core.patterns import ClassKind


STRICT = NamingConfig(strict_bem=True)


class TestPredicates:
    """Single-grammar predicates."""

    def test_each_predicate(self):
        assert is_block("card")
        assert is_element("card_info")
        assert is_nested_element("card_info__title")
        assert is_modifier("card--big")
        assert is_state_class("hasError")
        assert is_utility_class("mt-2")

    def test_utility_with_custom_sources(self):
        assert not is_utility_class("u:red")
        assert is_utility_class("u:red", [r"^u:[a-z]+$"])

    def test_utility_with_bad_custom_source(self):
        with pytest.raises(CustomUtilityError):
            is_utility_class("x", ["("])


class TestPrecedence:
    """Overlapping grammars resolve in table order."""

    def test_table_order(self):
        assert [rule.kind for rule in PRECEDENCE] == [
            ClassKind.STATE,
            ClassKind.MODIFIER,
            ClassKind.NESTED_ELEMENT,
            ClassKind.ELEMENT,
            ClassKind.UTILITY,
            ClassKind.BLOCK,
        ]

    @pytest.mark.parametrize("token,kind", [
        ("card", ClassKind.BLOCK),
        ("header-nav", ClassKind.BLOCK),
        ("card_info", ClassKind.ELEMENT),
        ("card_info__title", ClassKind.NESTED_ELEMENT),
        ("card--highlighted", ClassKind.MODIFIER),
        ("card_info--active", ClassKind.MODIFIER),
        ("isActive", ClassKind.STATE),
        ("hasError", ClassKind.STATE),
        ("mt-2", ClassKind.UTILITY),
        ("flex", ClassKind.UTILITY),
        ("text-center", ClassKind.UTILITY),
    ])
    def test_kinds(self, token, kind):
        assert get_class_type(token) is kind

    def test_utility_beats_block(self):
        """flex is block-shaped but the utility rule comes first."""
        assert is_block("flex")
        assert match_rules("flex") == [ClassKind.UTILITY, ClassKind.BLOCK]
        assert get_class_type("flex") is ClassKind.UTILITY

    def test_block_only_token(self):
        assert match_rules("card") == [ClassKind.BLOCK]

    @pytest.mark.parametrize("token", ["card__title", "card___triple", "Card", "1card", "is-Active", ""])
    def test_unknown_tokens(self, token):
        assert get_class_type(token) is None

    def test_triple_underscore(self):
        assert get_class_type("card___triple") is None
        assert match_rules("card___triple") == []

    def test_deterministic(self):
        config = NamingConfig(custom_utilities=(r"^u:[a-z]+$",))
        for token in ("card", "mt-2", "u:red", "Bad", "isOpen"):
            assert get_class_type(token, config) is get_class_type(token, config)


class TestStrictMode:
    """strict_bem forbids utilities, shape included."""

    def test_utility_rejected(self):
        assert get_class_type("mt-2", STRICT) is None
        assert get_class_type("mt-2", NamingConfig(strict_bem=False)) is ClassKind.UTILITY

    def test_block_shaped_utility_not_reoffered_to_block(self):
        assert get_class_type("flex", STRICT) is None

    def test_bem_kinds_unaffected(self):
        assert get_class_type("card", STRICT) is ClassKind.BLOCK
        assert get_class_type("isActive", STRICT) is ClassKind.STATE
        assert get_class_type("card_info__title", STRICT) is ClassKind.NESTED_ELEMENT


class TestIsHcncClass:
    """BEM family membership."""

    @pytest.mark.parametrize("token", ["card", "card_info", "card_info__title", "card--big"])
    def test_bem_family(self, token):
        assert get_class_type(token) in BEM_KINDS
        assert is_hcnc_class(token)

    @pytest.mark.parametrize("token", ["isActive", "hasError", "mt-2", "flex"])
    def test_states_and_utilities_excluded(self, token):
        assert get_class_type(token) in (ClassKind.STATE, ClassKind.UTILITY)
        assert not is_hcnc_class(token)

    def test_unknown_excluded(self):
        assert not is_hcnc_class("card__title")


class TestCustomUtilities:
    """Caller-supplied utility grammars."""

    def test_custom_source_classifies_as_utility(self):
        config = NamingConfig(custom_utilities=(r"^u:[a-z]+$",))
        assert get_class_type("u:red") is None
        assert get_class_type("u:red", config) is ClassKind.UTILITY

    def test_custom_source_overrides_block(self):
        config = NamingConfig(custom_utilities=(r"^brand-[a-z]+$",))
        assert get_class_type("brand-blue") is ClassKind.BLOCK
        assert get_class_type("brand-blue", config) is ClassKind.UTILITY

    def test_unanchored_source_still_needs_full_token(self):
        config = NamingConfig(custom_utilities=("u:",))
        assert get_class_type("u:red", config) is None

    def test_compiled_once_at_construction(self):
        config = NamingConfig(custom_utilities=[r"^u:[a-z]+$", r"^v:\d+$"])
        assert isinstance(config.custom_utilities, tuple)
        assert len(config.compiled_utilities) == 2

    def test_compile_failure_names_source(self):
        with pytest.raises(CustomUtilityError) as exc_info:
            NamingConfig(custom_utilities=(r"^ok$", "[unclosed"))
        error = exc_info.value
        assert error.index == 1
        assert error.source == "[unclosed"
        assert "[unclosed" in str(error)
        assert isinstance(error, ValueError)

    def test_empty_source_rejected(self):
        with pytest.raises(CustomUtilityError, match="empty"):
            NamingConfig(custom_utilities=("",))

    def test_replace_and_round_trip(self):
        config = NamingConfig(custom_utilities=(r"^u:[a-z]+$",))
        strict = config.replace(strict_bem=True)
        assert strict.strict_bem and not config.strict_bem
        assert strict.compiled_utilities
        assert NamingConfig.from_dict(strict.to_dict()) == strict

    def test_from_dict_defaults(self):
        assert NamingConfig.from_dict(None) == NamingConfig()

    def test_bare_string_sources_rejected(self):
        with pytest.raises(TypeError, match="single str"):
            NamingConfig(custom_utilities="brand")

    def test_from_dict_reads_text_values(self):
        config = NamingConfig.from_dict({
            "custom_utilities": "brand",
            "strict_bem": "false",
            "allow_unknown": "yes",
        })
        assert config.custom_utilities == ("brand",)
        assert config.strict_bem is False
        assert config.allow_unknown is True

    def test_from_dict_rejects_non_boolean_flag(self):
        with pytest.raises(ValueError, match="strict_bem"):
            NamingConfig.from_dict({"strict_bem": "sometimes"})
