"""
Tests for the Pattern Library — grammars as immutable data.

Tests validate:
- Each BEM-family grammar accepts and rejects the documented shapes
- Full-token matching (no substring matches)
- Utility catalog lookups and categories
- The exported pattern sources agree with the compiled grammars
"""

import re

import pytest

from hcnc.core.patterns import (
    ClassKind,
    GRIT_PATTERNS,
    PATTERN_LIBRARY,
    PATTERNS,
    UTILITY_CATALOG,
    Grammar,
    PatternLibrary,
)


def _grammar(kind):
    return PATTERN_LIBRARY.grammar(kind)


class TestBlockGrammar:
    """Block: lowercase alphanumeric groups joined by single hyphens."""

    @pytest.mark.parametrize("token", ["card", "button", "header-nav", "a1", "nav-2-col"])
    def test_accepts_blocks(self, token):
        assert _grammar(ClassKind.BLOCK).matches(token)

    @pytest.mark.parametrize("token", [
        "1card", "Card", "-card", "card-", "card--big", "card_info", "card nav", "",
    ])
    def test_rejects_non_blocks(self, token):
        assert not _grammar(ClassKind.BLOCK).matches(token)


class TestElementGrammars:
    """Element L1 (one underscore) and L2 (underscore then double underscore)."""

    def test_element(self):
        grammar = _grammar(ClassKind.ELEMENT)
        assert grammar.matches("card_info")
        assert grammar.matches("header-nav_link-item")
        assert not grammar.matches("card__info")
        assert not grammar.matches("card_info_more")

    def test_nested_element(self):
        grammar = _grammar(ClassKind.NESTED_ELEMENT)
        assert grammar.matches("card_info__title")
        assert not grammar.matches("card__title")
        assert not grammar.matches("card_info__title__more")

    @pytest.mark.parametrize("token", ["card___title", "card_info___title", "card____x"])
    def test_triple_underscore_never_matches(self, token):
        """Three or more underscores match no grammar at all."""
        for kind in (ClassKind.BLOCK, ClassKind.ELEMENT, ClassKind.NESTED_ELEMENT,
                     ClassKind.MODIFIER, ClassKind.STATE):
            assert not _grammar(kind).matches(token)
        assert not PATTERN_LIBRARY.is_utility(token)


class TestModifierGrammar:
    """Modifier: block or element followed by --segment."""

    @pytest.mark.parametrize("token", [
        "card--highlighted", "card_info--active", "card_info__title--big", "btn--x-large",
    ])
    def test_accepts_modifiers(self, token):
        assert _grammar(ClassKind.MODIFIER).matches(token)

    @pytest.mark.parametrize("token", ["card-big", "card---big", "card--Big", "--big", "card--"])
    def test_rejects_bad_separators(self, token):
        assert not _grammar(ClassKind.MODIFIER).matches(token)


class TestStateGrammar:
    """State: is/has then an uppercase letter, camelCase body."""

    @pytest.mark.parametrize("token", ["isActive", "hasError", "isLoading2", "isA"])
    def test_accepts_states(self, token):
        assert _grammar(ClassKind.STATE).matches(token)

    @pytest.mark.parametrize("token", ["isactive", "is-active", "isActive_x", "wasActive", "is"])
    def test_rejects_non_states(self, token):
        assert not _grammar(ClassKind.STATE).matches(token)


class TestUtilityCatalog:
    """Utility grammars are matched as a set."""

    @pytest.mark.parametrize("token", [
        "flex", "mt-2", "-mx-4", "p-0.5", "text-center", "text-sm", "w-1/2", "grid-cols-3",
        "rounded-lg", "shadow",
    ])
    def test_known_utilities(self, token):
        assert PATTERN_LIBRARY.is_utility(token)

    def test_substring_is_not_enough(self):
        assert not PATTERN_LIBRARY.is_utility("flexbox-card")
        assert not PATTERN_LIBRARY.is_utility("xmt-2")

    def test_find_utility_reports_category(self):
        grammar = PATTERN_LIBRARY.find_utility("mt-2")
        assert grammar is not None
        assert grammar.name == "utility:spacing"
        assert grammar.kind is ClassKind.UTILITY

    def test_find_utility_none(self):
        assert PATTERN_LIBRARY.find_utility("card") is None

    def test_categories_follow_catalog_order(self):
        assert PATTERN_LIBRARY.categories() == list(UTILITY_CATALOG.keys())

    def test_extra_patterns_are_full_token(self):
        extra = (re.compile(r"u:[a-z]+"),)
        assert PATTERN_LIBRARY.is_utility("u:red", extra)
        assert not PATTERN_LIBRARY.is_utility("u:red!", extra)


class TestPatternLibrary:
    """Library construction rules."""

    def test_duplicate_kind_rejected(self):
        grammars = [
            Grammar.build("a", ClassKind.BLOCK, r"^a$"),
            Grammar.build("b", ClassKind.BLOCK, r"^b$"),
        ]
        with pytest.raises(ValueError, match="Duplicate grammar"):
            PatternLibrary(grammars, [])

    def test_utility_kind_has_no_single_grammar(self):
        with pytest.raises(KeyError):
            PATTERN_LIBRARY.grammar(ClassKind.UTILITY)

    def test_size_counts_every_grammar(self):
        total = sum(len(sources) for sources in UTILITY_CATALOG.values())
        assert len(PATTERN_LIBRARY) == 5 + total

    def test_class_kind_str_is_value(self):
        assert str(ClassKind.NESTED_ELEMENT) == "nested-element"


class TestPatternExports:
    """Exported sources drive external lint rules."""

    def test_export_names(self):
        assert set(PATTERNS) == {
            "block", "element", "nestedElement", "modifier", "state", "hcnc", "hcncWithState",
        }

    def test_exports_are_read_only(self):
        with pytest.raises(TypeError):
            PATTERNS["block"] = ".*"

    def test_sources_match_grammars(self):
        assert PATTERNS["block"] == _grammar(ClassKind.BLOCK).source
        assert PATTERNS["state"] == _grammar(ClassKind.STATE).source

    @pytest.mark.parametrize("token,in_hcnc,in_with_state", [
        ("card", True, True),
        ("card_info__title", True, True),
        ("card--big", True, True),
        ("isActive", False, True),
        ("card__title", False, False),
    ])
    def test_alternations(self, token, in_hcnc, in_with_state):
        assert bool(re.fullmatch(PATTERNS["hcnc"], token, re.ASCII)) is in_hcnc
        assert bool(re.fullmatch(PATTERNS["hcncWithState"], token, re.ASCII)) is in_with_state

    def test_grit_names(self):
        assert GRIT_PATTERNS["validHcncClass"] == PATTERNS["hcncWithState"]
        assert "hcnc" not in GRIT_PATTERNS
