"""
Tests for Extractors — class tokens from strings, selectors, SCSS, and files.
"""

from hcnc.core.parsing.extractors import (
    expand_scss_nesting,
    extract_class_selectors,
    extract_html_classes,
    extract_markup_classes,
    extract_stylesheet_classes,
    parse_class_string,
    unique,
)
from tests.factories import VALID_SCSS


class TestParseClassString:
    """Whitespace-delimited parse."""

    def test_empty(self):
        assert parse_class_string("") == []
        assert parse_class_string(" \t\n ") == []

    def test_whitespace_runs(self):
        assert parse_class_string("a   b\tc\nd") == ["a", "b", "c", "d"]

    def test_leading_and_trailing(self):
        assert parse_class_string("  card card_info  ") == ["card", "card_info"]


class TestExtractClassSelectors:
    """Dot-prefixed identifiers in selectors."""

    def test_pseudo_and_compound(self):
        assert extract_class_selectors(".card:hover .card_info.isActive") == [
            "card", "card_info", "isActive",
        ]

    def test_ids_and_elements_ignored(self):
        assert extract_class_selectors("#main > div.card ul li") == ["card"]

    def test_duplicates_retained(self):
        assert extract_class_selectors(".a .b .a") == ["a", "b", "a"]

    def test_identifier_rules(self):
        assert extract_class_selectors("._private .-bad .9bad .ok-1") == ["_private", "ok-1"]


class TestExpandScssNesting:
    """Line-oriented nesting heuristic."""

    def test_nested_tree(self):
        assert expand_scss_nesting(VALID_SCSS) == [
            "card", "card_info", "card_info__title", "card--highlighted",
        ]

    def test_comma_list_records_every_class(self):
        scss = ".a, .b {\n  &_x {\n  }\n}\n"
        assert expand_scss_nesting(scss) == ["a", "b", "a_x"]

    def test_non_class_selectors_not_recorded(self):
        scss = "#main {\n  .card {\n  }\n}\n"
        assert expand_scss_nesting(scss) == ["card"]

    def test_ampersand_under_element_selector(self):
        scss = "div {\n  &-x {\n  }\n}\n"
        assert expand_scss_nesting(scss) == []

    def test_unbalanced_close_is_ignored(self):
        assert expand_scss_nesting("}\n}\n.card {\n}\n") == ["card"]

    def test_single_line_nesting_unsupported(self):
        assert expand_scss_nesting(".a { .b { } }") == []

    def test_brace_on_next_line(self):
        scss = ".card\n{\n  &_info\n  {\n  }\n}\n"
        assert expand_scss_nesting(scss) == ["card", "card_info"]

    def test_empty(self):
        assert expand_scss_nesting("") == []


class TestFileExtractors:
    """Whole-file extraction used by the scanner."""

    def test_markup_attributes(self):
        source = '<div className="card card_info" class=\'isActive\'><a className="x"/></div>'
        assert extract_markup_classes(source) == ["card", "card_info", "isActive", "x"]

    def test_markup_template_literal(self):
        source = '<div className={`card ${open ? "isOpen" : ""} card--big`} />'
        assert extract_markup_classes(source) == ["card", "card--big"]

    def test_markup_ignores_expressions(self):
        assert extract_markup_classes("<div className={styles.card} />") == []

    def test_html(self):
        source = '<body class="page"><div class="page_header  isActive">x</div></body>'
        assert extract_html_classes(source) == ["page", "page_header", "isActive"]

    def test_html_ignores_class_name_attribute(self):
        assert extract_html_classes('<div className="card">') == []

    def test_stylesheet(self):
        css = ".card { color: red; }\n.card:hover .card_info { }\n"
        assert extract_stylesheet_classes(css) == ["card", "card", "card_info"]

    def test_unique_keeps_first_seen_order(self):
        assert unique(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]
