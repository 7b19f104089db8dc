"""
Extractors — Pull candidate class tokens out of raw text

Three source shapes:
- Class attribute strings ("card card_info isActive")
- CSS/SCSS selectors (".card:hover .card_info.isActive")
- SCSS nesting trees (line-oriented heuristic, not a parser)

Plus whole-file extractors used by the directory scanner:
- Markup (JSX/TSX/JS/TS): class= / className= attributes and simple
  className={`...`} template literals
- HTML: class= attributes
- Stylesheets: every dot-prefixed identifier

All functions are pure and return tokens in order of appearance.
"""

import re
from typing import Iterable, List


_WHITESPACE = re.compile(r"\s+")

_CLASS_SELECTOR = re.compile(r"\.([a-zA-Z_][a-zA-Z0-9_-]*)")

# One selector (or comma list of selectors) opening a block, nothing else
_SCSS_OPENING = re.compile(
    r"^([.#]?[a-zA-Z_&][a-zA-Z0-9_-]*"
    r"(?:\s*,\s*[.#]?[a-zA-Z_&][a-zA-Z0-9_-]*)*)\s*\{?\s*$"
)
_SELECTOR_LIST_SEP = re.compile(r"\s*,\s*")

_MARKUP_ATTRIBUTE = re.compile(r"""(?:className|class)=["']([^"']+)["']""")
_MARKUP_TEMPLATE = re.compile(r"(?:className|class)=\{`([^`]+)`\}")
_TEMPLATE_EXPRESSION = re.compile(r"\$\{[^}]+\}")

_HTML_ATTRIBUTE = re.compile(r"""class=["']([^"']+)["']""")


def parse_class_string(class_string: str) -> List[str]:
    """
    Split a class attribute value on whitespace runs.

    Example:
        parse_class_string("a   b\\tc\\nd")  # ["a", "b", "c", "d"]
    """
    return [token for token in _WHITESPACE.split(class_string) if token]


def extract_class_selectors(selector: str) -> List[str]:
    """
    Extract class names from a CSS selector, without the leading dot.

    Pseudo-classes, ids and element selectors are ignored. Duplicates are
    kept so callers can report each occurrence.
    """
    return _CLASS_SELECTOR.findall(selector)


def expand_scss_nesting(scss: str) -> List[str]:
    """
    Expand nested SCSS selectors into flat ones.

    Walks the text line by line with a stack of open selectors. A line
    that is only a selector (optionally followed by "{") opens a context:
    a leading "&" is joined to the innermost open selector, dot-prefixed
    results are recorded without the dot, and the first selector of the
    line is pushed. Any line containing "}" closes one context.

    Lines that do not fit the one-selector-per-line shape are ignored,
    so "a { b { } }" on a single line is not expanded.

    Example:
        .card {          -> card
          &_info {       -> card_info
            &__title {   -> card_info__title
            }
          }
        }

    Returns:
        Flat selectors in encounter order
    """
    expanded: List[str] = []
    stack: List[str] = []

    for line in scss.split("\n"):
        trimmed = line.strip()

        match = _SCSS_OPENING.match(trimmed)
        if match:
            parent = stack[-1] if stack else ""
            resolved = [
                parent + part[1:] if part.startswith("&") else part
                for part in _SELECTOR_LIST_SEP.split(match.group(1))
            ]
            for selector in resolved:
                if selector.startswith("."):
                    expanded.append(selector[1:])
            stack.append(resolved[0])

        if "}" in trimmed and stack:
            stack.pop()

    return expanded


# =============================================================================
# Whole-file extractors
# =============================================================================

def _tokens_from(values: Iterable[str]) -> List[str]:
    tokens: List[str] = []
    for value in values:
        tokens.extend(parse_class_string(value))
    return tokens


def extract_markup_classes(content: str) -> List[str]:
    """
    Extract class tokens from JSX/TSX/JS/TS source.

    Handles quoted class= / className= attributes and template literals
    of the form className={`...`}; ${...} interpolations are dropped and
    the static remainder is split into tokens.
    """
    tokens = _tokens_from(_MARKUP_ATTRIBUTE.findall(content))
    templates = (
        _TEMPLATE_EXPRESSION.sub(" ", literal)
        for literal in _MARKUP_TEMPLATE.findall(content)
    )
    tokens.extend(_tokens_from(templates))
    return tokens


def extract_html_classes(content: str) -> List[str]:
    """Extract class tokens from quoted class= attributes in HTML."""
    return _tokens_from(_HTML_ATTRIBUTE.findall(content))


def extract_stylesheet_classes(content: str) -> List[str]:
    """Extract every class selector from a CSS/SCSS/Sass stylesheet."""
    return extract_class_selectors(content)


def unique(tokens: Iterable[str]) -> List[str]:
    """Drop repeated tokens, keeping first-seen order."""
    return list(dict.fromkeys(tokens))
