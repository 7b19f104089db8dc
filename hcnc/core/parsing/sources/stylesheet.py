"""
Stylesheet source configuration (CSS, SCSS, Sass).

Every dot-prefixed identifier in the file counts as a class selector.
SCSS "&" suffixes are not expanded here; use expand_scss_nesting for that.
"""

from ..config import SourceConfig
from ..extractors import extract_stylesheet_classes


STYLESHEET_CONFIG = SourceConfig(
    name="Stylesheet",
    category="stylesheet",
    extensions=frozenset({'.css', '.scss', '.sass'}),
    extractor=extract_stylesheet_classes,
)
