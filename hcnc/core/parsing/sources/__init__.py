"""
Source configurations for class extraction.

Each source family has its own module defining its extensions and the
extractor used for them:
- markup.py: JSX/TSX/JS/TS (.jsx, .tsx, .js, .ts)
- stylesheet.py: CSS/SCSS/Sass (.css, .scss, .sass)
- html.py: HTML (.html)
"""

from .markup import MARKUP_CONFIG
from .stylesheet import STYLESHEET_CONFIG
from .html import HTML_CONFIG

BUILTIN_SOURCES = (MARKUP_CONFIG, STYLESHEET_CONFIG, HTML_CONFIG)

__all__ = [
    'MARKUP_CONFIG',
    'STYLESHEET_CONFIG',
    'HTML_CONFIG',
    'BUILTIN_SOURCES',
]
