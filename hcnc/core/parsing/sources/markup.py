"""
Markup source configuration (JSX/TSX and plain JS/TS).

Class tokens come from quoted class= / className= attributes and from
className={`...`} template literals with interpolations removed.
Dynamic class expressions (clsx(...), cond ? "a" : "b") are not seen.
"""

from ..config import SourceConfig
from ..extractors import extract_markup_classes


MARKUP_CONFIG = SourceConfig(
    name="Markup",
    category="markup",
    extensions=frozenset({'.jsx', '.tsx', '.js', '.ts'}),
    extractor=extract_markup_classes,
)
