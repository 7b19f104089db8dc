"""HTML source configuration: quoted class= attributes only."""

from ..config import SourceConfig
from ..extractors import extract_html_classes


HTML_CONFIG = SourceConfig(
    name="HTML",
    category="html",
    extensions=frozenset({'.html'}),
    extractor=extract_html_classes,
)
