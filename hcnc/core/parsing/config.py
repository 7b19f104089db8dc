"""
Source configuration data structures.

Defines SourceConfig — how one family of source files (markup,
stylesheets, HTML) is recognized and which extractor pulls class tokens
out of it.

Design principle: New file types are added via config, not code changes.
"""

from dataclasses import dataclass
from typing import Callable, FrozenSet, List


@dataclass(frozen=True)
class SourceConfig:
    """
    Configuration for extracting class tokens from one kind of source file.

    Attributes:
        name: Human-readable name (e.g., "Markup", "Stylesheet")
        category: Short tag used in reports (e.g., "markup", "stylesheet")
        extensions: File extensions this config handles (e.g., {'.css'})
        extractor: Function mapping file content to class tokens, in order
    """
    name: str
    category: str
    extensions: FrozenSet[str]
    extractor: Callable[[str], List[str]]

    def matches_extension(self, ext: str) -> bool:
        """Check if this config handles the given extension."""
        return ext.lower() in self.extensions

    def extract(self, content: str) -> List[str]:
        """Run the extractor over file content."""
        return self.extractor(content)
