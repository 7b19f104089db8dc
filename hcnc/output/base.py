"""
BaseRenderer — Abstract base class for output renderers

All renderers inherit from this class and implement render().
Provides common utilities for terminal width and truncation.
"""

import shutil
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..presentation.symbols import SymbolSet
    from . import OutputSpec


class BaseRenderer(ABC):
    """
    Abstract base class for all output renderers.

    Subclasses must implement render() method.
    """

    def __init__(self, symbols: "SymbolSet" = None, width: int = None):
        """
        Initialize renderer.

        Args:
            symbols: SymbolSet for visual elements (auto-detect if None)
            width: Terminal width (auto-detect if None)
        """
        from ..presentation.symbols import get_symbols

        self.symbols = symbols or get_symbols()
        self.width = width or shutil.get_terminal_size().columns

    @abstractmethod
    def render(self, spec: "OutputSpec") -> str:
        """Render OutputSpec to formatted string."""

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def truncate(self, text: str, length: int = None) -> str:
        """
        Truncate text with the symbol set's ellipsis.

        Args:
            text: Text to truncate
            length: Max length (default: based on terminal width)
        """
        if not text:
            return ""

        if length is None:
            length = max(20, self.width - 10)

        ellipsis = self.symbols.ellipsis
        if len(text) <= length:
            return text
        if length <= len(ellipsis):
            return text[:length]
        return text[:length - len(ellipsis)] + ellipsis
