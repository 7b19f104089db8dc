"""
Presentation — Display layer for the HCNC CLI

- Symbols: Visual vocabulary (unicode/ascii)
- Succession: Next-step hints
- Template: Structured output with header/section/footer
"""

from .symbols import SymbolSet, get_symbols, safe_print, format_result_line
from .succession import get_hint, RULES
from .template import OutputTemplate, TemplateSection

__all__ = [
    # Symbols
    "SymbolSet", "get_symbols", "safe_print", "format_result_line",
    # Succession
    "get_hint", "RULES",
    # Template
    "OutputTemplate", "TemplateSection",
]
