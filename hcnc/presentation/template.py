"""
OutputTemplate — Consistent CLI output structure

Builder for structured command output with header, sections, and
footer.

Usage:
    from hcnc.presentation.template import OutputTemplate

    template = OutputTemplate()
    template.header("HCNC CHECK", "./src")
    template.section("src/App.tsx", findings_text)
    template.footer("12 files | 85 classes | 2 invalid")
    print(template.render(command="check", context={"has_invalid": True}))
"""

import shutil
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .succession import get_hint
from .symbols import SymbolSet, get_symbols


HEADER_CHAR = "="
SECTION_CHAR = "-"
DEFAULT_WIDTH = 80
MAX_WIDTH = 100


@dataclass
class TemplateSection:
    """A titled section of output."""
    title: str
    content: str


class OutputTemplate:
    """
    Builder for structured CLI output.

    Creates consistent output with:
    - HEADER: Command identity and scope
    - SECTIONS: Titled content blocks
    - FOOTER: Summary metrics and succession hint
    """

    def __init__(self, symbols: Optional[SymbolSet] = None, width: Optional[int] = None):
        """
        Initialize template.

        Args:
            symbols: SymbolSet for visual elements (auto-detect if None)
            width: Rule width (terminal width, capped, if None)
        """
        self.symbols = symbols or get_symbols()
        if width is None:
            width = min(shutil.get_terminal_size((DEFAULT_WIDTH, 24)).columns, MAX_WIDTH)
        self.width = width

        self._title: Optional[str] = None
        self._subtitle: Optional[str] = None
        self._scope: Optional[str] = None
        self._sections: List[TemplateSection] = []
        self._summary: Optional[str] = None

    # =========================================================================
    # Builder Methods
    # =========================================================================

    def header(self, title: str, subtitle: Optional[str] = None) -> "OutputTemplate":
        """Set header with title and optional subtitle."""
        self._title = title
        self._subtitle = subtitle
        return self

    def scope(self, text: str) -> "OutputTemplate":
        """Set scope line shown under the header."""
        self._scope = text
        return self

    def section(self, title: str, content: str) -> "OutputTemplate":
        """Add a titled section (content may be multiline)."""
        self._sections.append(TemplateSection(title=title, content=content))
        return self

    def footer(self, summary: Optional[str] = None) -> "OutputTemplate":
        """Set footer summary text."""
        self._summary = summary
        return self

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(self, command: Optional[str] = None, context: Optional[Dict[str, Any]] = None) -> str:
        """
        Render template to formatted string.

        Args:
            command: Command name for succession hint (optional)
            context: Context dict for succession conditions (optional)
        """
        lines: List[str] = []

        if self._title:
            lines.extend(self._render_header())

        for section in self._sections:
            lines.extend(self._render_section(section))

        lines.extend(self._render_footer(command, context))
        return "\n".join(lines)

    def _render_header(self) -> List[str]:
        border = HEADER_CHAR * self.width
        title_line = f"{self._title} - {self._subtitle}" if self._subtitle else self._title
        lines = [border, title_line, border]
        if self._scope:
            lines.append(self._scope)
        lines.append("")
        return lines

    def _render_section(self, section: TemplateSection) -> List[str]:
        lines: List[str] = []
        if section.title:
            lines.append(section.title)
            lines.append(SECTION_CHAR * min(len(section.title), self.width))
        if section.content:
            lines.append(section.content)
        lines.append("")
        return lines

    def _render_footer(self, command: Optional[str], context: Optional[Dict[str, Any]]) -> List[str]:
        lines = [SECTION_CHAR * self.width]
        if self._summary:
            lines.append(f"Summary: {self._summary}")
        if command:
            hint = get_hint(command, context)
            if hint:
                lines.append(hint)
        lines.append(HEADER_CHAR * self.width)
        return lines
