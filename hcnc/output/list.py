"""
ListRenderer — Render validation results as lists

Supports:
- Result lines: one token per line with pass/fail marker and kind,
  followed by its message (failures, allowed unknowns)
- Grouped results: a heading per group (file) with its result lines
- Plain bullet lists of strings

Counts ("_metrics"), warnings ("_warnings") and a status line ("_status")
follow the list when the data carries them.
"""

from typing import TYPE_CHECKING, Any, Dict, List

from ..core.patterns import ClassKind
from ..presentation.symbols import format_result_line
from .base import BaseRenderer

if TYPE_CHECKING:
    from . import OutputSpec


class ListRenderer(BaseRenderer):
    """
    Render data as formatted lists.

    Expected data formats:
    - {"items": [{"token", "valid", "kind", "message"}, ...]}
    - {"_groups": [{"name": "...", "items": [...]}, ...]}
    - List of strings
    """

    def render(self, spec: "OutputSpec") -> str:
        data = spec.data
        lines: List[str] = []

        if spec.title:
            lines.extend([spec.title, ""])

        if isinstance(data, dict) and data.get("_groups"):
            for group in data["_groups"]:
                lines.append(group["name"])
                lines.extend(self._render_results(group.get("items", []), level=1))
                lines.append("")
        elif isinstance(data, dict) and data.get("items"):
            lines.extend(self._render_results(data["items"], level=1))
            lines.append("")
        elif isinstance(data, list) and data:
            lines.extend(self._render_bullets(data))
            lines.append("")
        else:
            return spec.empty_message

        if isinstance(data, dict):
            lines.extend(self._render_footer_counts(data))

        status = data.get("_status") if isinstance(data, dict) else None
        if status:
            icon = self.symbols.check_pass if status.get("ok") else self.symbols.check_fail
            lines.append(f"{icon} {status.get('message', '')}")

        return "\n".join(lines).rstrip("\n")

    def _render_results(self, items: List[Dict[str, Any]], level: int) -> List[str]:
        indent = "  " * level
        lines = []
        for item in items:
            kind = ClassKind(item["kind"]) if item.get("kind") else None
            lines.append(indent + format_result_line(self.symbols, item["token"], item["valid"], kind))
            message = item.get("message")
            if message:
                lines.append(indent + "  " + message)
        return lines

    def _render_footer_counts(self, data: Dict[str, Any]) -> List[str]:
        lines = []
        for label, value in data.get("_metrics", {}).items():
            lines.append(f"{label}: {value}")
        for warning in data.get("_warnings", []):
            lines.append(f"{self.symbols.check_warn} {self.truncate(str(warning), self.width - 4)}")
        if lines:
            lines.append("")
        return lines

    def _render_bullets(self, items: List[Any]) -> List[str]:
        s = self.symbols
        return [f"  {s.bullet} {self.truncate(str(item), self.width - 4)}" for item in items]
