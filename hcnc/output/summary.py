"""
SummaryRenderer — Render counts and status

Format:
    Title
    Files checked: 12
    Classes found: 85

    ⚠ Could not read src/broken.css

    ✓ All classes are valid!
"""

from typing import TYPE_CHECKING

from .base import BaseRenderer

if TYPE_CHECKING:
    from . import OutputSpec


class SummaryRenderer(BaseRenderer):
    """
    Render summary views.

    Special keys: _metrics (label -> value), _warnings (list of text),
    _status ({"ok": bool, "message": str}).
    """

    def render(self, spec: "OutputSpec") -> str:
        if not spec.data:
            return spec.empty_message

        if not isinstance(spec.data, dict):
            return str(spec.data)

        data = spec.data
        s = self.symbols
        lines = []

        if spec.title:
            lines.extend([spec.title, ""])

        for label, value in data.get("_metrics", {}).items():
            lines.append(f"{label}: {value}")

        warnings = data.get("_warnings", [])
        if warnings:
            lines.append("")
            for warning in warnings:
                lines.append(f"{s.check_warn} {self.truncate(str(warning), self.width - 4)}")

        status = data.get("_status")
        if status:
            lines.append("")
            icon = s.check_pass if status.get("ok") else s.check_fail
            lines.append(f"{icon} {status.get('message', '')}")

        return "\n".join(lines)
