"""
Output Module — View Layer for the HCNC CLI

Separates data from presentation. Commands return OutputSpec,
renderers handle display.

Usage:
    from hcnc.output import OutputSpec, render

    # In command:
    spec = OutputSpec(data={"items": [...]}, shape="list", command="validate")

    # In CLI layer:
    print(render(spec, format="auto", symbols=symbols))
"""

import builtins
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from .base import BaseRenderer
from .json import JsonRenderer
from .list import ListRenderer
from .summary import SummaryRenderer

if TYPE_CHECKING:
    from ..presentation.symbols import SymbolSet


@dataclass
class OutputSpec:
    """
    Data envelope that commands return for rendering.

    Attributes:
        data: The actual data (dict or list)
        shape: Rendering hint - "list" | "summary" | "json" | "auto"
        title: Optional heading
        empty_message: Message when data is empty
        command: Which command produced this output (for succession hints)
        context: State flags for conditional hints (e.g., {"has_invalid": True})
    """
    data: Any
    shape: str = "auto"
    title: Optional[str] = None
    empty_message: str = "No data to display."
    command: Optional[str] = None
    context: Optional[dict] = None


RENDERERS = {
    "list": ListRenderer,
    "summary": SummaryRenderer,
    "json": JsonRenderer,
}

VALID_FORMATS = ("auto", "list", "summary", "json")


def auto_detect_shape(data: Any) -> str:
    """Infer rendering shape: result lists render as lists, the rest as summaries."""
    # "list" here is the submodule; check the builtin type
    if isinstance(data, builtins.list):
        return "list"
    if isinstance(data, dict) and (data.get("items") or data.get("_groups")):
        return "list"
    return "summary"


def get_renderer(format: str, symbols: "SymbolSet", width: int = None) -> BaseRenderer:
    """
    Get appropriate renderer instance.

    Raises:
        ValueError: If format is invalid
    """
    if format not in RENDERERS:
        valid = ", ".join(RENDERERS.keys())
        raise ValueError(f"Unknown format '{format}'. Valid: {valid}")
    return RENDERERS[format](symbols=symbols, width=width)


def render(spec: OutputSpec, format: str = "auto", symbols: "SymbolSet" = None, width: int = None) -> str:
    """
    Render OutputSpec to formatted string.

    Args:
        spec: OutputSpec from command
        format: "auto" | "list" | "summary" | "json"
        symbols: SymbolSet for visual elements (auto-detect if None)
        width: Terminal width (auto-detect if None)

    Returns:
        Formatted string ready for printing (with succession hint,
        except for JSON)
    """
    from ..presentation.succession import get_hint
    from ..presentation.symbols import get_symbols

    if symbols is None:
        symbols = get_symbols()

    if format == "auto":
        effective_format = spec.shape if spec.shape != "auto" else auto_detect_shape(spec.data)
    else:
        effective_format = format

    output = get_renderer(effective_format, symbols, width).render(spec)

    if spec.command and effective_format != "json":
        hint = get_hint(spec.command, spec.context)
        if hint:
            output += f"\n\n{hint}"

    return output


__all__ = [
    "OutputSpec",
    "render",
    "get_renderer",
    "auto_detect_shape",
    "RENDERERS",
    "VALID_FORMATS",
    "BaseRenderer",
    "ListRenderer",
    "SummaryRenderer",
    "JsonRenderer",
]
