"""
JsonRenderer — Render data as JSON for piping

Internal keys (starting with _) are stripped; objects with to_dict()
and enums are converted.
"""

import json
from enum import Enum
from typing import TYPE_CHECKING, Any

from .base import BaseRenderer

if TYPE_CHECKING:
    from . import OutputSpec


class JsonRenderer(BaseRenderer):
    """Render data as JSON (pretty by default, compact for piping)."""

    def __init__(self, *args, compact: bool = False, **kwargs):
        super().__init__(*args, **kwargs)
        self.compact = compact

    def render(self, spec: "OutputSpec") -> str:
        data = self._clean_data(spec.data)
        return json.dumps(
            data,
            indent=None if self.compact else 2,
            default=self._json_serializer,
            ensure_ascii=False,
        )

    def _clean_data(self, data: Any) -> Any:
        """Remove internal keys (starting with _) at every level."""
        if isinstance(data, dict):
            return {
                k: self._clean_data(v)
                for k, v in data.items()
                if not k.startswith("_")
            }
        if isinstance(data, (list, tuple)):
            return [self._clean_data(item) for item in data]
        return data

    def _json_serializer(self, obj: Any) -> Any:
        if hasattr(obj, "to_dict"):
            return obj.to_dict()
        if isinstance(obj, Enum):
            return obj.value
        return str(obj)
