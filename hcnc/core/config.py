"""
NamingConfig — Immutable engine configuration

Three independent knobs:
- custom_utilities: Additional utility grammar sources (regex strings)
- allow_unknown: Unknown classes pass with an informational message
- strict_bem: Utility-shaped tokens are rejected

Custom utility sources are compiled eagerly when the config is built,
so a malformed source fails fast with CustomUtilityError instead of
failing (or silently matching) on every classification call.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Pattern, Tuple

from .patterns import compile_grammar


class CustomUtilityError(ValueError):
    """A configured custom utility source could not be compiled."""

    def __init__(self, index: int, source: str, reason: str):
        self.index = index
        self.source = source
        self.reason = reason
        super().__init__(
            f"Invalid custom utility pattern #{index} {source!r}: {reason}"
        )


def compile_custom_utilities(sources: Iterable[str]) -> Tuple[Pattern, ...]:
    """
    Compile custom utility sources independently.

    Args:
        sources: Regex source strings, in configured order

    Returns:
        Tuple of compiled patterns (same order)

    Raises:
        CustomUtilityError: On the first source that fails to compile
    """
    compiled = []
    for index, source in enumerate(sources):
        if not isinstance(source, str):
            raise CustomUtilityError(index, repr(source), "pattern must be a string")
        if not source:
            # An empty pattern would match only the empty token; almost surely a typo
            raise CustomUtilityError(index, source, "pattern is empty")
        try:
            compiled.append(compile_grammar(source))
        except re.error as e:
            raise CustomUtilityError(index, source, str(e)) from e
    return tuple(compiled)


TRUE_VALUES = ("true", "1", "yes", "on")
FALSE_VALUES = ("false", "0", "no", "off")


def parse_bool(value: Any) -> Optional[bool]:
    """
    Read a boolean setting written as a bool or as text (true/false, yes/no, on/off, 1/0).

    Returns:
        The boolean, or None if the value is neither
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_VALUES:
            return True
        if lowered in FALSE_VALUES:
            return False
    return None


@dataclass(frozen=True)
class NamingConfig:
    """
    Configuration passed by reference into every classification call.

    Never mutated by the engine. The compiled custom utilities are cached
    on the instance for its whole lifetime.
    """
    custom_utilities: Tuple[str, ...] = ()
    allow_unknown: bool = False
    strict_bem: bool = False
    compiled_utilities: Tuple[Pattern, ...] = field(
        default=(), init=False, repr=False, compare=False
    )

    def __post_init__(self):
        # A bare string would iterate as one-character patterns
        if isinstance(self.custom_utilities, str):
            raise TypeError(
                "custom_utilities must be a sequence of pattern strings, not a single str"
            )
        sources = tuple(self.custom_utilities)
        object.__setattr__(self, "custom_utilities", sources)
        object.__setattr__(self, "compiled_utilities", compile_custom_utilities(sources))

    def replace(self, **changes: Any) -> "NamingConfig":
        """Return a copy with the given fields changed (recompiles sources)."""
        data = self.to_dict()
        data.update(changes)
        return NamingConfig.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "custom_utilities": list(self.custom_utilities),
            "allow_unknown": self.allow_unknown,
            "strict_bem": self.strict_bem,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "NamingConfig":
        """
        Create from dictionary. Missing keys fall back to defaults.

        A single pattern string counts as a one-element list.

        Raises:
            ValueError: If a flag is neither a bool nor boolean text
            CustomUtilityError: If a custom utility source does not compile
        """
        data = data or {}
        sources = data.get("custom_utilities") or ()
        if isinstance(sources, str):
            sources = (sources,)
        return cls(
            custom_utilities=tuple(sources),
            allow_unknown=_flag(data, "allow_unknown"),
            strict_bem=_flag(data, "strict_bem"),
        )


def _flag(data: Dict[str, Any], key: str) -> bool:
    value = data.get(key, False)
    parsed = parse_bool(value)
    if parsed is None:
        raise ValueError(f"{key} must be true or false, got {value!r}")
    return parsed


DEFAULT_CONFIG = NamingConfig()
