"""
Parsing module — Class token extraction from source text.

This module provides:
- Extractors: pure text -> token functions (class strings, selectors,
  SCSS nesting, whole files)
- SourceConfig: per-file-type extraction rules
- SourceRegistry: extension-based routing
- ExclusionConfig: directories skipped while scanning

Design principle: Add new file types via config, not code changes.

Usage:
    from hcnc.core.parsing import SourceRegistry, default_registry

    registry = default_registry()
    config = registry.get_config(Path("src/App.tsx"))
    tokens = config.extract(content)
"""

from .config import SourceConfig
from .exclusions import ExclusionConfig
from .extractors import (
    expand_scss_nesting,
    extract_class_selectors,
    extract_html_classes,
    extract_markup_classes,
    extract_stylesheet_classes,
    parse_class_string,
    unique,
)
from .registry import SourceRegistry, default_registry

__all__ = [
    'SourceConfig',
    'SourceRegistry',
    'default_registry',
    'ExclusionConfig',
    'parse_class_string',
    'extract_class_selectors',
    'expand_scss_nesting',
    'extract_markup_classes',
    'extract_html_classes',
    'extract_stylesheet_classes',
    'unique',
]
