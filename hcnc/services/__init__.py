"""
Services — Filesystem-facing layer for the HCNC CLI

- Scanner: batch validation of a source tree
- Biome: registers the HCNC lint plugins in biome.json
"""

from .scanner import Scanner, ScanResult, ScanFinding, FileReport
from .biome import BiomeInitializer, BiomeConfigError, InitResult, HCNC_PLUGINS

__all__ = [
    # Scanner
    "Scanner", "ScanResult", "ScanFinding", "FileReport",
    # Biome
    "BiomeInitializer", "BiomeConfigError", "InitResult", "HCNC_PLUGINS",
]
