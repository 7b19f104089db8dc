"""
Directory exclusions for the source scanner.

A directory is skipped when its name starts with a dot (.git, .next,
.cache) or is a dependency directory (node_modules). Projects can add
more names through the scan.exclude_dirs setting.

Usage:
    from hcnc.core.parsing.exclusions import ExclusionConfig

    exclusions = ExclusionConfig(extra_dirs=["dist", "build"])
    exclusions.should_skip_dir("node_modules")   # True
    exclusions.should_skip_dir("components")     # False
"""

from typing import FrozenSet, Iterable


class ExclusionConfig:
    """
    Directory-name rules applied while walking a source tree.

    Matching is by exact directory name, never by path, so "dist" skips
    every directory named dist at any depth.
    """

    # Dependency directories skipped in every project
    DEFAULT_DIRS: FrozenSet[str] = frozenset({"node_modules"})

    def __init__(self, extra_dirs: Iterable[str] = ()):
        self._dirs: FrozenSet[str] = self.DEFAULT_DIRS | frozenset(extra_dirs)

    @property
    def dirs(self) -> FrozenSet[str]:
        """Directory names skipped in addition to dot-directories."""
        return self._dirs

    def should_skip_dir(self, name: str) -> bool:
        """Check if a directory with this name should not be walked."""
        return name.startswith(".") or name in self._dirs
