"""
Scanner -- Batch validation of class names across a source tree

Walks a directory, routes each supported file to its extractor, and
validates every distinct class token found in it.

Walk rules:
- Dot-directories (.git, .next) and node_modules are never entered
- Extra directory names come from scan.exclude_dirs
- Only registered extensions are read (.jsx .tsx .js .ts .css .scss .sass .html)

Files are visited in sorted order and each file's tokens keep their
first-seen order, so two scans of the same tree report identically.
An unreadable file, or one whose scan fails or times out, is recorded on
its report and logged; the scan goes on.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..core.config import DEFAULT_CONFIG, NamingConfig
from ..core.parsing import ExclusionConfig, SourceRegistry, default_registry, unique
from ..core.validation import validate_class_name
from ..orchestrator import TaskOrchestrator, TaskResult, get_orchestrator


logger = logging.getLogger(__name__)


# =============================================================================
# Data Models
# =============================================================================

@dataclass
class ScanFinding:
    """One invalid class token in one file."""
    file: str
    token: str
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file": self.file,
            "token": self.token,
            "message": self.message,
        }


@dataclass
class FileReport:
    """Everything the scanner learned about one file."""
    path: str
    source: str  # Extractor category: "markup" | "stylesheet" | "html"
    classes: List[str] = field(default_factory=list)
    findings: List[ScanFinding] = field(default_factory=list)
    error: Optional[str] = None  # Set when the file could not be read or scanned

    @property
    def readable(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "path": self.path,
            "source": self.source,
            "classes": len(self.classes),
            "invalid": [f.to_dict() for f in self.findings],
        }
        if self.error:
            data["error"] = self.error
        return data


@dataclass
class ScanResult:
    """Aggregated result of scanning a tree."""
    root: str
    files: List[FileReport]

    @property
    def total_files(self) -> int:
        return len(self.files)

    @property
    def total_classes(self) -> int:
        return sum(len(f.classes) for f in self.files)

    @property
    def findings(self) -> List[ScanFinding]:
        return [finding for f in self.files for finding in f.findings]

    @property
    def invalid_count(self) -> int:
        return sum(len(f.findings) for f in self.files)

    @property
    def unreadable(self) -> List[FileReport]:
        return [f for f in self.files if not f.readable]

    @property
    def passed(self) -> bool:
        return self.invalid_count == 0

    def invalid_by_file(self) -> Dict[str, List[ScanFinding]]:
        """Findings grouped by file, files in scan order."""
        grouped: Dict[str, List[ScanFinding]] = {}
        for report in self.files:
            if report.findings:
                grouped[report.path] = list(report.findings)
        return grouped

    def to_dict(self) -> Dict[str, Any]:
        return {
            "root": self.root,
            "summary": {
                "files": self.total_files,
                "classes": self.total_classes,
                "invalid": self.invalid_count,
                "unreadable": len(self.unreadable),
            },
            "files": [f.to_dict() for f in self.files],
        }


# =============================================================================
# Scanner
# =============================================================================

class Scanner:
    """
    Directory scanner that validates class names file by file.

    Collaborators are injectable so tests can pin the naming config,
    the extractor routing, or run without a thread pool.
    """

    def __init__(
        self,
        config: NamingConfig = None,
        registry: SourceRegistry = None,
        exclusions: ExclusionConfig = None,
        orchestrator: TaskOrchestrator = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self.registry = registry or default_registry()
        self.exclusions = exclusions or ExclusionConfig()
        self._orchestrator = orchestrator

    @property
    def orchestrator(self) -> TaskOrchestrator:
        return self._orchestrator or get_orchestrator()

    # =========================================================================
    # Public Interface
    # =========================================================================

    def discover(self, root: Path) -> List[Path]:
        """
        List supported files under root, in sorted walk order.

        A root that is itself a supported file yields just that file.

        Raises:
            FileNotFoundError: If root does not exist
        """
        root = Path(root)
        if not root.exists():
            raise FileNotFoundError(f"No such file or directory: {root}")

        if root.is_file():
            return [root] if self.registry.is_supported(root) else []

        found: List[Path] = []
        for dirpath, dirnames, filenames in os.walk(root):
            # Prune in place so os.walk never descends into excluded dirs
            dirnames[:] = sorted(d for d in dirnames if not self.exclusions.should_skip_dir(d))
            for name in sorted(filenames):
                path = Path(dirpath) / name
                if self.registry.is_supported(path) and path.is_file():
                    found.append(path)
        return found

    def scan_file(self, path: Path) -> FileReport:
        """
        Extract and validate the distinct class tokens of one file.

        Read errors are recorded on the report, never raised.
        """
        source = self.registry.get_config(path)
        report = FileReport(path=str(path), source=source.category if source else "unknown")
        if source is None:
            return report

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Error reading %s: %s", path, e)
            report.error = str(e)
            return report

        report.classes = unique(source.extract(content))
        for token in report.classes:
            result = validate_class_name(token, self.config)
            if not result.valid:
                report.findings.append(ScanFinding(
                    file=report.path,
                    token=token,
                    message=result.message or "Invalid class name",
                ))

        logger.debug(
            "Scanned %s: %d classes, %d invalid",
            path, len(report.classes), len(report.findings),
        )
        return report

    def scan(self, root: Path) -> ScanResult:
        """
        Scan a directory (or a single file).

        Returns:
            ScanResult with one FileReport per supported file, sorted
        """
        paths = self.discover(Path(root))
        logger.debug("Discovered %d files under %s", len(paths), root)
        reports = self.orchestrator.map_parallel(self.scan_file, paths, on_failure=self._failed_report)
        return ScanResult(root=str(root), files=reports)

    def _failed_report(self, path: Path, result: TaskResult) -> FileReport:
        """Report for a file whose scan raised or timed out."""
        logger.warning("Could not scan %s: %s", path, result.error)
        source = self.registry.get_config(path)
        return FileReport(
            path=str(path),
            source=source.category if source else "unknown",
            error=result.error,
        )
