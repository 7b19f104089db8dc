"""
Tests for the Scanner — batch validation of a source tree.

Tests validate:
- Walk rules (dot-dirs, node_modules, configured excludes, extensions)
- Stable ordering of files and tokens
- Per-file deduplication and findings
- Unreadable files are reported without aborting the scan
- Sequential and threaded runs produce identical reports
"""

import logging
import threading
from pathlib import Path

import pytest

from hcnc.core.config import NamingConfig
from hcnc.core.parsing import ExclusionConfig
from hcnc.orchestrator import OrchestratorConfig, TaskOrchestrator
from hcnc.services.scanner import FileReport, ScanFinding, Scanner, ScanResult


@pytest.fixture
def sequential():
    """Orchestrator that runs every task inline."""
    orchestrator = TaskOrchestrator(OrchestratorConfig(enabled=False))
    yield orchestrator
    orchestrator.shutdown()


@pytest.fixture
def threaded():
    """Orchestrator backed by a small thread pool."""
    orchestrator = TaskOrchestrator(OrchestratorConfig(enabled=True, io_workers=3))
    yield orchestrator
    orchestrator.shutdown()


class TestDiscover:
    """File discovery."""

    def test_skips_excluded_and_unsupported(self, sample_project, sequential):
        scanner = Scanner(orchestrator=sequential)
        root = sample_project.root

        found = [str(p.relative_to(root)) for p in scanner.discover(root)]

        assert found == [
            "src/App.tsx",
            "src/Card.jsx",
            "src/index.html",
            "src/styles/card.scss",
        ]

    def test_configured_excludes(self, sample_project, sequential):
        scanner = Scanner(exclusions=ExclusionConfig(["styles"]), orchestrator=sequential)
        found = [p.name for p in scanner.discover(sample_project.root)]
        assert "card.scss" not in found

    def test_single_file_root(self, sample_project, sequential):
        scanner = Scanner(orchestrator=sequential)
        path = sample_project.root / "src" / "Card.jsx"
        assert scanner.discover(path) == [path]

    def test_unsupported_single_file(self, sample_project, sequential):
        scanner = Scanner(orchestrator=sequential)
        assert scanner.discover(sample_project.root / "src" / "README.md") == []

    def test_missing_root(self, tmp_path, sequential):
        with pytest.raises(FileNotFoundError):
            Scanner(orchestrator=sequential).discover(tmp_path / "nope")


class TestScan:
    """Full scans."""

    def test_sample_project_counts(self, sample_project, sequential):
        result = Scanner(orchestrator=sequential).scan(sample_project.root / "src")

        assert result.total_files == 4
        assert result.total_classes == 15
        assert result.invalid_count == 3
        assert not result.passed
        assert result.unreadable == []

    def test_findings_grouped_by_file(self, sample_project, sequential):
        result = Scanner(orchestrator=sequential).scan(sample_project.root / "src")
        grouped = result.invalid_by_file()

        names = {Path(path).name: [f.token for f in findings] for path, findings in grouped.items()}
        assert names == {
            "Card.jsx": ["card__title", "Card_body"],
            "index.html": ["Page-Title"],
        }

    def test_tokens_deduplicated_per_file(self, project_factory, sequential):
        project_factory.add_file("a.css", ".card {}\n.card:hover {}\n.card_info {}\n")
        project_factory.add_file("b.css", ".card {}\n")

        result = Scanner(orchestrator=sequential).scan(project_factory.root)

        assert [f.classes for f in result.files] == [["card", "card_info"], ["card"]]
        assert result.total_classes == 3

    def test_finding_messages(self, project_factory, sequential):
        project_factory.add_file("a.tsx", '<p className="card__title" />')
        (finding,) = Scanner(orchestrator=sequential).scan(project_factory.root).findings
        assert finding.token == "card__title"
        assert 'Use single underscore for first-level elements: "card_title"' in finding.message

    def test_naming_config_applied(self, project_factory, sequential):
        project_factory.add_file("a.html", '<div class="card mt-2 Weird">')

        default = Scanner(orchestrator=sequential).scan(project_factory.root)
        strict = Scanner(NamingConfig(strict_bem=True), orchestrator=sequential).scan(project_factory.root)
        lenient = Scanner(NamingConfig(allow_unknown=True), orchestrator=sequential).scan(project_factory.root)

        assert [f.token for f in default.findings] == ["Weird"]
        assert [f.token for f in strict.findings] == ["mt-2", "Weird"]
        assert lenient.passed

    def test_empty_tree_passes(self, project_factory, sequential):
        result = Scanner(orchestrator=sequential).scan(project_factory.root)
        assert result.total_files == 0
        assert result.passed

    def test_threaded_matches_sequential(self, sample_project, sequential, threaded):
        root = sample_project.root
        first = Scanner(orchestrator=sequential).scan(root).to_dict()
        second = Scanner(orchestrator=threaded).scan(root).to_dict()
        assert first == second

    def test_order_is_stable(self, sample_project, threaded):
        scanner = Scanner(orchestrator=threaded)
        runs = [scanner.scan(sample_project.root).to_dict() for _ in range(3)]
        assert runs[0] == runs[1] == runs[2]


class TestUnreadableFiles:
    """A bad file is reported, the rest of the tree is still checked."""

    def test_invalid_utf8(self, project_factory, sequential, caplog):
        project_factory.add_bytes("broken.css", b".card { content: '\xff\xfe'; }")
        project_factory.add_file("ok.css", ".Bad {}")

        with caplog.at_level(logging.WARNING, logger="hcnc"):
            result = Scanner(orchestrator=sequential).scan(project_factory.root)

        assert result.total_files == 2
        (broken,) = result.unreadable
        assert broken.path.endswith("broken.css")
        assert not broken.readable
        assert broken.classes == []
        assert [f.token for f in result.findings] == ["Bad"]
        assert "Error reading" in caplog.text

    def test_unreadable_in_report(self, project_factory, sequential):
        project_factory.add_bytes("broken.css", b"\xff")
        data = Scanner(orchestrator=sequential).scan(project_factory.root).to_dict()

        assert data["summary"]["unreadable"] == 1
        assert "error" in data["files"][0]

    def test_slow_file_times_out(self, project_factory, caplog):
        project_factory.add_file("a.css", ".Bad {}")
        project_factory.add_file("b.css", ".card {}")
        project_factory.add_file("c.css", ".Other {}")
        release = threading.Event()

        class StallingScanner(Scanner):
            def scan_file(self, path):
                if path.name == "b.css":
                    release.wait(5)
                return super().scan_file(path)

        orchestrator = TaskOrchestrator(OrchestratorConfig(io_workers=2, task_timeout=0.05))
        try:
            with caplog.at_level(logging.WARNING, logger="hcnc"):
                result = StallingScanner(orchestrator=orchestrator).scan(project_factory.root)
        finally:
            release.set()
            orchestrator.shutdown()

        assert [Path(f.path).name for f in result.files] == ["a.css", "b.css", "c.css"]
        (stalled,) = result.unreadable
        assert stalled.path.endswith("b.css")
        assert stalled.source == "stylesheet"
        assert "timed out" in stalled.error
        assert [f.token for f in result.findings] == ["Bad", "Other"]
        assert "Could not scan" in caplog.text

    def test_extractor_crash_recorded(self, project_factory, sequential):
        project_factory.add_file("a.css", ".card {}")
        project_factory.add_file("b.css", ".Bad {}")

        class CrashingScanner(Scanner):
            def scan_file(self, path):
                if path.name == "a.css":
                    raise RuntimeError("extractor blew up")
                return super().scan_file(path)

        result = CrashingScanner(orchestrator=sequential).scan(project_factory.root)

        assert result.unreadable[0].error == "RuntimeError: extractor blew up"
        assert [f.token for f in result.findings] == ["Bad"]


class TestReportModels:
    """Serialization of scan results."""

    def test_to_dict(self):
        finding = ScanFinding(file="a.css", token="Bad", message="msg")
        report = FileReport(path="a.css", source="stylesheet", classes=["Bad", "ok"], findings=[finding])
        result = ScanResult(root=".", files=[report])

        assert result.to_dict() == {
            "root": ".",
            "summary": {"files": 1, "classes": 2, "invalid": 1, "unreadable": 0},
            "files": [{
                "path": "a.css",
                "source": "stylesheet",
                "classes": 2,
                "invalid": [{"file": "a.css", "token": "Bad", "message": "msg"}],
            }],
        }
