"""
Shared pytest fixtures for the HCNC test suite.

Provides project trees built with ProjectFactory in tmp_path, plus
environment isolation so user config and parallelism settings on the
developer machine never leak into tests.

Usage in tests:
    def test_something(project_factory):
        project_factory.add_file("src/App.tsx", '<div className="card" />')
        result = Scanner().scan(project_factory.root)

    def test_with_data(sample_project):
        # sample_project comes pre-populated with valid and invalid files
        result = Scanner().scan(sample_project.root / "src")
"""

import logging

import pytest

from hcnc.config import ConfigManager
from hcnc.orchestrator import reset_orchestrator
from tests.factories import ProjectFactory


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """
    Keep every test away from the real home directory and HCNC_* env.

    The user config directory is redirected into tmp_path and the global
    orchestrator is dropped after each test.
    """
    for var in (
        "HCNC_STRICT_BEM", "HCNC_ALLOW_UNKNOWN", "HCNC_CUSTOM_UTILITIES",
        "HCNC_PARALLEL_ENABLED", "HCNC_IO_WORKERS", "HCNC_TASK_TIMEOUT",
        "HCNC_SHUTDOWN_TIMEOUT", "HCNC_PROJECT_PATH", "HCNC_UNICODE",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("HCNC_ASCII_ONLY", "1")
    monkeypatch.setattr(ConfigManager, "USER_CONFIG_DIR", tmp_path / "home" / ".hcnc")
    yield
    reset_orchestrator()

    # main() attaches a stderr handler bound to this test's captured stream
    package_logger = logging.getLogger("hcnc")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def project_factory(tmp_path):
    """
    Create an empty ProjectFactory rooted in tmp_path/project.

    Example:
        def test_single_file(project_factory):
            project_factory.add_file("a.css", ".card {}")
    """
    return ProjectFactory(tmp_path / "project")


@pytest.fixture
def sample_project(project_factory):
    """
    ProjectFactory with a small mixed tree.

    Pre-populated with:
    - src/App.tsx (valid markup)
    - src/Card.jsx (two invalid classes)
    - src/styles/card.scss (valid stylesheet)
    - src/index.html (one invalid class)
    - node_modules/ and .git/ files that must be skipped
    """
    project_factory.create_sample_project()
    return project_factory
