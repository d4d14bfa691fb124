"""Pytest configuration and shared fixtures for the mdunwrap test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
import os
from pathlib import Path
from typing import Generator

import pytest

# Configure Hypothesis for property-based testing
from hypothesis import Phase, Verbosity, settings

settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose, deadline=None)
settings.register_profile("dev", max_examples=20, deadline=None)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Generator[None, None, None]:
    """Undo handler changes made by ``configure_logging`` during a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    try:
        yield
    finally:
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every MDUNWRAP_* variable from the environment."""
    for key in list(os.environ):
        if key.startswith("MDUNWRAP_"):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture
def isolated_config(tmp_path: Path, clean_env: pytest.MonkeyPatch) -> Path:
    """Run in an empty working directory with an empty home directory.

    Returns
    -------
    Path
        The working directory

    """
    work = tmp_path / "work"
    home = tmp_path / "home"
    work.mkdir()
    home.mkdir()
    clean_env.chdir(work)
    clean_env.setattr(Path, "home", classmethod(lambda cls: home))
    return work


@pytest.fixture
def sample_wrapped() -> str:
    """Provide a hard-wrapped sample document.

    Returns
    -------
    str
        Markdown with paragraphs, a list and a code block wrapped at a narrow width.

    """
    return """# Sample Document

This is a **sample document** whose
paragraphs were wrapped at a narrow
width by an editor.

- A list item that also
  spans two lines
- Another item

```python
def hello_world():
    print("Hello, World!")
```
"""
