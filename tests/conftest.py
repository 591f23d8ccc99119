"""Pytest configuration and shared fixtures for the autolink_headings test suite."""

import logging

import pytest

from autolink_headings.ast import Root, h


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def intro_tree():
    """Tree holding a single ``<h2 id="intro">Intro</h2>``."""
    return Root(children=[h("h2", {"id": "intro"}, "Intro")])


@pytest.fixture
def sample_tree():
    """Tree with headings of several ranks, one without an id, and body text."""
    return Root(
        children=[
            h("h1", {"id": "title"}, "Title"),
            h("p", None, "Opening paragraph."),
            h("h2", {"id": "usage"}, "Usage"),
            h("h2", None, "No id here"),
            h(
                "section",
                None,
                h("h3", {"id": "details"}, "Details"),
                h("p", None, "Body"),
            ),
        ]
    )


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run with an empty working directory and home so no config file is discovered."""
    work = tmp_path / "work"
    home = tmp_path / "home"
    work.mkdir()
    home.mkdir()
    monkeypatch.chdir(work)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("AUTOLINK_HEADINGS_CONFIG", raising=False)
    return work


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler and level changes made by CLI logging setup."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
