"""Shared pytest configuration and fixtures for all tests."""

from pathlib import Path

import pytest

from linklore.api.config._constants import ENV_KEYS


def pytest_configure(config):
    for marker in ("unit", "index", "link", "rewrite", "config", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def make_tree(root: Path, files: dict[str, str]) -> Path:
    """Create files (relative path -> content) under root and return root."""
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_linklore_env(monkeypatch, tmp_path):
    """Isolate every test from LINKLORE_* variables and any .env in the cwd."""
    for keys in ENV_KEYS.values():
        for key in keys:
            monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv("LINKLORE_LOG_LEVEL", raising=False)
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture
def vault(tmp_path) -> Path:
    """Small directory tree with unique basenames."""
    return make_tree(
        tmp_path / "vault",
        {
            "file1.txt": "",
            "file2.txt": "",
            "notes/Project Plan.md": "# Plan",
            "assets/image.png": "",
            ".obsidian/workspace.json": "{}",
        },
    )
