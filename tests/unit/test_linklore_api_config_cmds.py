"""Unit tests for linklore.api.config commands."""

import pytest

from linklore.api.config.cmd_show import cmd_show
from linklore.api.config.cmd_version import cmd_version
from linklore.api.config.get_package_version import get_package_version
from tests.conftest import run_cmd

pytestmark = pytest.mark.config


def test_cmd_show_effective_config(monkeypatch):
    monkeypatch.setenv("LINKLORE_BASE_DIR", "/vault")

    result = run_cmd(cmd_show, {"input_file": "doc.md"})

    assert result.success is True
    assert result.output["content"]["base_dir"] == "/vault"
    assert result.output["content"]["output_file"] == "doc.out.md"


def test_cmd_show_invalid_config():
    result = run_cmd(cmd_show, {"ignore_patterns": [" bad"], "input_file": "doc.md"})

    assert result.success is False
    assert result.output["content"] == {}
    assert "invalid ignore pattern" in result.output["errors"][0]


def test_cmd_version():
    result = run_cmd(cmd_version)

    assert result.success is True
    assert result.output["version"] == get_package_version()
    assert result.output["version"]
