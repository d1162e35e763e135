"""Unit tests for linklore.api.rewrite.cmd_convert."""

import pytest

from linklore.api.rewrite.cmd_convert import cmd_convert
from tests.conftest import make_tree, run_cmd

pytestmark = pytest.mark.rewrite


def _overrides(tmp_path, root, **extra):
    doc = tmp_path / "input.md"
    if not doc.exists():
        doc.write_text("[[file1]] [[file2]]", encoding="utf-8")
    values = {
        "input_file": str(doc),
        "output_file": str(tmp_path / "output.md"),
        "base_dir": str(root),
        "prefix": "/",
    }
    values.update(extra)
    return values


def test_cmd_convert_end_to_end(tmp_path):
    root = make_tree(tmp_path / "root", {"file1.txt": "", "file2.txt": ""})

    result = run_cmd(cmd_convert, _overrides(tmp_path, root))

    assert result.success is True
    assert (tmp_path / "output.md").read_text(encoding="utf-8") == "[file1](/file1.txt) [file2](/file2.txt)"
    assert result.output["replaced"] == 2
    assert result.output["indexed_files"] == 2
    assert result.output["written"] is True
    assert result.output["errors"] == []
    assert result.output["unresolved"] == []


def test_cmd_convert_nested_root_with_prefix(tmp_path):
    root = make_tree(tmp_path / "nested", {"file1.txt": "", "file2.txt": ""})

    result = run_cmd(cmd_convert, _overrides(tmp_path, root, prefix="/nested/"))

    assert result.success is True
    assert (tmp_path / "output.md").read_text(encoding="utf-8") == (
        "[file1](/nested/file1.txt) [file2](/nested/file2.txt)"
    )


def test_cmd_convert_unresolved_links_are_warnings(tmp_path):
    root = make_tree(tmp_path / "root", {"file1.txt": ""})

    result = run_cmd(cmd_convert, _overrides(tmp_path, root))

    assert result.success is True
    assert (tmp_path / "output.md").read_text(encoding="utf-8") == "[file1](/file1.txt) [[file2]]"
    assert result.output["unresolved"] == [{"base": "file2", "raw": "[[file2]]"}]
    assert result.output["warnings"] == ["file not found for link: [[file2]]"]
    assert "1 unresolved" in result.result


def test_cmd_convert_output_exists(tmp_path):
    root = make_tree(tmp_path / "root", {"file1.txt": "", "file2.txt": ""})
    (tmp_path / "output.md").write_text("existing", encoding="utf-8")

    result = run_cmd(cmd_convert, _overrides(tmp_path, root))

    assert result.success is False
    assert result.output["written"] is False
    assert "already exists" in result.output["errors"][0]
    assert (tmp_path / "output.md").read_text(encoding="utf-8") == "existing"


def test_cmd_convert_force_overwrites(tmp_path):
    root = make_tree(tmp_path / "root", {"file1.txt": "", "file2.txt": ""})
    (tmp_path / "output.md").write_text("existing", encoding="utf-8")

    result = run_cmd(cmd_convert, _overrides(tmp_path, root, force=True))

    assert result.success is True
    assert (tmp_path / "output.md").read_text(encoding="utf-8") == "[file1](/file1.txt) [file2](/file2.txt)"


def test_cmd_convert_duplicate_basename_fails(tmp_path):
    root = make_tree(tmp_path / "root", {"a/file1.txt": "", "b/file1.md": ""})

    result = run_cmd(cmd_convert, _overrides(tmp_path, root))

    assert result.success is False
    assert result.output["errors"][0].startswith("error building index: duplicate key: file1")
    assert not (tmp_path / "output.md").exists()


def test_cmd_convert_missing_input(tmp_path):
    root = make_tree(tmp_path / "root", {"file1.txt": ""})

    result = run_cmd(
        cmd_convert,
        {"input_file": str(tmp_path / "nope.md"), "output_file": str(tmp_path / "output.md"), "base_dir": str(root)},
    )

    assert result.success is False
    assert result.output["indexed_files"] == 1
    assert result.output["errors"][0].startswith("error processing file:")
    assert not (tmp_path / "output.md").exists()


def test_cmd_convert_missing_input_setting():
    result = run_cmd(cmd_convert, {})

    assert result.success is False
    assert "invalid args" in result.output["errors"][0]
    assert "input_file" in result.output["errors"][0]


def test_cmd_convert_defaults_from_working_directory(clean_linklore_env):
    make_tree(clean_linklore_env, {"file1.txt": "", "doc.md": "Link: [[file1]]"})

    result = run_cmd(cmd_convert, {"input_file": "doc.md"})

    assert result.success is True
    assert result.output["output_file"] == "doc.out.md"
    assert (clean_linklore_env / "doc.out.md").read_text(encoding="utf-8") == "Link: [file1](/file1.txt)"

    # The previous output is ignored by default patterns, but now blocks a second run
    again = run_cmd(cmd_convert, {"input_file": "doc.md"})
    assert again.success is False
    assert again.output["indexed_files"] == 2


def test_cmd_convert_reads_environment(tmp_path, monkeypatch):
    root = make_tree(tmp_path / "root", {"file1.txt": ""})
    doc = tmp_path / "doc.md"
    doc.write_text("[[file1#top]]", encoding="utf-8")
    monkeypatch.setenv("LINKLORE_INPUT_FILE", str(doc))
    monkeypatch.setenv("LINKLORE_OUTPUT_FILE", str(tmp_path / "out.md"))
    monkeypatch.setenv("LINKLORE_BASE_DIR", str(root))
    monkeypatch.setenv("LINKLORE_BASE_URL", "https://site.example/")

    result = run_cmd(cmd_convert)

    assert result.success is True
    assert (tmp_path / "out.md").read_text(encoding="utf-8") == "[file1](https://site.example/file1.txt#top)"


def test_cmd_convert_preserves_undecodable_bytes(tmp_path):
    root = make_tree(tmp_path / "root", {"file1.txt": ""})
    doc = tmp_path / "input.md"
    doc.write_bytes(b"\xff\xfe [[file1]]\r\n")

    result = run_cmd(cmd_convert, _overrides(tmp_path, root))

    assert result.success is True
    assert (tmp_path / "output.md").read_bytes() == b"\xff\xfe [file1](/file1.txt)\r\n"
