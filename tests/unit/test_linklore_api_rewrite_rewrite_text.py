"""Unit tests for linklore.api.rewrite.rewrite_text."""

import logging

import pytest

from linklore.api.index.build_index import build_index
from linklore.api.link.LinkNotFoundError import LinkNotFoundError
from linklore.api.rewrite.rewrite_text import rewrite_text
from tests.conftest import make_tree

pytestmark = pytest.mark.rewrite


@pytest.fixture
def index(tmp_path):
    make_tree(tmp_path / "root", {"file1.txt": "", "file2.txt": "", "img/photo.jpg": ""})
    return build_index(tmp_path / "root", [])


def test_rewrite_text_end_to_end(index):
    result = rewrite_text("[[file1]] [[file2]]", index, "/")

    assert result.content == "[file1](/file1.txt) [file2](/file2.txt)"
    assert result.replaced == 2
    assert result.diagnostics == []


def test_rewrite_text_nested_prefix(index):
    result = rewrite_text("[[file1]] [[file2]]", index, "/nested/")

    assert result.content == "[file1](/nested/file1.txt) [file2](/nested/file2.txt)"


def test_rewrite_text_preserves_surrounding_text(index):
    text = "# Title\r\n\nSee [[file1|one]], then ![[photo.jpg]].\n\tTrailing [single] and [[bad|a|b]]\n"

    result = rewrite_text(text, index, "/")

    assert result.content == (
        "# Title\r\n\nSee [one](/file1.txt), then [photo.jpg](/img/photo.jpg).\n\tTrailing [single] and [[bad|a|b]]\n"
    )


def test_rewrite_text_without_links_is_unchanged(index):
    text = "plain text with [brackets] and ]] stray [[ markers"

    result = rewrite_text(text, index, "/")

    assert result.content == text
    assert result.replaced == 0


def test_rewrite_text_unresolved_links_kept_and_reported(index):
    text = "[[missing]] [[file1]] ![[gone.png|x]]"

    result = rewrite_text(text, index, "/")

    assert result.content == "[[missing]] [file1](/file1.txt) ![[gone.png|x]]"
    assert result.replaced == 1
    assert result.diagnostics == [
        LinkNotFoundError("missing", "[[missing]]"),
        LinkNotFoundError("gone.png", "![[gone.png|x]]"),
    ]


def test_rewrite_text_does_not_rescan_output(index):
    # A rendered link is not resolved again
    result = rewrite_text("[[file1|[[file2]]]]", index, "/")

    assert result.content == "[[file1|[file2](/file2.txt)]]"
    assert result.replaced == 1


def test_rewrite_text_logs_unresolved_links(index, caplog):
    with caplog.at_level(logging.WARNING, logger="linklore.api.rewrite.rewrite_text"):
        rewrite_text("[[missing]]", index, "/")

    assert "file not found for link: [[missing]]" in caplog.text
