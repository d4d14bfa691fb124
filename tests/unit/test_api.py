#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_api.py
"""Unit tests for the top-level API functions."""

import logging
from io import BytesIO, StringIO

import pytest

from mdunwrap import Document, from_ast, to_ast, unwrap, unwrap_file
from mdunwrap.exceptions import FileAccessError, FileNotFoundError, ParsingError
from mdunwrap.options import MarkdownParserOptions, UnwrapRendererOptions


@pytest.mark.unit
class TestUnwrap:
    """Test unwrap()."""

    def test_joins_wrapped_paragraph(self):
        assert unwrap("A paragraph that was\nwrapped at some width.\n") == (
            "A paragraph that was wrapped at some width.\n"
        )

    def test_bytes_input(self):
        assert unwrap(b"one\ntwo\n") == "one two\n"

    def test_binary_stream_input(self):
        assert unwrap(BytesIO(b"one\ntwo\n")) == "one two\n"

    def test_text_stream_input(self):
        assert unwrap(StringIO("one\ntwo\n")) == "one two\n"

    def test_string_is_never_a_path(self, tmp_path):
        path = tmp_path / "doc.md"
        path.write_text("# x\n")
        assert unwrap(str(path)) != "# x\n"

    def test_empty_input(self):
        assert unwrap("") == ""

    def test_character_references_keep_their_meaning(self):
        assert unwrap("a &copy; b\n&amp; c &#35;\n") == "a \u00a9 b \\& c \\#\n"

    def test_escaped_entity_is_stable(self):
        assert unwrap("\\&amp;\n") == "\\&amp;\n"
        assert unwrap(unwrap("a &amp;copy; b\n")) == "a \\&copy; b\n"

    def test_renderer_options(self):
        options = UnwrapRendererOptions(bullet_symbol="*")
        assert unwrap("- a\n", renderer_options=options) == "* a\n"

    def test_parser_options(self):
        options = MarkdownParserOptions(plugins=("strikethrough",))
        assert unwrap("~~gone~~", parser_options=options) == (
            "<strikethrough null (null)>gone<strikethrough null (null)>\n"
        )

    def test_invalid_utf8(self):
        with pytest.raises(ParsingError):
            unwrap(b"\xff\xfe")

    def test_debug_timing_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="mdunwrap.api"):
            unwrap("a\n")
        messages = [record.getMessage() for record in caplog.records if record.name == "mdunwrap.api"]
        assert any(message.startswith("Parsing completed") for message in messages)
        assert any(message.startswith("Rendering completed") for message in messages)


@pytest.mark.unit
class TestAstRoundTrip:
    """Test to_ast() and from_ast()."""

    def test_to_ast_returns_document(self):
        assert isinstance(to_ast("# Title\n"), Document)

    def test_from_ast(self):
        assert from_ast(to_ast("- a\n- b\n")) == "- a\n- b\n"

    def test_from_ast_with_options(self):
        options = UnwrapRendererOptions(emphasis_symbol="_")
        assert from_ast(to_ast("*a* **b**"), options) == "_a_ __b__\n"


@pytest.mark.unit
class TestUnwrapFile:
    """Test unwrap_file()."""

    def test_read_only(self, tmp_path):
        path = tmp_path / "doc.md"
        path.write_bytes(b"one\ntwo\n")
        assert unwrap_file(path) == "one two\n"
        assert path.read_bytes() == b"one\ntwo\n"

    def test_accepts_str_path(self, tmp_path):
        path = tmp_path / "doc.md"
        path.write_bytes(b"one\ntwo\n")
        assert unwrap_file(str(path)) == "one two\n"

    def test_write_in_place(self, tmp_path):
        path = tmp_path / "doc.md"
        path.write_bytes(b"line one\nline two and a much longer\nthird line\n")
        output = unwrap_file(path, write=True)
        assert output == "line one line two and a much longer third line\n"
        assert path.read_bytes() == output.encode("utf-8")

    def test_write_truncates_longer_original(self, tmp_path):
        path = tmp_path / "doc.md"
        path.write_bytes(b"a\n\n\n\n\n\n\n\nb\n")
        unwrap_file(path, write=True)
        assert path.read_bytes() == b"a\n\nb\n"

    def test_write_is_logged(self, tmp_path, caplog):
        path = tmp_path / "doc.md"
        path.write_bytes(b"a\n")
        with caplog.at_level(logging.INFO, logger="mdunwrap.api"):
            unwrap_file(path, write=True)
        assert any("Rewrote" in record.getMessage() for record in caplog.records)

    def test_bom_is_not_written_back(self, tmp_path):
        path = tmp_path / "doc.md"
        path.write_bytes(b"\xef\xbb\xbfa\n")
        unwrap_file(path, write=True)
        assert path.read_bytes() == b"a\n"

    def test_missing_file(self, tmp_path):
        missing = tmp_path / "missing.md"
        with pytest.raises(FileNotFoundError) as exc_info:
            unwrap_file(missing)
        assert exc_info.value.file_path == str(missing)
        assert "File not found" in str(exc_info.value)

    def test_directory(self, tmp_path):
        with pytest.raises(FileAccessError) as exc_info:
            unwrap_file(tmp_path)
        assert str(tmp_path) in str(exc_info.value)

    def test_invalid_utf8_leaves_file_untouched(self, tmp_path):
        path = tmp_path / "doc.md"
        path.write_bytes(b"\xff\xfe")
        with pytest.raises(ParsingError):
            unwrap_file(path, write=True)
        assert path.read_bytes() == b"\xff\xfe"
