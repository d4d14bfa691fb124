#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/cli/test_cli_main.py
"""Tests for the mdunwrap command entry point."""

import io
import logging
import sys

import pytest

from mdunwrap.cli import build_options, main
from mdunwrap.cli.builder import create_parser
from mdunwrap.constants import EXIT_ERROR, EXIT_SUCCESS, EXIT_VALIDATION_ERROR

WRAPPED = "line one\nline two\n"
UNWRAPPED = "line one line two\n"


def _set_stdin(monkeypatch, data: bytes) -> None:
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data), encoding="utf-8"))


@pytest.mark.cli
@pytest.mark.unit
class TestStdin:
    """Test filtering standard input."""

    def test_stdin_to_stdout(self, isolated_config, monkeypatch, capsys):
        _set_stdin(monkeypatch, WRAPPED.encode("utf-8"))
        assert main([]) == EXIT_SUCCESS
        captured = capsys.readouterr()
        assert captured.out == UNWRAPPED
        assert captured.err == ""

    def test_empty_stdin(self, isolated_config, monkeypatch, capsys):
        _set_stdin(monkeypatch, b"")
        assert main([]) == EXIT_SUCCESS
        assert capsys.readouterr().out == ""

    def test_invalid_utf8_on_stdin(self, isolated_config, monkeypatch, capsys):
        _set_stdin(monkeypatch, b"\xff\xfe")
        assert main([]) == EXIT_ERROR
        assert capsys.readouterr().err.startswith("mdunwrap: Input is not valid UTF-8")

    def test_text_stdin_without_buffer(self, isolated_config, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.StringIO(WRAPPED))
        assert main([]) == EXIT_SUCCESS
        assert capsys.readouterr().out == UNWRAPPED

    def test_output_is_utf8_whatever_the_locale(self, isolated_config, monkeypatch):
        _set_stdin(monkeypatch, "café\nnaïve &copy;\n".encode("utf-8"))
        raw = io.BytesIO()
        monkeypatch.setattr(sys, "stdout", io.TextIOWrapper(raw, encoding="ascii"))
        assert main([]) == EXIT_SUCCESS
        assert raw.getvalue() == "café naïve ©\n".encode("utf-8")

    def test_text_stdout_without_buffer(self, isolated_config, monkeypatch):
        _set_stdin(monkeypatch, WRAPPED.encode("utf-8"))
        out = io.StringIO()
        monkeypatch.setattr(sys, "stdout", out)
        assert main([]) == EXIT_SUCCESS
        assert out.getvalue() == UNWRAPPED


@pytest.mark.cli
@pytest.mark.unit
class TestFiles:
    """Test processing named files."""

    def test_files_are_printed_in_order(self, isolated_config, capsys):
        first = isolated_config / "a.md"
        second = isolated_config / "b.md"
        first.write_text("a\nb\n", encoding="utf-8")
        second.write_text("c\nd\n", encoding="utf-8")

        assert main([str(first), str(second)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "a b\nc d\n"
        assert first.read_text(encoding="utf-8") == "a\nb\n"

    def test_printed_files_are_utf8_whatever_the_locale(self, isolated_config, monkeypatch):
        path = isolated_config / "doc.md"
        path.write_text("über\nall\n", encoding="utf-8")
        raw = io.BytesIO()
        monkeypatch.setattr(sys, "stdout", io.TextIOWrapper(raw, encoding="latin-1"))
        assert main([str(path)]) == EXIT_SUCCESS
        assert raw.getvalue() == "über all\n".encode("utf-8")

    def test_write_rewrites_files(self, isolated_config, capsys):
        first = isolated_config / "a.md"
        second = isolated_config / "b.md"
        first.write_text("a\nb\n", encoding="utf-8")
        second.write_text("- x\n  y\n", encoding="utf-8")

        assert main(["-w", str(first), str(second)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == ""
        assert first.read_bytes() == b"a b\n"
        assert second.read_bytes() == b"- x y\n"

    def test_write_is_idempotent(self, isolated_config, sample_wrapped):
        path = isolated_config / "doc.md"
        path.write_text(sample_wrapped, encoding="utf-8")
        assert main(["--write", str(path)]) == EXIT_SUCCESS
        once = path.read_bytes()
        assert main(["--write", str(path)]) == EXIT_SUCCESS
        assert path.read_bytes() == once

    def test_write_without_files(self, isolated_config, capsys):
        assert main(["-w"]) == EXIT_VALIDATION_ERROR
        assert capsys.readouterr().err == "mdunwrap: must include filenames with -w option\n"

    def test_missing_file(self, isolated_config, capsys):
        missing = isolated_config / "missing.md"
        assert main([str(missing)]) == EXIT_ERROR
        assert capsys.readouterr().err == f"mdunwrap: File not found: {missing}\n"

    def test_directory_argument(self, isolated_config, capsys):
        assert main([str(isolated_config)]) == EXIT_ERROR
        assert capsys.readouterr().err.startswith(f"mdunwrap: {isolated_config}")

    def test_stops_at_first_failure(self, isolated_config, capsys):
        good = isolated_config / "good.md"
        later = isolated_config / "later.md"
        good.write_text("a\nb\n", encoding="utf-8")
        later.write_text("c\nd\n", encoding="utf-8")

        code = main(["-w", str(good), str(isolated_config / "missing.md"), str(later)])
        assert code == EXIT_ERROR
        assert good.read_bytes() == b"a b\n"
        assert later.read_bytes() == b"c\nd\n"

    def test_invalid_utf8_file_names_path(self, isolated_config, capsys):
        bad = isolated_config / "bad.md"
        bad.write_bytes(b"\xff")
        assert main([str(bad)]) == EXIT_ERROR
        assert capsys.readouterr().err.startswith(f"mdunwrap: {bad}: Input is not valid UTF-8")


@pytest.mark.cli
@pytest.mark.unit
class TestOptions:
    """Test option flags and their precedence."""

    def test_bullet_symbol_flag(self, isolated_config, monkeypatch, capsys):
        _set_stdin(monkeypatch, b"- a\n")
        assert main(["--bullet-symbol", "*"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "* a\n"

    def test_invalid_choice_is_rejected_by_argparse(self, isolated_config, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--bullet-symbol", "x"])
        assert exc_info.value.code == 2

    def test_plugins_flag(self, isolated_config, monkeypatch, capsys):
        _set_stdin(monkeypatch, b"~~x~~\n")
        assert main(["--plugins", "strikethrough"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "<strikethrough null (null)>x<strikethrough null (null)>\n"

    def test_unknown_plugin(self, isolated_config, capsys):
        assert main(["--plugins", "nope"]) == EXIT_VALIDATION_ERROR
        assert "Unknown mistune plugin" in capsys.readouterr().err

    def test_env_overrides_config_file(self, isolated_config, monkeypatch, capsys):
        (isolated_config / ".mdunwrap.toml").write_text('bullet_symbol = "+"\n', encoding="utf-8")
        monkeypatch.setenv("MDUNWRAP_BULLET_SYMBOL", "*")
        _set_stdin(monkeypatch, b"- a\n")
        assert main([]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "* a\n"

    def test_flag_overrides_env(self, isolated_config, monkeypatch, capsys):
        monkeypatch.setenv("MDUNWRAP_BULLET_SYMBOL", "*")
        _set_stdin(monkeypatch, b"- a\n")
        assert main(["--bullet-symbol", "+"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "+ a\n"

    def test_invalid_env_value(self, isolated_config, monkeypatch, capsys):
        monkeypatch.setenv("MDUNWRAP_BULLET_SYMBOL", "x")
        assert main([]) == EXIT_VALIDATION_ERROR
        assert "bullet_symbol" in capsys.readouterr().err

    def test_discovered_config_file(self, isolated_config, monkeypatch, capsys):
        (isolated_config / ".mdunwrap.yaml").write_text("emphasis-symbol: _\n", encoding="utf-8")
        _set_stdin(monkeypatch, b"*a*\n")
        assert main([]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "_a_\n"

    def test_no_config_skips_discovery(self, isolated_config, monkeypatch, capsys):
        (isolated_config / ".mdunwrap.toml").write_text('bullet_symbol = "+"\n', encoding="utf-8")
        _set_stdin(monkeypatch, b"- a\n")
        assert main(["--no-config"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "- a\n"

    def test_explicit_config(self, isolated_config, tmp_path, monkeypatch, capsys):
        config = tmp_path / "custom.json"
        config.write_text('{"code_fence_char": "~"}', encoding="utf-8")
        _set_stdin(monkeypatch, b"```\nx\n```\n")
        assert main(["--config", str(config)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "~~~\nx\n~~~\n"

    def test_config_from_env_var(self, isolated_config, tmp_path, monkeypatch, capsys):
        config = tmp_path / "custom.toml"
        config.write_text('bullet_symbol = "*"\n', encoding="utf-8")
        monkeypatch.setenv("MDUNWRAP_CONFIG", str(config))
        _set_stdin(monkeypatch, b"- a\n")
        assert main([]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "* a\n"

    def test_missing_explicit_config(self, isolated_config, capsys):
        assert main(["--config", "nowhere.toml"]) == EXIT_VALIDATION_ERROR
        assert "Configuration file does not exist" in capsys.readouterr().err

    def test_build_options_layers(self, isolated_config):
        parsed = create_parser().parse_args(["--emphasis-symbol", "_"])
        parser_options, renderer_options = build_options(
            parsed, environ={"MDUNWRAP_BULLET_SYMBOL": "+", "MDUNWRAP_PLUGINS": "table, math"}
        )
        assert renderer_options.bullet_symbol == "+"
        assert renderer_options.emphasis_symbol == "_"
        assert parser_options.plugins == ("table", "math")


@pytest.mark.cli
@pytest.mark.unit
class TestMiscFlags:
    """Test version and logging flags."""

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert capsys.readouterr().out.strip() == "mdunwrap 1.0.0"

    def test_help(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        assert "--bullet-symbol" in out
        assert "MDUNWRAP_BULLET_SYMBOL" in out

    def test_log_level(self, isolated_config, monkeypatch):
        _set_stdin(monkeypatch, b"a\n")
        assert main(["--log-level", "DEBUG"]) == EXIT_SUCCESS
        assert logging.getLogger().level == logging.DEBUG

    def test_trace_overrides_log_level(self, isolated_config, monkeypatch):
        _set_stdin(monkeypatch, b"a\n")
        assert main(["--log-level", "ERROR", "--trace"]) == EXIT_SUCCESS
        assert logging.getLogger().level == logging.DEBUG

    def test_log_file(self, isolated_config, tmp_path, monkeypatch):
        log_file = tmp_path / "run.log"
        path = isolated_config / "doc.md"
        path.write_text("a\n", encoding="utf-8")
        assert main(["--log-level", "INFO", "--log-file", str(log_file), "-w", str(path)]) == EXIT_SUCCESS
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "Rewrote" in log_file.read_text(encoding="utf-8")
