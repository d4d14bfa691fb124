#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_unwrap_cli_integration.py
"""End-to-end tests running ``python -m mdunwrap`` in a subprocess."""

import os
import subprocess
import sys
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).parent.parent.parent / "src"


def _run(args, cwd, stdin=b""):
    env = {key: value for key, value in os.environ.items() if not key.startswith("MDUNWRAP_")}
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), env.get("PYTHONPATH")]))
    env["HOME"] = str(cwd)
    return subprocess.run(
        [sys.executable, "-m", "mdunwrap", *args],
        input=stdin,
        capture_output=True,
        cwd=cwd,
        env=env,
        timeout=60,
    )


@pytest.mark.integration
@pytest.mark.cli
class TestCliSubprocess:
    """Run the installed module as a separate process."""

    def test_filter_stdin(self, tmp_path):
        result = _run([], tmp_path, stdin=b"> a\n> b\n")
        assert result.returncode == 0
        assert result.stdout == b"> a b\n"
        assert result.stderr == b""

    def test_output_uses_line_feeds(self, tmp_path):
        result = _run([], tmp_path, stdin=b"a\r\nb\r\n\r\nc\r\n")
        assert result.returncode == 0
        assert result.stdout == b"a b\n\nc\n"

    def test_rewrite_files(self, tmp_path):
        doc = tmp_path / "doc.md"
        doc.write_bytes(b"- one\n  two\n")
        result = _run(["-w", "doc.md"], tmp_path)
        assert result.returncode == 0
        assert result.stdout == b""
        assert doc.read_bytes() == b"- one two\n"

    def test_write_without_files(self, tmp_path):
        result = _run(["-w"], tmp_path)
        assert result.returncode == 2
        assert result.stderr == b"mdunwrap: must include filenames with -w option\n"

    def test_missing_file(self, tmp_path):
        result = _run(["nope.md"], tmp_path)
        assert result.returncode == 1
        assert result.stderr.startswith(b"mdunwrap: File not found: nope.md")

    def test_version(self, tmp_path):
        result = _run(["--version"], tmp_path)
        assert result.returncode == 0
        assert result.stdout.strip() == b"mdunwrap 1.0.0"
