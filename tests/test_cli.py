"""
CLI tests: exit codes and stderr messages through `main()`, plus one
end-to-end run of `python -m minigrep` in a subprocess.
"""
from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest

from minigrep import __version__
from minigrep.cli import main

REPO_ROOT = Path(__file__).parent.parent
POEM = "Rust:\nsafe, fast, productive.\nPick three.\nTrust me.\n"


@pytest.fixture
def poem(tmp_path):
    p = tmp_path / "poem.txt"
    p.write_text(POEM, encoding="utf-8")
    return p


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("CASE_INSENSITIVE", raising=False)


def _main(argv) -> int:
    with pytest.raises(SystemExit) as exc:
        main(argv)
    return exc.value.code


# ── main ──────────────────────────────────────────────────────────────────────

class TestMain:
    def test_success(self, poem, capsys):
        assert _main(["minigrep", "Trust", str(poem)]) == 0
        captured = capsys.readouterr()
        assert captured.out == "Trust me.\n"
        assert captured.err == ""

    def test_no_matches_still_succeeds(self, poem, capsys):
        assert _main(["minigrep", "zzz", str(poem)]) == 0
        assert capsys.readouterr().out == ""

    def test_missing_arguments(self, capsys):
        assert _main(["minigrep"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "Problem parsing arguments: Not enough arguments\n"

    def test_conflicting_flags(self, poem, capsys):
        assert _main(["minigrep", "rust", str(poem), "-s", "-S"]) == 1
        assert capsys.readouterr().err.startswith("Problem parsing arguments: ")

    def test_missing_file(self, tmp_path, capsys):
        missing = tmp_path / "missing.txt"
        assert _main(["minigrep", "rust", str(missing)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Application error: ")
        assert "No such file or directory" in captured.err

    def test_upper_s_flag(self, poem, capsys):
        assert _main(["minigrep", "rUsT", str(poem), "-S"]) == 0
        assert capsys.readouterr().out == "Rust:\nTrust me.\n"

    def test_env_variable(self, poem, capsys, monkeypatch):
        monkeypatch.setenv("CASE_INSENSITIVE", "")
        assert _main(["minigrep", "rUsT", str(poem)]) == 0
        assert capsys.readouterr().out == "Rust:\nTrust me.\n"

    def test_lower_s_flag_beats_env(self, poem, capsys, monkeypatch):
        monkeypatch.setenv("CASE_INSENSITIVE", "1")
        assert _main(["minigrep", "rust", str(poem), "-s"]) == 0
        assert capsys.readouterr().out == "Trust me.\n"

    def test_verbose(self, poem, capsys):
        assert _main(["minigrep", "Trust", str(poem), "-v"]) == 0
        captured = capsys.readouterr()
        assert captured.out == "Trust me.\n"
        assert "[minigrep]" in captured.err

    def test_help(self, capsys):
        assert _main(["minigrep", "--help"]) == 0
        assert capsys.readouterr().out.startswith("usage: minigrep")

    def test_version(self, capsys):
        assert _main(["minigrep", "--version"]) == 0
        assert capsys.readouterr().out == f"minigrep {__version__}\n"


# ── python -m minigrep ────────────────────────────────────────────────────────

class TestModuleEntryPoint:
    def _run(self, *args) -> subprocess.CompletedProcess:
        return subprocess.run(
            [sys.executable, "-m", "minigrep", *args],
            cwd=str(REPO_ROOT),
            capture_output=True,
            text=True,
            encoding="utf-8",
        )

    def test_end_to_end(self, poem):
        r = self._run("three", str(poem))
        assert r.returncode == 0, r.stderr
        assert r.stdout == "Pick three.\n"

    def test_end_to_end_missing_file(self, tmp_path):
        r = self._run("three", str(tmp_path / "missing.txt"))
        assert r.returncode == 1
        assert r.stdout == ""
        assert r.stderr.startswith("Application error: ")
