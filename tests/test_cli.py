"""Tests for the transferlut command line."""

from __future__ import annotations

import subprocess
import sys

from typer.testing import CliRunner

from transferlut import __version__
from transferlut.cli.app import app
from transferlut.pipeline.runner import PRESETS, save_lut
from transferlut.color.transfer import cvt_limited_8bit

runner = CliRunner()


class TestGenerateCommand:

    def test_default_run_writes_presets(self, output_dir):
        result = runner.invoke(app, ["--output-dir", str(output_dir)])
        assert result.exit_code == 0
        for preset in PRESETS:
            assert (output_dir / preset.filename).exists()

    def test_default_dir_relative_to_cwd(self, tmp_path, monkeypatch):
        (tmp_path / "output").mkdir()
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert (tmp_path / "output" / PRESETS[0].filename).exists()

    def test_missing_dir_fails(self, tmp_path):
        missing = tmp_path / "nope"
        result = runner.invoke(app, ["-o", str(missing)])
        assert result.exit_code == 1
        assert not missing.exists()

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestAuxCommands:

    def test_list(self, tmp_path, monkeypatch):
        (tmp_path / "output").mkdir()
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0
        assert "limited_to_full_8bit.cube" in result.stdout
        # Subcommands do not trigger generation
        assert list((tmp_path / "output").iterdir()) == []

    def test_inspect(self, output_dir):
        path = save_lut("f2l.cube", "Full to limited", cvt_limited_8bit, output_dir)
        result = runner.invoke(app, ["inspect", str(path)])
        assert result.exit_code == 0
        assert "Full to limited" in result.stdout
        assert "256" in result.stdout

    def test_inspect_missing_file(self, tmp_path):
        result = runner.invoke(app, ["inspect", str(tmp_path / "none.cube")])
        assert result.exit_code == 1


def _run_module(cwd):
    return subprocess.run(
        [sys.executable, "-m", "transferlut"],
        cwd=cwd,
        capture_output=True,
        text=True,
    )


class TestProcessBehaviour:
    """Tests for the output and exit status of a real process run."""

    def test_success_is_silent(self, tmp_path):
        (tmp_path / "output").mkdir()
        proc = _run_module(tmp_path)
        assert proc.returncode == 0
        assert proc.stdout == ""
        assert proc.stderr == ""
        assert len(list((tmp_path / "output").iterdir())) == len(PRESETS)

    def test_missing_output_dir_reports_error(self, tmp_path):
        proc = _run_module(tmp_path)
        assert proc.returncode == 1
        assert proc.stdout == ""
        assert "Error:" in proc.stderr
        assert PRESETS[0].filename in proc.stderr
        assert "Traceback" not in proc.stderr
        assert not (tmp_path / "output").exists()
