"""Tests for CLI commands."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from lgbm_harness.cli import app

runner = CliRunner(env={"NO_COLOR": "1"})


class TestCliHelp:
    """Tests for CLI help output."""

    def test_main_help(self) -> None:
        """Test main help displays."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "smoke" in result.stdout
        assert "demo" in result.stdout

    def test_smoke_help(self) -> None:
        """Test smoke command help."""
        result = runner.invoke(app, ["smoke", "--help"])
        assert result.exit_code == 0
        assert "--rows" in result.stdout


class TestSmokeCommand:
    """Tests for the smoke command."""

    def test_smoke_default(self) -> None:
        """Test the smoke test passes."""
        result = runner.invoke(app, ["smoke", "--param", "verbosity=-1"])
        assert result.exit_code == 0
        assert "Smoke test passed" in result.stdout
        assert "128 rows x 1 features" in result.stdout

    def test_smoke_rows(self) -> None:
        """Test the row count option."""
        result = runner.invoke(app, ["smoke", "-n", "30", "-p", "verbosity=-1"])
        assert result.exit_code == 0
        assert "30 rows" in result.stdout

    def test_smoke_library_error(self) -> None:
        """Test library errors exit with code 1."""
        result = runner.invoke(app, ["smoke", "-p", "max_bin=1", "-p", "verbosity=-1"])
        assert result.exit_code == 1
        assert "DatasetError" in result.stdout

    def test_smoke_malformed_param(self) -> None:
        """Test malformed --param exits with a usage error."""
        result = runner.invoke(app, ["smoke", "--param", "verbosity"])
        assert result.exit_code == 2

    def test_smoke_zero_rows(self) -> None:
        """Test zero rows is rejected by option validation."""
        result = runner.invoke(app, ["smoke", "--rows", "0"])
        assert result.exit_code == 2


class TestDemoCommand:
    """Tests for the demo command."""

    def test_demo(self) -> None:
        """Test the demo prints predictions and importance."""
        result = runner.invoke(app, ["demo", "-i", "3", "-p", "verbosity=-1"])
        assert result.exit_code == 0
        assert "Training completed" in result.stdout
        assert "Predictions" in result.stdout
        assert "Feature Importance" in result.stdout

    def test_demo_save_model(self, tmp_path: Path) -> None:
        """Test the model is written when requested."""
        path = tmp_path / "out" / "model.txt"
        result = runner.invoke(app, ["demo", "-i", "2", "-p", "verbosity=-1", "--save-model", str(path)])
        assert result.exit_code == 0
        assert path.exists()
        assert path.read_text().startswith("tree")
        assert "Model saved" in result.stdout

    def test_demo_save_model_unwritable(self, tmp_path: Path) -> None:
        """Test a save failure exits 1 with the error instead of a traceback."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        path = blocker / "model.txt"
        result = runner.invoke(app, ["demo", "-i", "2", "-p", "verbosity=-1", "--save-model", str(path)])
        assert result.exit_code == 1
        assert "BoosterError" in result.stdout
        assert not path.exists()


class TestInfoCommand:
    """Tests for the info command."""

    def test_info(self) -> None:
        """Test build info is shown."""
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert "Hardware threads" in result.stdout
        assert "LightGBM" in result.stdout
        assert "OpenMP" in result.stdout

    def test_info_openmp_disabled(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the OpenMP rows when no OpenMP runtime is loaded."""
        monkeypatch.setattr("lgbm_harness.info.threadpool_info", lambda: [])
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert "DISABLED" in result.stdout
