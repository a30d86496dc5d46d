"""Unit tests for the CLI."""

from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from credo.cli import main


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.mark.unit
class TestCheckSeed:
    """Tests for the check-seed command."""

    def test_packaged_seed(self, runner: CliRunner, tmp_path: Path) -> None:
        """The bundled seed passes and its counts are printed."""
        with runner.isolated_filesystem(temp_dir=tmp_path):
            result = runner.invoke(main, ["check-seed"])

        assert result.exit_code == 0
        assert "Seed data OK" in result.output
        assert "students: 21" in result.output
        assert "courses: 6" in result.output
        assert "enrollments: 26" in result.output

    def test_invalid_seed(self, runner: CliRunner, tmp_path: Path) -> None:
        """A rule-breaking seed exits non-zero with the reason."""
        seed_path = tmp_path / "bad.yaml"
        seed_path.write_text("enrollments:\n  - {student_id: 1, course_id: 1}\n")

        result = runner.invoke(main, ["check-seed", str(seed_path)])

        assert result.exit_code == 1
        assert "Seed data error" in result.output

    def test_binary_seed(self, runner: CliRunner, tmp_path: Path) -> None:
        """An undecodable seed file is reported, not raised."""
        seed_path = tmp_path / "seed.yaml"
        seed_path.write_bytes(b"\xff\xfe")

        result = runner.invoke(main, ["check-seed", str(seed_path)])

        assert result.exit_code == 1
        assert "Seed data error" in result.output
        assert not isinstance(result.exception, UnicodeDecodeError)

    def test_directory_seed(self, runner: CliRunner, tmp_path: Path) -> None:
        """A directory in place of a seed file is reported."""
        result = runner.invoke(main, ["check-seed", str(tmp_path)])

        assert result.exit_code == 1
        assert "Seed data error" in result.output

    def test_bad_config(self, runner: CliRunner, tmp_path: Path) -> None:
        """Configuration errors are reported."""
        config_path = tmp_path / "credo.yaml"
        config_path.write_text("capacity: nope\n")

        result = runner.invoke(main, ["check-seed", "--config", str(config_path)])

        assert result.exit_code == 1
        assert "Configuration error" in result.output


@pytest.mark.unit
class TestServe:
    """Tests for the serve command."""

    def test_serve_runs_uvicorn(self, runner: CliRunner, tmp_path: Path) -> None:
        """Host and port options reach uvicorn."""
        with (
            runner.isolated_filesystem(temp_dir=tmp_path),
            patch("credo.cli.uvicorn.run") as mock_run,
            patch("credo.cli.setup_logging_from_config") as mock_logging,
        ):
            result = runner.invoke(main, ["serve", "--host", "0.0.0.0", "--port", "9123"])

        assert result.exit_code == 0, result.output
        mock_logging.assert_called_once()
        kwargs = mock_run.call_args.kwargs
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 9123

    def test_serve_uses_config_defaults(self, runner: CliRunner, tmp_path: Path) -> None:
        """Without options, the config's server section is used."""
        config_path = tmp_path / "credo.yaml"
        config_path.write_text("server:\n  host: 10.0.0.1\n  port: 7000\n")

        with (
            patch("credo.cli.uvicorn.run") as mock_run,
            patch("credo.cli.setup_logging_from_config"),
        ):
            result = runner.invoke(main, ["serve", "--config", str(config_path), "--no-seed"])

        assert result.exit_code == 0, result.output
        assert mock_run.call_args.kwargs["host"] == "10.0.0.1"
        assert mock_run.call_args.kwargs["port"] == 7000
