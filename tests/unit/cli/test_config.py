"""Unit tests for the config commands."""

from pathlib import Path

from toolcommon.cli.main import app
from toolcommon.core.config import load_tool_config
from typer.testing import CliRunner

runner = CliRunner()


class TestConfigShow:
    """Tests for toolcommon config show."""

    def test_show_extensions(self, tmp_path: Path) -> None:
        """Configured extensions are listed."""
        path = tmp_path / "config.toml"
        path.write_text('extensions = ["Acme.UI", "Acme.Util"]\n')

        result = runner.invoke(app, ["config", "show", "--config", str(path)])

        assert result.exit_code == 0
        assert "Acme.UI" in result.stdout
        assert "Acme.Util" in result.stdout

    def test_show_missing(self, tmp_path: Path) -> None:
        """A missing file is reported, not an error."""
        result = runner.invoke(app, ["config", "show", "-c", str(tmp_path / "none.toml")])

        assert result.exit_code == 0
        assert "No tool config" in result.stdout

    def test_show_invalid(self, tmp_path: Path) -> None:
        """An invalid file exits with code 1."""
        path = tmp_path / "config.toml"
        path.write_text("extensions = [\n")

        result = runner.invoke(app, ["config", "show", "-c", str(path)])

        assert result.exit_code == 1


class TestConfigAddExtension:
    """Tests for toolcommon config add-extension."""

    def test_add_creates_file(self, tmp_path: Path) -> None:
        """Adding to a missing config creates it."""
        path = tmp_path / "config.toml"

        result = runner.invoke(app, ["config", "add-extension", "Acme.UI", "-c", str(path)])

        assert result.exit_code == 0
        assert load_tool_config(path).extensions == ["Acme.UI"]

    def test_add_is_idempotent(self, tmp_path: Path) -> None:
        """An extension is only stored once."""
        path = tmp_path / "config.toml"
        runner.invoke(app, ["config", "add-extension", "Acme.UI", "-c", str(path)])
        result = runner.invoke(app, ["config", "add-extension", "Acme.UI", "-c", str(path)])

        assert result.exit_code == 0
        assert "already configured" in result.stdout
        assert load_tool_config(path).extensions == ["Acme.UI"]
