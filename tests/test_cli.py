"""Tests for CLI commands."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from chromamark.cli import app

runner = CliRunner()


class TestParseCommand:
    """Test the parse CLI command."""

    def test_parse_text_output(self) -> None:
        """Test the default one-line-per-run output."""
        result = runner.invoke(app, ["parse", "say **hi**"])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["'say '\tplain", "'hi'\tbold"]

    def test_parse_json_output(self) -> None:
        """Test chat-component JSON output."""
        result = runner.invoke(app, ["parse", "{gold}(coins)", "--format", "json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == [{"text": "coins", "color": "#ffaa00"}]

    def test_parse_ansi_output(self) -> None:
        """Test ANSI output."""
        result = runner.invoke(app, ["parse", "__u__", "-f", "ansi"])

        assert result.exit_code == 0
        assert "\033[4mu\033[0m" in result.stdout

    def test_parse_disable_feature(self) -> None:
        """Test --disable leaves that feature's markup as text."""
        result = runner.invoke(app, ["parse", "**a** *b*", "--disable", "bold"])

        assert result.exit_code == 0
        assert "'b'\titalic" in result.stdout
        assert "bold" not in result.stdout

    def test_parse_disable_unknown_feature(self) -> None:
        """Test that an unknown feature name is an error."""
        result = runner.invoke(app, ["parse", "x", "--disable", "blink"])

        assert result.exit_code == 1
        assert "Unknown feature" in result.output

    def test_parse_no_markup(self) -> None:
        """Test --no-markup returns the text untouched."""
        result = runner.invoke(app, ["parse", "**a**", "--no-markup"])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["'**a**'\tplain"]

    def test_parse_coalesce(self) -> None:
        """Test --coalesce merges same-style gradient characters."""
        result = runner.invoke(app, ["parse", "~#336699,#336699~(abc)", "--coalesce"])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["'abc'\tcolor=#336699"]

    def test_parse_stdin(self) -> None:
        """Test reading text from stdin."""
        result = runner.invoke(app, ["parse", "-"], input="~~gone~~\n")

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["'gone'\tstrikethrough"]

    def test_parse_with_config(self, tmp_path: Path) -> None:
        """Test --config applies custom delimiters."""
        config_path = tmp_path / "custom.yaml"
        config_path.write_text('features:\n  bold:\n    prefix: "<b>"\n    suffix: "</b>"\n')

        result = runner.invoke(app, ["--config", str(config_path), "parse", "<b>x</b>"])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["'x'\tbold"]

    def test_parse_missing_config(self, tmp_path: Path) -> None:
        """Test that a missing config file is reported."""
        result = runner.invoke(app, ["--config", str(tmp_path / "nope.yaml"), "parse", "x"])

        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_parse_invalid_config(self, tmp_path: Path) -> None:
        """Test that an invalid config file is reported."""
        config_path = tmp_path / "bad.yaml"
        config_path.write_text("features:\n  bold:\n    prefix: ''\n")

        result = runner.invoke(app, ["--config", str(config_path), "parse", "x"])

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_config_path_is_directory(self, tmp_path: Path) -> None:
        """Test that a directory passed as config is reported, not raised."""
        result = runner.invoke(app, ["--config", str(tmp_path), "features"])

        assert result.exit_code == 1
        assert "Cannot read config file" in result.output

    def test_config_not_utf8(self, tmp_path: Path) -> None:
        """Test that an undecodable config file is reported, not raised."""
        config_path = tmp_path / "chromamark.yaml"
        config_path.write_bytes(b"\xff\xfe\x00bold")

        result = runner.invoke(app, ["--config", str(config_path), "parse", "x"])

        assert result.exit_code == 1
        assert "Cannot read config file" in result.output

    def test_parse_verbose_logs_matches(self) -> None:
        """Test -v prints match details to stderr."""
        result = runner.invoke(app, ["-v", "1", "parse", "**a**"])

        assert result.exit_code == 0
        assert "bold: matched '**a**'" in result.output


class TestFeaturesCommand:
    """Test the features CLI command."""

    def test_lists_features_in_order(self) -> None:
        """Test feature listing."""
        result = runner.invoke(app, ["features"])

        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines[0] == "formatting: enabled"
        names = [line.split()[0] for line in lines[1:]]
        assert names == [
            "bold",
            "italic",
            "underline",
            "strikethrough",
            "spoiler",
            "hyperlink",
            "color",
            "gradient",
            "copy_to_clipboard",
        ]
        assert lines[-1].endswith("disabled")

    def test_features_uses_discovered_config(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that chromamark.yaml in the working directory is picked up."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "chromamark.yaml").write_text("enabled: false\n")

        result = runner.invoke(app, ["features"])

        assert result.exit_code == 0
        assert result.stdout.splitlines()[0] == "formatting: disabled"


class TestColorCommand:
    """Test the color CLI command."""

    @pytest.mark.parametrize(
        ("token", "expected"),
        [("#ABCDEF", "#abcdef"), ("gold", "#ffaa00"), ("DARK_RED", "#aa0000")],
    )
    def test_valid_color(self, token: str, expected: str) -> None:
        """Test valid tokens print their hex value."""
        result = runner.invoke(app, ["color", token])

        assert result.exit_code == 0
        assert result.stdout.strip() == expected

    def test_invalid_color(self) -> None:
        """Test invalid tokens exit with an error."""
        result = runner.invoke(app, ["color", "#GGGGGG"])

        assert result.exit_code == 1
        assert "invalid color token" in result.output

    def test_palette_from_config(self, tmp_path: Path) -> None:
        """Test config palette names are accepted."""
        config_path = tmp_path / "palette.yaml"
        config_path.write_text('palette:\n  brand: "#3366FF"\n')

        result = runner.invoke(app, ["-c", str(config_path), "color", "brand"])

        assert result.exit_code == 0
        assert result.stdout.strip() == "#3366ff"
