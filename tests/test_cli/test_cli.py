"""Tests for the variantcore command-line interface."""

import json

import pytest
from click.testing import CliRunner

from variantcore import __version__
from variantcore.cli.main import cli


class TestResolveCommand:
    def test_success(self):
        result = CliRunner().invoke(cli, ["resolve", "sm:hover:bg-blue-500"])
        assert result.exit_code == 0
        assert "Base: bg-blue-500" in result.output
        assert "Media Query: (min-width:640px)" in result.output
        assert "(specificity: 180)" in result.output

    def test_failure_exit_code(self):
        result = CliRunner().invoke(cli, ["resolve", "hover:x", "print:screen:x"])
        assert result.exit_code == 1
        assert "Cannot combine 'print' and 'screen' variants" in result.output

    def test_json(self):
        result = CliRunner().invoke(cli, ["resolve", "--json", "dark:hover:x"])
        assert result.exit_code == 0
        [data] = json.loads(result.output)
        assert data["selector"] == ".dark .x:hover"
        assert data["specificity"] == 140

    def test_requires_token(self):
        result = CliRunner().invoke(cli, ["resolve"])
        assert result.exit_code == 2

    def test_with_config(self, fixtures_dir):
        result = CliRunner().invoke(
            cli,
            ["resolve", "--config", str(fixtures_dir / "config.json"), "tablet:hocus:p-4"],
        )
        assert result.exit_code == 0
        assert "Media Query: (min-width:700px)" in result.output

    def test_bad_config(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("[]")
        result = CliRunner().invoke(cli, ["resolve", "--config", str(path), "x"])
        assert result.exit_code == 2
        assert "Config error" in result.output

    @pytest.mark.parametrize(
        "filename, content",
        [
            ("bad-name.json", '{"custom_variants": [{"name": "Bad", "selector": ".b"}]}'),
            ("zero.json", '{"breakpoints": {"sm": 0}}'),
            ("bad-name.css", "@custom-variant foo- (&:hover);"),
            ("bad-breakpoint.css", "@theme { --breakpoint-Tablet: 700px; }"),
        ],
    )
    def test_invalid_config_values(self, tmp_path, filename, content):
        path = tmp_path / filename
        path.write_text(content)
        result = CliRunner().invoke(cli, ["resolve", "--config", str(path), "hover:x"])
        assert result.exit_code == 2
        assert "Config error" in result.output
        assert "Traceback" not in result.output

    def test_declaration_error_shows_position(self, tmp_path):
        path = tmp_path / "variants.css"
        path.write_text("@custom-variant foo- (&:hover);")
        result = CliRunner().invoke(cli, ["variants", "--config", str(path)])
        assert result.exit_code == 2
        assert "(line 1, column 17)" in result.output


class TestVariantsCommand:
    def test_lists_standard_variants(self):
        result = CliRunner().invoke(cli, ["variants"])
        assert result.exit_code == 0
        assert "hover" in result.output
        assert "(min-width:1536px)" in result.output

    def test_filter_by_kind(self):
        result = CliRunner().invoke(cli, ["variants", "--kind", "print"])
        assert result.exit_code == 0
        assert result.output.split() == ["print", "PRINT", "print"]

    def test_custom_from_declarations(self, fixtures_dir):
        result = CliRunner().invoke(
            cli,
            ["variants", "--kind", "custom", "--config", str(fixtures_dir / "variants.css")],
        )
        assert result.exit_code == 0
        assert "theme-midnight" in result.output
        assert "(pointer: fine)" in result.output

    def test_no_matches(self):
        result = CliRunner().invoke(cli, ["variants", "--kind", "reduced_motion"])
        assert result.exit_code == 0
        assert "No variants." in result.output


class TestReportCommand:
    def test_report(self, fixtures_dir):
        result = CliRunner().invoke(cli, ["report", str(fixtures_dir / "tokens.txt")])
        assert result.exit_code == 0
        assert "Total Classes: 8" in result.output
        assert "Successful Parses: 5 (62.5%)" in result.output
        assert "Failed Parses: 3" in result.output


class TestGroupOptions:
    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_verbose_flag_accepted(self):
        result = CliRunner().invoke(cli, ["--verbose", "resolve", "hover:x"])
        assert result.exit_code == 0
