"""Tests for the normalize command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from fieldctl.cli import cli


@pytest.mark.usefixtures("_isolated_project")
class TestNormalizeCommand:
    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "normalize", '["a", "b", "c"]', "--type", "multiple_values"]
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["op"] == "normalize"
        assert data["data"]["value"] == ["a", "b", "c"]
        assert data["data"]["records"] == [{"value": "a"}, {"value": "b"}, {"value": "c"}]

    def test_field_type_schema(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "normalize", '"#ff0000"', "--field", "color"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"]["value"] == "#ff0000"
        assert data["data"]["keepalive"] is False

    def test_properties_option(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            [
                "--json",
                "normalize",
                '{"value": "v1", "label": "L1", "junk": 1}',
                "--type",
                "multiple_properties",
                "-p",
                "label=",
                "-p",
                "weight=0",
            ],
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"]["value"] == {"value": "v1", "label": "L1", "weight": "0"}

    def test_reads_stdin(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            ["-q", "normalize", "--field", "set"],
            input='["x", "y"]\n',
        )
        assert result.exit_code == 0
        assert result.stdout.strip() == '["x","y"]'

    def test_raw_flag(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "normalize", "not json", "--raw", "--field", "text"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "not json"

    def test_null_input_is_unset(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["normalize", "null", "--type", "value_set"])
        assert result.exit_code == 0
        assert "(unset)" in result.stdout

    def test_human_output_has_records_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            ["normalize", '[{"value": "a", "url": "/a"}]', "--type", "value_set", "-p", "url="],
        )
        assert result.exit_code == 0
        assert "OK" in result.stdout
        assert "/a" in result.stdout

    def test_invalid_json_is_usage_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["normalize", "{nope", "--type", "value_set"])
        assert result.exit_code == 2
        assert "Invalid JSON" in result.output

    def test_property_without_name(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["normalize", '"x"', "--type", "value_set", "-p", "=x"])
        assert result.exit_code == 2

    def test_missing_schema_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "normalize", '"x"'])
        assert result.exit_code == 1
        assert result.stdout == ""
        payload = json.loads(result.stderr)
        assert payload["error"]["code"] == "MISSING_SCHEMA"

    def test_unknown_field_type_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["normalize", '"x"', "--field", "gallery"])
        assert result.exit_code == 1
        assert "ERROR" in result.stderr

    def test_invalid_type_choice(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["normalize", '"x"', "--type", "bogus"])
        assert result.exit_code == 2


@pytest.mark.usefixtures("_isolated_project")
class TestConfiguredFieldTypes:
    def test_field_from_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "fieldctl.toml").write_text(
            '[fields.links]\nvalue_type = "value_set"\nproperties = { url = "" }\n'
        )
        result = cli_runner.invoke(
            cli, ["--json", "normalize", '[{"value": "Home"}]', "--field", "links"]
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"]["value"] == [{"value": "Home", "url": ""}]

    def test_bad_config_field_warns(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "fieldctl.toml").write_text('[fields.text]\nvalue_type = "value_set"\n')
        result = cli_runner.invoke(cli, ["normalize", '"x"', "--field", "text"])
        assert result.exit_code == 0
        assert "WARNING" in result.stderr
        assert "'text'" in result.stderr

    def test_local_plugin_field(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        plugin_dir = tmp_path / ".fieldctl" / "plugins"
        plugin_dir.mkdir(parents=True)
        (plugin_dir / "slides.py").write_text(
            "from fieldctl.domain.fields import FieldType\n"
            "from fieldctl.plugins import hookimpl\n\n\n"
            "class SlidesPlugin:\n"
            "    @hookimpl\n"
            "    def register_field_types(self):\n"
            '        return [FieldType(name="slides", value_type="value_set",'
            ' properties={"caption": ""})]\n'
        )
        result = cli_runner.invoke(
            cli, ["--json", "normalize", '[{"value": "a"}]', "--field", "slides"]
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"]["value"] == [{"value": "a", "caption": ""}]

    def test_plugins_disabled(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "fieldctl.toml").write_text("[plugins]\nenabled = false\n")
        plugin_dir = tmp_path / ".fieldctl" / "plugins"
        plugin_dir.mkdir(parents=True)
        (plugin_dir / "slides.py").write_text(
            "from fieldctl.domain.fields import FieldType\n"
            "from fieldctl.plugins import hookimpl\n\n\n"
            "class SlidesPlugin:\n"
            "    @hookimpl\n"
            "    def register_field_types(self):\n"
            '        return [FieldType(name="slides", value_type="value_set")]\n'
        )
        result = cli_runner.invoke(cli, ["--json", "normalize", '"a"', "--field", "slides"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "UNKNOWN_FIELD_TYPE"
