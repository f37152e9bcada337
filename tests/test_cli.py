"""CLI command tests"""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from translatable_forms import i18n
from translatable_forms.cli import cli

SCHEMA = {
    "components": [
        {"kind": "field", "name": "title", "label": "Title"},
        {"kind": "field", "name": "is_active", "type": "boolean"},
    ]
}


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_locale():
    yield
    i18n.initialize("en")


def test_publish_config_writes_file(runner):
    with runner.isolated_filesystem():
        result = runner.invoke(cli, ["publish-config"], obj={})

        assert result.exit_code == 0
        assert "Configuration published to" in result.output
        assert Path("config.toml").is_file()


def test_publish_config_refuses_to_overwrite(runner):
    with runner.isolated_filesystem():
        Path("config.toml").write_text('locale = "uk"\n')

        result = runner.invoke(cli, ["publish-config"], obj={})

        assert result.exit_code != 0
        assert "already exists" in result.output
        assert Path("config.toml").read_text() == 'locale = "uk"\n'


def test_publish_config_force(runner):
    with runner.isolated_filesystem():
        Path("config.toml").write_text('locale = "uk"\n')

        result = runner.invoke(cli, ["publish-config", "--force"], obj={})

        assert result.exit_code == 0
        assert "tab_label_format" in Path("config.toml").read_text(encoding="utf-8")


def test_locales_from_config_file(runner):
    with runner.isolated_filesystem():
        Path("forms.toml").write_text(
            '[locales.en]\nnative = "English"\n\n[locales.uk]\nnative = "Ukrainian"\n'
        )

        result = runner.invoke(cli, ["-c", "forms.toml", "locales"], obj={})

        assert result.exit_code == 0
        assert "en\tEnglish" in result.output
        assert "uk\tUkrainian" in result.output


def test_locales_without_config_uses_application_locale(runner):
    with runner.isolated_filesystem():
        result = runner.invoke(cli, ["locales"], obj={})

        assert result.exit_code == 0
        assert "en\ten" in result.output


def test_locales_with_missing_config_file(runner):
    with runner.isolated_filesystem():
        result = runner.invoke(cli, ["-c", "missing.toml", "locales"], obj={})

        assert result.exit_code != 0
        assert "Configuration file not found" in result.output


def test_transform_prints_transformed_schema(runner, monkeypatch):
    monkeypatch.setenv("TRANSLATABLE_FORMS_LOCALES", '["en", "uk"]')

    with runner.isolated_filesystem():
        Path("schema.json").write_text(json.dumps(SCHEMA))

        result = runner.invoke(cli, ["transform", "schema.json", "-a", "title"], obj={})

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        tabs, active = data["components"]
        assert tabs["type"] == "tabs"
        assert [tab["id"] for tab in tabs["children"]] == ["en", "uk"]
        assert tabs["children"][1]["children"][0]["state_path"] == "translations.uk.title"
        assert active["state_path"] == "is_active"


def test_transform_single_locale(runner):
    with runner.isolated_filesystem():
        Path("schema.json").write_text(json.dumps(SCHEMA))

        result = runner.invoke(
            cli, ["transform", "schema.json", "-a", "title", "--locale", "uk"], obj={}
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["components"][0]["state_path"] == "translations.uk.title"


def test_transform_invalid_schema(runner):
    with runner.isolated_filesystem():
        Path("schema.json").write_text("{not json")

        result = runner.invoke(cli, ["transform", "schema.json", "-a", "title"], obj={})

        assert result.exit_code != 0
        assert "Invalid form schema" in result.output


def test_log_file_from_config_file(runner):
    with runner.isolated_filesystem():
        Path("forms.toml").write_text('log_file = "custom/forms.log"\n')

        result = runner.invoke(cli, ["-c", "forms.toml", "locales"], obj={})

        assert result.exit_code == 0
        assert Path("custom/forms.log").is_file()
        assert not Path("data/translatable_forms.log").exists()


def test_log_file_option_overrides_config_file(runner):
    with runner.isolated_filesystem():
        Path("forms.toml").write_text('log_file = "custom/forms.log"\n')

        result = runner.invoke(
            cli, ["-c", "forms.toml", "--log-file", "cli.log", "locales"], obj={}
        )

        assert result.exit_code == 0
        assert Path("cli.log").is_file()
        assert not Path("custom/forms.log").exists()


def test_init_db_uses_configured_database_path(runner):
    with runner.isolated_filesystem():
        Path("forms.toml").write_text('database_path = "store/forms.db"\n')

        result = runner.invoke(cli, ["-c", "forms.toml", "init-db"], obj={})

        assert result.exit_code == 0
        assert "Database initialized at store/forms.db" in result.output
        assert Path("store/forms.db").is_file()
