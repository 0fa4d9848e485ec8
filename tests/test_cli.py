"""Tests for the command-line interface."""

import json

import pytest
from click.testing import CliRunner

from sobject_typegen.cli import main


NO_ORG_ENV = {"SF_INSTANCE_URL": None, "SF_ACCESS_TOKEN": None, "SF_API_VERSION": None}


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "typegen.json"
    path.write_text(json.dumps({"sobjects": ["Account", "Contact"], "specialChildrenToMap": []}))
    return path


def invoke(runner, *args):
    return runner.invoke(main, ["generate", *args], env=NO_ORG_ENV)


class TestGenerateCommand:
    """Tests for `sobject-typegen generate`."""

    def test_batch(self, runner, tmp_path, describe_dir, config_file):
        out = tmp_path / "types"
        result = invoke(runner, "-c", str(config_file), "-d", str(out), "--describe-dir", str(describe_dir))

        assert result.exit_code == 0, result.output
        assert "Done! Generated 3 files" in result.output
        content = (out / "sobjects.ts").read_text()
        assert "export interface Account extends SObjectAttribute<'Account'> {" in content
        assert "export interface Contact extends SObjectAttribute<'Contact'> {" in content

    def test_single(self, runner, tmp_path, describe_dir):
        out = tmp_path / "types"
        result = invoke(runner, "-s", "Contact", "-d", str(out), "--describe-dir", str(describe_dir))

        assert result.exit_code == 0, result.output
        assert sorted(p.name for p in out.iterdir()) == ["contact.ts", "sobject.ts", "sobjectFieldTypes.ts"]

    def test_verbose_lists_progress(self, runner, tmp_path, describe_dir, config_file):
        out = tmp_path / "types"
        result = invoke(runner, "-c", str(config_file), "-d", str(out), "--describe-dir", str(describe_dir), "-v")

        assert result.exit_code == 0, result.output
        assert "Processing... Account" in result.output
        assert "Processing... Contact" in result.output
        assert str(out / "sobjects.ts") in result.output

    def test_progress_without_verbose(self, runner, tmp_path, describe_dir, config_file):
        out = tmp_path / "types"
        result = invoke(runner, "-c", str(config_file), "-d", str(out), "--describe-dir", str(describe_dir))

        assert result.exit_code == 0, result.output
        assert "Processing... Account" in result.output
        assert "Processing... Contact" in result.output
        assert "Writing to file..." in result.output

    def test_single_progress_without_verbose(self, runner, tmp_path, describe_dir):
        result = invoke(runner, "-s", "Contact", "-d", str(tmp_path / "types"), "--describe-dir", str(describe_dir))

        assert result.exit_code == 0, result.output
        assert "Processing... Contact" in result.output

    def test_both_modes(self, runner, tmp_path, describe_dir, config_file):
        out = tmp_path / "types"
        result = invoke(
            runner, "-s", "Account", "-c", str(config_file), "-d", str(out),
            "--describe-dir", str(describe_dir),
        )

        assert result.exit_code == 2
        assert "Please provide only -s or -c, not both" in result.output
        assert sorted(p.name for p in out.iterdir()) == ["sobject.ts", "sobjectFieldTypes.ts"]

    def test_no_mode(self, runner, tmp_path):
        out = tmp_path / "types"
        result = invoke(runner, "-d", str(out))

        assert result.exit_code == 2
        assert "Please provide a -s or -c" in result.output
        assert (out / "sobject.ts").exists()

    def test_missing_source(self, runner, tmp_path):
        result = invoke(runner, "-s", "Account", "-d", str(tmp_path / "types"))

        assert result.exit_code == 2
        assert "Provide --describe-dir, or --instance-url and --access-token" in result.output
        assert not (tmp_path / "types").exists()

    def test_malformed_config(self, runner, tmp_path, describe_dir):
        config = tmp_path / "bad.json"
        config.write_text('{"sobjects": [')
        result = invoke(runner, "-c", str(config), "-d", str(tmp_path / "types"), "--describe-dir", str(describe_dir))

        assert result.exit_code == 1
        assert f"FAILED TO PARSE JSON: '{config}'" in result.output
        assert "Invalid JSON" in result.output
        assert not (tmp_path / "types" / "sobjects.ts").exists()

    def test_describe_failure(self, runner, tmp_path, describe_dir):
        config = tmp_path / "typegen.json"
        config.write_text(json.dumps({"sobjects": ["Account", "Lead"]}))
        result = invoke(runner, "-c", str(config), "-d", str(tmp_path / "types"), "--describe-dir", str(describe_dir))

        assert result.exit_code == 1
        assert "No describe file for Lead" in result.output
