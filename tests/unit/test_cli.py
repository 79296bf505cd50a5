"""Unit tests for the niuniu-config CLI."""

import json

import pytest
import yaml
from click.testing import CliRunner

from niuniu_config.cli.main import cli
from niuniu_config.config.redact import REDACTED_VALUE


DOCUMENT = """\
AppName: niuniu
DbConfig:
  driverName: mysql
  dsn: "user:pw@tcp(localhost:3306)/app"
  maxIdle: 4
MsgChannelType:
  ChannelType: kafka
  KafkaHosts: "h1:9092,h2:9092"
  KafkaTopic: events
"""


@pytest.fixture
def runner(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> CliRunner:
    # Run from an empty directory so only --config-dir can supply a document.
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    @pytest.mark.unit
    def test_valid_config(self, runner: CliRunner, write_config) -> None:
        """Test that a valid document reports its summary."""
        config_dir = write_config(DOCUMENT)

        result = runner.invoke(cli, ["validate", "--config-dir", str(config_dir)])

        assert result.exit_code == 0, result.output
        assert "AppName: niuniu" in result.output
        assert "ChannelType: kafka" in result.output
        assert "Checksum: " in result.output

    @pytest.mark.unit
    def test_reports_env_overrides(
        self, runner: CliRunner, write_config, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that overriding keys are listed."""
        config_dir = write_config(DOCUMENT)
        monkeypatch.setenv("APPNAME", "from-env")

        result = runner.invoke(cli, ["validate", "--config-dir", str(config_dir)])

        assert result.exit_code == 0, result.output
        assert "AppName: from-env" in result.output
        assert "Env overrides: APPNAME" in result.output

    @pytest.mark.unit
    def test_invalid_config_prints_hints(self, runner: CliRunner, write_config) -> None:
        """Test that decode failures exit 1 with hints."""
        config_dir = write_config("DbConfig:\n  maxIdle: many\n")

        result = runner.invoke(cli, ["validate", "--config-dir", str(config_dir)])

        assert result.exit_code == 1
        assert "Configuration loading failed:" in result.output
        assert "Hint: Must be a non-negative integer" in result.output

    @pytest.mark.unit
    def test_missing_config_exits_nonzero(
        self, runner: CliRunner, tmp_path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that a missing document exits 1."""
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(cli, ["validate"])

        assert result.exit_code == 1
        assert "Not Found" in result.output

    @pytest.mark.unit
    def test_unsupported_config_type_exits_nonzero(
        self, runner: CliRunner, write_config, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that NIUNIU_CONFIG_TYPE=toml is reported, not raised."""
        monkeypatch.setenv("NIUNIU_CONFIG_TYPE", "toml")

        result = runner.invoke(cli, ["validate", "--config-dir", str(write_config(DOCUMENT))])

        assert result.exit_code == 1
        assert "Unsupported config type: 'toml'" in result.output
        assert "Hint:" in result.output
        assert not isinstance(result.exception, ValueError)


class TestShowCommand:
    """Tests for the show command."""

    @pytest.mark.unit
    def test_yaml_output_masks_dsn(self, runner: CliRunner, write_config) -> None:
        """Test that the DSN password is hidden by default."""
        config_dir = write_config(DOCUMENT)

        result = runner.invoke(cli, ["show", "--config-dir", str(config_dir)])

        assert result.exit_code == 0, result.output
        document = yaml.safe_load(result.stdout)
        assert document["AppName"] == "niuniu"
        assert document["DbConfig"]["dsn"] == f"user:{REDACTED_VALUE}@tcp(localhost:3306)/app"
        assert document["DbConfig"]["maxIdle"] == 4
        assert document["Log"] == {"Path": "", "Level": ""}

    @pytest.mark.unit
    def test_json_output_with_secrets(self, runner: CliRunner, write_config) -> None:
        """Test JSON output with the DSN left intact."""
        config_dir = write_config(DOCUMENT)

        result = runner.invoke(
            cli,
            ["show", "--config-dir", str(config_dir), "--format", "json", "--show-secrets"],
        )

        assert result.exit_code == 0, result.output
        document = json.loads(result.stdout)
        assert document["DbConfig"]["dsn"] == "user:pw@tcp(localhost:3306)/app"
        assert document["MsgChannelType"]["KafkaHosts"] == "h1:9092,h2:9092"


class TestEnvKeysCommand:
    """Tests for the env-keys command."""

    @pytest.mark.unit
    def test_lists_binding_table(self, runner: CliRunner) -> None:
        """Test that every bound variable is listed with its document key."""
        result = runner.invoke(cli, ["env-keys"])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert "APPNAME\tAppName" in lines
        assert "DBCONFIG.MAXIDLE\tDbConfig.maxIdle" in lines
        assert len(lines) == 13

    @pytest.mark.unit
    def test_version(self, runner: CliRunner) -> None:
        """Test the version option."""
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "0.1.0" in result.output
