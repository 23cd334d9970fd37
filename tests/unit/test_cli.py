"""Unit tests for the typer CLI."""

from typer.testing import CliRunner

from worksync.presentation.cli.app import app
from worksync_config import clear_settings_cache

runner = CliRunner()


class TestCli:
    def test_help_lists_commands(self):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ("secrets", "db", "seed-demo", "serve"):
            assert command in result.output

    def test_secrets_generate(self):
        result = runner.invoke(app, ["secrets", "generate"])

        assert result.exit_code == 0
        assert "JWT_SECRET_KEY=" in result.output

    def test_db_init_and_migrate_on_fresh_database(self, tmp_path, monkeypatch):
        monkeypatch.setenv("JWT_SECRET_KEY", "cli-test-secret")
        monkeypatch.setenv("SQLITE_PATH", str(tmp_path / "cli.db"))

        clear_settings_cache()
        try:
            init = runner.invoke(app, ["db", "init"])
            migrate = runner.invoke(app, ["db", "migrate-days"])
        finally:
            clear_settings_cache()

        assert init.exit_code == 0, init.output
        assert (tmp_path / "cli.db").exists()
        assert migrate.exit_code == 0, migrate.output
        assert "Converted" in migrate.output
