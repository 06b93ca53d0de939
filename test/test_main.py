import pytest

import serverconf.__main__ as cli
from serverconf.logger import get_serverconf_logger


@pytest.fixture(autouse=True)
def plain_logger(monkeypatch):
    """Keep the command from reconfiguring logging for the whole test session."""
    monkeypatch.setattr(cli, "init_logger", lambda debug=False, json_logs=False: get_serverconf_logger())


class TestCommandLine:
    """Test the startup validation command."""

    def test_valid_environment_exits_zero(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SERVERCONF_PASSWORD_SECRET", "abcdefghijklmnopqrstuvwxyz")
        monkeypatch.setenv("SERVERCONF_NODE_ID_FILE", str(tmp_path / "node-id"))

        assert cli.main([]) == 0

    def test_missing_secret_exits_one(self, monkeypatch):
        monkeypatch.delenv("SERVERCONF_PASSWORD_SECRET", raising=False)

        assert cli.main([]) == 1

    def test_custom_prefix(self, monkeypatch):
        monkeypatch.setenv("NODE_PASSWORD_SECRET", "too short")

        assert cli.main(["--env-prefix", "NODE_"]) == 1
