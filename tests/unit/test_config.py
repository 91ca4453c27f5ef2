import logging

import pytest
from pydantic import ValidationError

from core import config as config_module
from core import logging_setup
from core.config import AppSettings, load_settings, write_user_env_vars
from core.errors import ConfigError


def test_defaults(monkeypatch):
    for name in ("HELPER_EXECUTABLE", "HELPER_TIMEOUT_SECONDS", "WAIT_FOR_HELPER", "LOG_LEVEL"):
        monkeypatch.delenv(f"AZUREAUTH_CLI_{name}", raising=False)

    settings = AppSettings(_env_file=None)

    assert settings.helper_executable == "azureauth"
    assert settings.helper_timeout_seconds is None
    assert settings.wait_for_helper is True
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("AZUREAUTH_CLI_HELPER_EXECUTABLE", "/opt/azureauth")
    monkeypatch.setenv("azureauth_cli_helper_timeout_seconds", "12.5")
    monkeypatch.setenv("AZUREAUTH_CLI_WAIT_FOR_HELPER", "false")

    settings = AppSettings(_env_file=None)

    assert settings.helper_executable == "/opt/azureauth"
    assert settings.helper_timeout_seconds == 12.5
    assert settings.wait_for_helper is False


def test_env_file(tmp_path, monkeypatch):
    monkeypatch.delenv("AZUREAUTH_CLI_HELPER_EXECUTABLE", raising=False)
    env = tmp_path / ".env"
    env.write_text("AZUREAUTH_CLI_HELPER_EXECUTABLE=from-file\nOTHER=ignored\n", encoding="utf-8")

    settings = AppSettings(_env_file=str(env))

    assert settings.helper_executable == "from-file"


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, helper_timeout_seconds=0)


def test_write_user_env_vars_merges(tmp_path, monkeypatch):
    monkeypatch.setattr(config_module, "get_user_config_dir", lambda: tmp_path / "cfg")

    write_user_env_vars({"B": "2", "A": "1"})
    path = write_user_env_vars({"A": "one", "C": None})

    assert path == tmp_path / "cfg" / ".env"
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("#")
    assert lines[1:] == ["A=one", "B=2"]


def test_user_config_dir_honours_xdg(monkeypatch, tmp_path):
    monkeypatch.setattr(config_module.sys, "platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    assert config_module.get_user_config_dir() == tmp_path / "azureauth-cli"


def test_configure_logging_is_idempotent(monkeypatch):
    monkeypatch.setattr(logging_setup, "_configured", False)
    root = logging.getLogger()
    before = list(root.handlers)
    previous_level = root.level
    try:
        logging_setup.configure_logging("debug")
        logging_setup.configure_logging("INFO")
        added = [h for h in root.handlers if h not in before]

        assert len(added) == 1
        assert root.level == logging.INFO
    finally:
        for handler in root.handlers:
            if handler not in before:
                root.removeHandler(handler)
        root.setLevel(previous_level)


def test_configure_logging_unknown_level_falls_back(monkeypatch):
    monkeypatch.setattr(logging_setup, "_configured", True)
    root = logging.getLogger()
    previous_level = root.level
    try:
        logging_setup.configure_logging("chatty")
        assert root.level == logging.WARNING
    finally:
        root.setLevel(previous_level)


def test_write_user_env_vars_none_removes_key(tmp_path, monkeypatch):
    monkeypatch.setattr(config_module, "get_user_config_dir", lambda: tmp_path / "cfg")

    write_user_env_vars({"AZUREAUTH_CLI_HELPER_TIMEOUT_SECONDS": "30", "KEEP": "1"})
    path = write_user_env_vars({"AZUREAUTH_CLI_HELPER_TIMEOUT_SECONDS": None})

    assert path.read_text(encoding="utf-8").splitlines()[1:] == ["KEEP=1"]


@pytest.mark.parametrize("value", ["nan", "inf", "-1"])
def test_load_settings_wraps_validation_errors(monkeypatch, value):
    monkeypatch.setenv("AZUREAUTH_CLI_HELPER_TIMEOUT_SECONDS", value)

    with pytest.raises(ConfigError, match="helper_timeout_seconds"):
        load_settings()
