import logging
import os

import pytest
from pydantic import ValidationError

from rcalc.config import Settings, load_settings


def test_defaults():
    s = Settings.from_env({})
    assert s.prompt == "> "
    assert s.quit_command == "q"
    assert s.history_enabled is True
    assert s.history_file == os.path.expanduser("~/.rcalc_history")
    assert s.precision == 28
    assert s.log_level == "WARNING"
    assert s.logging_level == logging.WARNING


def test_env_overrides():
    s = Settings.from_env({
        "RCALC_PROMPT": "calc> ",
        "RCALC_QUIT_COMMAND": " exit ",
        "RCALC_HISTORY": "false",
        "RCALC_HISTORY_FILE": "/tmp/rcalc_hist",
        "RCALC_PRECISION": "10",
        "RCALC_LOG_LEVEL": "debug",
        "UNRELATED": "ignored",
    })
    assert s.prompt == "calc> "
    assert s.quit_command == "exit"
    assert s.history_enabled is False
    assert s.history_file == "/tmp/rcalc_hist"
    assert s.precision == 10
    assert s.log_level == "DEBUG"
    assert s.logging_level == logging.DEBUG


@pytest.mark.parametrize("env", [
    {"RCALC_PRECISION": "0"},
    {"RCALC_PRECISION": "lots"},
    {"RCALC_LOG_LEVEL": "chatty"},
    {"RCALC_QUIT_COMMAND": "   "},
    {"RCALC_HISTORY": "maybe"},
])
def test_invalid_values(env):
    with pytest.raises(ValidationError):
        Settings.from_env(env)


def test_history_path_expanded():
    s = Settings(history_file="~/hist")
    assert s.history_file == os.path.expanduser("~/hist")


def test_load_settings_reads_dotenv(tmp_path):
    dotenv_file = tmp_path / ".env"
    dotenv_file.write_text("RCALC_PROMPT='dotenv> '\nRCALC_PRECISION=12\n", encoding="utf-8")
    s = load_settings(str(dotenv_file))
    assert s.prompt == "dotenv> "
    assert s.precision == 12


def test_environment_wins_over_dotenv(tmp_path, monkeypatch):
    monkeypatch.setenv("RCALC_QUIT_COMMAND", "bye")
    dotenv_file = tmp_path / ".env"
    dotenv_file.write_text("RCALC_QUIT_COMMAND=leave\n", encoding="utf-8")
    assert load_settings(str(dotenv_file)).quit_command == "bye"


def test_load_settings_finds_dotenv_in_current_directory(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("RCALC_PROMPT='cwd> '\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert load_settings().prompt == "cwd> "
