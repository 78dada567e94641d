import logging
import os

import pytest

from rcalc import config, shell


@pytest.fixture(autouse=True)
def rcalc_env(monkeypatch):
    """Run each test without RCALC_* variables, including any a .env file loaded."""
    for name in list(os.environ):
        if name.startswith(config.ENV_PREFIX):
            monkeypatch.delenv(name)
    yield
    for name in list(os.environ):
        if name.startswith(config.ENV_PREFIX):
            del os.environ[name]


@pytest.fixture
def cli(monkeypatch, tmp_path):
    """shell.main with an empty .env file and the root logger left alone."""
    dotenv_file = tmp_path / ".env"
    dotenv_file.write_text("", encoding="utf-8")
    monkeypatch.setattr(shell, "load_settings", lambda: config.load_settings(str(dotenv_file)))
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: None)
    return shell.main
