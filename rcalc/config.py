"""Runtime settings, read from RCALC_* environment variables."""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = 'RCALC_'

_LOG_LEVELS = {'CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG'}


class Settings(BaseModel):
    """Settings for the shell and the evaluator."""
    prompt: str = '> '
    quit_command: str = 'q'
    history_file: str = Field(default_factory=lambda: os.path.expanduser('~/.rcalc_history'))
    history_enabled: bool = True
    precision: int = Field(28, ge=1, le=999, description="Significant digits of decimal results")
    log_level: str = 'WARNING'

    @field_validator('quit_command')
    @classmethod
    def quit_command_must_not_be_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('Quit command cannot be empty')
        return v.strip()

    @field_validator('log_level')
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator('history_file')
    @classmethod
    def expand_history_path(cls, v: str) -> str:
        return os.path.expanduser(v)

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        """Build settings from RCALC_<FIELD> variables; unset ones keep their defaults."""
        if environ is None:
            environ = os.environ
        values = {}
        for name in cls.model_fields:
            key = ENV_PREFIX + name.upper()
            if key in environ:
                values[name] = environ[key]
        # RCALC_HISTORY toggles history on and off
        if ENV_PREFIX + 'HISTORY' in environ:
            values['history_enabled'] = environ[ENV_PREFIX + 'HISTORY']
        return cls(**values)


def load_settings(dotenv_path: Optional[str] = None) -> Settings:
    """Load variables from a .env file, then read settings from the environment.

    Without an explicit path the .env file is searched for from the current
    directory upwards. Variables already set in the environment win over it.
    """
    load_dotenv(dotenv_path or find_dotenv(usecwd=True))
    return Settings.from_env()
