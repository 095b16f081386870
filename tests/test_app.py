import logging

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from app.main import create_app
from app.settings import Settings


def test_settings_ignore_unknown_keys():
    settings = Settings(_env_file=None, env="prod")
    assert not hasattr(settings, "env")


def test_log_level_is_case_insensitive():
    assert Settings(_env_file=None, LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"


def test_unknown_log_level_is_rejected():
    with pytest.raises(ValidationError, match="LOG_LEVEL"):
        Settings(_env_file=None, LOG_LEVEL="verbose")


def test_logging_is_configured_on_startup_not_on_create():
    root = logging.getLogger()
    previous = root.level
    root.setLevel(logging.WARNING)
    try:
        app = create_app(Settings(_env_file=None, LOG_LEVEL="DEBUG"))
        assert root.level == logging.WARNING

        with TestClient(app):
            assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous)
