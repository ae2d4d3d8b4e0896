from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote edu seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from edu.core import config as core_config  # noqa: E402


@pytest.fixture()
def clean_env(monkeypatch):
    for var in ("EDU_TASKS_FILE", "EDU_USERS_FILE", "EDU_LOG_LEVEL", "EDU_JSON_INDENT"):
        monkeypatch.delenv(var, raising=False)
    core_config.get_settings.cache_clear()
    yield monkeypatch
    core_config.get_settings.cache_clear()


def test_defaults_live_in_project_root(clean_env):
    settings = core_config.get_settings()
    assert settings.tasks_file == ROOT / "tasks.json"
    assert settings.users_file == ROOT / "db.json"
    assert settings.log_level == "WARNING"
    assert settings.json_indent is None


def test_env_overrides(clean_env, tmp_path):
    clean_env.setenv("EDU_TASKS_FILE", str(tmp_path / "t.json"))
    clean_env.setenv("EDU_USERS_FILE", str(tmp_path / "u.json"))
    clean_env.setenv("EDU_LOG_LEVEL", "debug")
    clean_env.setenv("EDU_JSON_INDENT", "4")
    settings = core_config.get_settings()
    assert settings.tasks_file == tmp_path / "t.json"
    assert settings.users_file == tmp_path / "u.json"
    assert settings.log_level == "DEBUG"
    assert settings.json_indent == 4


def test_invalid_indent_falls_back(clean_env):
    clean_env.setenv("EDU_JSON_INDENT", "wide")
    assert core_config.get_settings().json_indent is None


def test_blank_path_uses_default(clean_env):
    clean_env.setenv("EDU_TASKS_FILE", "   ")
    assert core_config.get_settings().tasks_file == core_config.DEFAULT_TASKS_FILE


def test_settings_are_cached(clean_env):
    assert core_config.get_settings() is core_config.get_settings()


def test_configure_logging_sets_level_once():
    import logging

    from edu.core.logs import configure_logging

    logger = configure_logging("debug")
    handlers = list(logger.handlers)
    assert logger.level == logging.DEBUG
    assert configure_logging("nonsense") is logger
    assert logger.level == logging.WARNING
    assert logger.handlers == handlers
