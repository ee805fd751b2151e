"""
tests/conftest.py
=================
Shared pytest fixtures — no real .env, settings.json or user data dir touched.
"""
import json
import os
import random
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest

CONFIG_KEYS = (
    "LOG_LEVEL",
    "UI_THEME",
    "PASSWORD_DEFAULT_LENGTH",
    "PASSWORD_INCLUDE_SYMBOLS",
    "PASSWORD_SECURE_RANDOM",
)


# ─── Environment isolation ────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Each test starts with no config keys in the environment."""
    for key in CONFIG_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("PASSMETER_DATA_DIR", str(tmp_path / "userdata"))
    yield


@pytest.fixture
def make_config(tmp_path):
    """
    Returns a factory building a fresh Config from temp files:

        cfg = make_config(env={"PASSWORD_DEFAULT_LENGTH": "16"},
                          settings={"UI_THEME": "dark"})
    """
    from core.config import Config

    def _f(env=None, settings=None):
        Config.clear_instance()
        env_file = tmp_path / ".env"
        config_file = tmp_path / "settings.json"
        if env is not None:
            env_file.write_text(
                "\n".join(f"{k}={v}" for k, v in env.items()) + "\n",
                encoding="utf-8",
            )
        if settings is not None:
            config_file.write_text(json.dumps(settings), encoding="utf-8")
        return Config(env_file=env_file, config_file=config_file)

    yield _f
    Config.clear_instance()
    # load_dotenv writes straight into os.environ, past monkeypatch
    for key in CONFIG_KEYS:
        os.environ.pop(key, None)


@pytest.fixture
def default_config(make_config):
    """Config with neither .env nor settings.json present."""
    return make_config()


# ─── Randomness ───────────────────────────────────────────────────────────────

@pytest.fixture
def seeded_rng():
    return random.Random(1234)
