import pytest
from pydantic import ValidationError

import core.config as config_module
from core.config import AppSettings, write_user_env_vars
from core.domain.language import Language

KEYS = [
    "GISTLINK_API_BASE_URL",
    "GISTLINK_USER_AGENT",
    "GISTLINK_HTTP_TIMEOUT_SECONDS",
    "GISTLINK_SHARE_BASE_URL",
    "GISTLINK_LANGUAGE",
    "GISTLINK_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for k in KEYS:
        monkeypatch.delenv(k, raising=False)


def test_config_defaults():
    settings = AppSettings(_env_file=None)
    assert settings.api_base_url == "https://api.github.com"
    assert settings.http_timeout_seconds is None
    assert settings.language is Language.ENGLISH
    assert settings.log_level == "WARNING"
    assert settings.user_agent


def test_config_custom_env(monkeypatch):
    monkeypatch.setenv("GISTLINK_API_BASE_URL", "http://localhost:9000")
    monkeypatch.setenv("GISTLINK_HTTP_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("GISTLINK_LANGUAGE", "zh-TW")
    monkeypatch.setenv("gistlink_log_level", "DEBUG")

    settings = AppSettings(_env_file=None)
    assert settings.api_base_url == "http://localhost:9000"
    assert settings.http_timeout_seconds == 2.5
    assert settings.language is Language.TRADITIONAL_CHINESE
    assert settings.log_level == "DEBUG"


def test_config_validation_rejects_bad_timeout(monkeypatch):
    monkeypatch.setenv("GISTLINK_HTTP_TIMEOUT_SECONDS", "0")
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None)


def test_write_user_env_vars_merges(monkeypatch, tmp_path):
    env_file = tmp_path / "cfg" / ".env"
    monkeypatch.setattr(config_module, "get_user_env_file", lambda: env_file)

    write_user_env_vars({"GISTLINK_LANGUAGE": "zh-TW"})
    write_user_env_vars({"GISTLINK_SHARE_BASE_URL": "https://x.example/"})

    text = env_file.read_text(encoding="utf-8")
    assert "GISTLINK_LANGUAGE=zh-TW" in text
    assert "GISTLINK_SHARE_BASE_URL=https://x.example/" in text

    settings = AppSettings(_env_file=str(env_file))
    assert settings.language is Language.TRADITIONAL_CHINESE
    assert settings.share_base_url == "https://x.example/"


def test_user_config_dir_honours_xdg(monkeypatch, tmp_path):
    monkeypatch.setattr(config_module.sys, "platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    assert config_module.get_user_config_dir() == tmp_path / "gistlink"


@pytest.mark.parametrize("raw, expected", [("debug", "DEBUG"), (" Info ", "INFO"), ("CRITICAL", "CRITICAL")])
def test_log_level_is_normalized(monkeypatch, raw, expected):
    monkeypatch.setenv("GISTLINK_LOG_LEVEL", raw)

    assert AppSettings(_env_file=None).log_level == expected


def test_unknown_log_level_fails_validation(monkeypatch):
    monkeypatch.setenv("GISTLINK_LOG_LEVEL", "verbose")

    with pytest.raises(ValidationError):
        AppSettings(_env_file=None)


@pytest.mark.parametrize("raw", ["zh_tw", "ZH-TW", "zh-Hant"])
def test_language_aliases(monkeypatch, raw):
    monkeypatch.setenv("GISTLINK_LANGUAGE", raw)

    assert AppSettings(_env_file=None).language is Language.TRADITIONAL_CHINESE


def test_unknown_language_fails_validation(monkeypatch):
    monkeypatch.setenv("GISTLINK_LANGUAGE", "klingon")

    with pytest.raises(ValidationError):
        AppSettings(_env_file=None)


def test_write_user_env_vars_keeps_foreign_lines(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("# mine\nOTHER_TOOL_TOKEN=abc\nGISTLINK_LANGUAGE=en\n", encoding="utf-8")
    monkeypatch.setattr(config_module, "get_user_env_file", lambda: env_file)

    write_user_env_vars({"GISTLINK_LANGUAGE": "zh-TW", "GISTLINK_SHARE_BASE_URL": None})

    text = env_file.read_text(encoding="utf-8")
    assert "# mine" in text
    assert "OTHER_TOOL_TOKEN=abc" in text
    assert "GISTLINK_LANGUAGE=zh-TW" in text
    assert "GISTLINK_SHARE_BASE_URL" not in text
    assert config_module.read_user_env_vars() == {
        "OTHER_TOOL_TOKEN": "abc",
        "GISTLINK_LANGUAGE": "zh-TW",
    }


def test_read_user_env_vars_without_file(monkeypatch, tmp_path):
    monkeypatch.setattr(config_module, "get_user_env_file", lambda: tmp_path / "missing" / ".env")

    assert config_module.read_user_env_vars() == {}
