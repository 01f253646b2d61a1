import pytest
from pydantic import ValidationError

from gpt_repl.config import Settings, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "GPT_REPL_MODEL",
        "GPT_REPL_API_BASE",
        "GPT_REPL_MAX_INPUT_CHARS",
        "GPT_REPL_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = load_config()

    assert settings.model == "gpt-3.5-turbo"
    assert settings.endpoint == "https://api.openai.com/v1/chat/completions"
    assert settings.system_prompt == "You are a helpful assistant."
    assert settings.max_input_chars == 3000
    assert settings.request_timeout_s is None


def test_env_overrides_defaults(monkeypatch) -> None:
    monkeypatch.setenv("GPT_REPL_MODEL", "gpt-4o")
    monkeypatch.setenv("GPT_REPL_MAX_INPUT_CHARS", "100")

    settings = load_config()

    assert settings.model == "gpt-4o"
    assert settings.max_input_chars == 100


def test_file_overrides_env(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("GPT_REPL_MODEL", "from-env")
    path = tmp_path / "config.json"
    path.write_text('{"model": "from-file", "api_base": "http://localhost:1234/v1/"}', encoding="utf-8")

    settings = load_config(path)

    assert settings.model == "from-file"
    assert settings.endpoint == "http://localhost:1234/v1/chat/completions"


def test_invalid_file_falls_back(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")

    assert load_config(path) == Settings()


def test_invalid_values_fall_back(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text('{"max_input_chars": -1}', encoding="utf-8")

    assert load_config(path).max_input_chars == 3000


def test_missing_file_falls_back(tmp_path) -> None:
    assert load_config(tmp_path / "absent.json").model == "gpt-3.5-turbo"


def test_log_level_is_normalized() -> None:
    assert Settings(log_level=" debug ").log_level == "DEBUG"


def test_unknown_log_level_rejected(monkeypatch) -> None:
    monkeypatch.setenv("GPT_REPL_LOG_LEVEL", "loud")

    with pytest.raises(ValidationError):
        load_config()


def test_unknown_log_level_in_file_falls_back(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text('{"log_level": "loud"}', encoding="utf-8")

    assert load_config(path).log_level == "WARNING"
