import json

from xorscope.settings import Settings, get_setting, load_settings


def test_defaults_without_file():
    assert load_settings() == Settings(log_level="WARNING", workers=1)


def test_file_values(isolated_settings):
    isolated_settings.write_text(
        json.dumps({"log_level": "info", "workers": 4, "unknown": True}),
        encoding="utf-8",
    )
    assert load_settings() == Settings(log_level="INFO", workers=4)
    assert get_setting("workers") == 4
    assert get_setting("missing", "x") == "x"


def test_env_overrides_file(isolated_settings, monkeypatch):
    isolated_settings.write_text(json.dumps({"workers": 4}), encoding="utf-8")
    monkeypatch.setenv("XORSCOPE_WORKERS", "8")
    monkeypatch.setenv("XORSCOPE_LOG_LEVEL", "debug")
    s = load_settings()
    assert s.workers == 8
    assert s.log_level == "DEBUG"


def test_bad_file_falls_back_to_defaults(isolated_settings):
    isolated_settings.write_text("{not json", encoding="utf-8")
    assert load_settings() == Settings()
    isolated_settings.write_text("[1, 2]", encoding="utf-8")
    assert load_settings() == Settings()


def test_invalid_workers(monkeypatch):
    monkeypatch.setenv("XORSCOPE_WORKERS", "many")
    assert load_settings().workers == 1
    monkeypatch.setenv("XORSCOPE_WORKERS", "-3")
    assert load_settings().workers == 1
