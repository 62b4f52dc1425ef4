from web.config import Settings


def test_defaults():
    s = Settings(_env_file=None)
    assert s.HOST == "127.0.0.1"
    assert s.PORT == 8000
    assert s.CORS_ALLOW_ORIGINS == ["*"]


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "9100")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", '["https://vidrios.example"]')
    s = Settings(_env_file=None)
    assert s.PORT == 9100
    assert s.LOG_LEVEL == "DEBUG"
    assert s.CORS_ALLOW_ORIGINS == ["https://vidrios.example"]


def test_reads_dotenv_file():
    assert Settings.model_config["env_file"] == ".env"
