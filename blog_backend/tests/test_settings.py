from blog_api.settings import get_settings


def test_defaults(monkeypatch):
    for name in ("SEED_BLOG_POSTS", "CORS_ALLOW_ORIGINS", "LOG_LEVEL", "LOG_FORMAT", "API_HOST", "API_PORT"):
        monkeypatch.delenv(name, raising=False)
    settings = get_settings()
    assert settings.seed_blog_posts is True
    assert settings.cors_allow_origins == ["*"]
    assert settings.log_level == "INFO"
    assert settings.log_format == "console"
    assert settings.api_host == "0.0.0.0"
    assert settings.api_port == 8080


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SEED_BLOG_POSTS", "no")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.test, http://b.test,")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FORMAT", "JSON")
    monkeypatch.setenv("API_PORT", "9000")
    settings = get_settings()
    assert settings.seed_blog_posts is False
    assert settings.cors_allow_origins == ["http://a.test", "http://b.test"]
    assert settings.log_level == "DEBUG"
    assert settings.log_format == "json"
    assert settings.api_port == 9000


def test_invalid_values_fall_back(monkeypatch):
    monkeypatch.setenv("SEED_BLOG_POSTS", "maybe")
    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    monkeypatch.setenv("LOG_FORMAT", "xml")
    monkeypatch.setenv("API_PORT", "eighty")
    settings = get_settings()
    assert settings.seed_blog_posts is True
    assert settings.log_level == "INFO"
    assert settings.log_format == "console"
    assert settings.api_port == 8080

    monkeypatch.setenv("API_PORT", "70000")
    assert get_settings().api_port == 8080
