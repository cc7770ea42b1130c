"""Configuration parsing tests."""

from taxrefund.core.config import DEFAULT_CORS_ALLOWED_ORIGINS, Settings


def test_cors_allowed_origins_accepts_csv(monkeypatch) -> None:
    """CSV string in env parses into a list of origins."""
    monkeypatch.setenv(
        "CORS_ALLOWED_ORIGINS",
        "https://refunds.example.in, http://localhost:3000/",
    )
    cfg = Settings()
    assert cfg.cors_allowed_origins == [
        "https://refunds.example.in",
        "http://localhost:3000",
    ]


def test_cors_allowed_origins_accepts_json_array(monkeypatch) -> None:
    """JSON array string in env parses and dedupes origins."""
    monkeypatch.setenv(
        "CORS_ALLOWED_ORIGINS",
        '["https://Refunds.example.in","https://refunds.example.in"]',
    )
    cfg = Settings()
    assert cfg.cors_allowed_origins == ["https://refunds.example.in"]


def test_cors_allowed_origins_blank_uses_defaults(monkeypatch) -> None:
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", "  ")
    cfg = Settings()
    assert cfg.cors_allowed_origins == DEFAULT_CORS_ALLOWED_ORIGINS


def test_cors_allowed_origins_rejects_invalid_object(monkeypatch) -> None:
    """Invalid values fail with a clear validation error."""
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", '{"invalid":"json"}')
    try:
        Settings()
    except Exception as exc:
        assert "CORS_ALLOWED_ORIGINS" in str(exc)
    else:
        raise AssertionError("Expected invalid CORS_ALLOWED_ORIGINS to fail")


def test_environment_defaults(monkeypatch) -> None:
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    monkeypatch.delenv("SENTRY_DSN", raising=False)
    cfg = Settings(_env_file=None)
    assert cfg.environment == "development"
    assert cfg.debug is False
    assert cfg.sentry_dsn is None


def test_cors_allowed_origins_strips_quotes(monkeypatch) -> None:
    """Quoted CSV values are read as plain origins."""
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", '"https://refunds.example.in"')
    cfg = Settings()
    assert cfg.cors_allowed_origins == ["https://refunds.example.in"]


def test_cors_allowed_origins_rejects_malformed_json_array(monkeypatch) -> None:
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", '["https://refunds.example.in"')
    try:
        Settings()
    except Exception as exc:
        assert "CORS_ALLOWED_ORIGINS" in str(exc)
    else:
        raise AssertionError("Expected malformed CORS_ALLOWED_ORIGINS to fail")
