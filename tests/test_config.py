"""Tests for settings loading."""

from blogger_samples.utils.config import Settings


def test_defaults(monkeypatch):
    for name in ("BLOGGER_BLOG_ID", "BLOGGER_ACCESS_TOKEN", "USE_MOCK_BLOGGER", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.blogger_blog_id == ""
    assert settings.blogger_base_url == "https://www.googleapis.com/blogger/v3"
    assert settings.request_timeout_seconds == 30.0
    assert settings.use_mock_blogger is False
    assert settings.log_level == "INFO"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("BLOGGER_BLOG_ID", "12345")
    monkeypatch.setenv("blogger_access_token", "tok")
    monkeypatch.setenv("USE_MOCK_BLOGGER", "true")

    settings = Settings(_env_file=None)

    assert settings.blogger_blog_id == "12345"
    assert settings.blogger_access_token == "tok"
    assert settings.use_mock_blogger is True
