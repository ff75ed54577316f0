"""Settings: environment names and defaults for the bus, seed data and server."""

from eventboard.config import DEFAULT_FIXTURE, Settings


def test_defaults(monkeypatch):
    for name in ("NOTIFICATION_BACKEND", "REDIS_URI", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.notification_backend == "redis"
    assert (settings.redis_uri, settings.redis_port) == ("localhost", 6379)
    assert (settings.redis_backoff_step_ms, settings.redis_backoff_cap_ms) == (50, 2000)
    assert settings.redis_max_pending_publishes == 10_000
    assert settings.port == 4000
    assert settings.fixture_path == DEFAULT_FIXTURE


def test_bundled_fixture_ships_with_the_package():
    assert DEFAULT_FIXTURE.is_file()


def test_redis_variables_keep_deployment_names(monkeypatch):
    monkeypatch.setenv("REDIS_URI", "cache.internal")
    monkeypatch.setenv("REDIS_PORT", "6380")
    monkeypatch.setenv("REDIS_PASS", "s3cret")
    settings = Settings(_env_file=None)
    assert settings.redis_uri == "cache.internal"
    assert settings.redis_port == 6380
    assert settings.redis_pass == "s3cret"
