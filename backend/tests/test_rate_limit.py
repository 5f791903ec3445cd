from fastapi.testclient import TestClient

from inventory_api.core.rate_limit import FixedWindowRateLimiter
from inventory_api.main import create_app


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def test_limiter_blocks_after_max_requests():
    clock = FakeClock()
    limiter = FixedWindowRateLimiter(max_requests=2, window_seconds=60, clock=clock)

    assert limiter.hit("10.0.0.1")
    assert limiter.hit("10.0.0.1")
    assert not limiter.hit("10.0.0.1")
    # Other clients have their own window
    assert limiter.hit("10.0.0.2")


def test_limiter_window_resets():
    clock = FakeClock()
    limiter = FixedWindowRateLimiter(max_requests=1, window_seconds=60, clock=clock)

    assert limiter.hit("client")
    clock.now += 45
    assert not limiter.hit("client")
    assert limiter.retry_after("client") == 15

    clock.now += 15
    assert limiter.hit("client")


def test_limiter_reset():
    limiter = FixedWindowRateLimiter(max_requests=1, window_seconds=60, clock=FakeClock())
    assert limiter.hit("client")
    limiter.reset()
    assert limiter.hit("client")


def test_middleware_answers_429(test_settings):
    settings = test_settings.model_copy(update={"RATE_LIMIT_MAX_REQUESTS": 2})
    with TestClient(create_app(settings)) as client:
        assert client.get("/health").status_code == 200
        assert client.get("/health").status_code == 200

        response = client.get("/health")
        assert response.status_code == 429
        assert response.json() == {"detail": "Too many requests, please try again after 15 minutes."}
        assert 0 < int(response.headers["Retry-After"]) <= 15 * 60


def test_rate_limit_can_be_disabled(test_settings):
    settings = test_settings.model_copy(update={"RATE_LIMIT_ENABLED": False, "RATE_LIMIT_MAX_REQUESTS": 1})
    with TestClient(create_app(settings)) as client:
        for _ in range(5):
            assert client.get("/health").status_code == 200


def test_expired_windows_are_dropped():
    clock = FakeClock()
    limiter = FixedWindowRateLimiter(max_requests=5, window_seconds=60, clock=clock)

    for n in range(1000):
        assert limiter.hit(f"10.0.{n // 256}.{n % 256}")
    assert len(limiter._windows) == 1000

    clock.now += 60
    assert limiter.hit("192.168.1.1")
    assert list(limiter._windows) == ["192.168.1.1"]


def test_sweep_keeps_live_windows():
    clock = FakeClock()
    limiter = FixedWindowRateLimiter(max_requests=1, window_seconds=60, clock=clock)

    assert limiter.hit("old")
    clock.now += 30
    assert limiter.hit("recent")
    clock.now += 30
    assert limiter.hit("new")

    assert set(limiter._windows) == {"recent", "new"}
    # "recent" is still inside its window and stays limited
    assert not limiter.hit("recent")
