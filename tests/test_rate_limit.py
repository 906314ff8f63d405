from fastapi.routing import APIRoute
from fastapi.testclient import TestClient

from shorturl_app.app_factory import create_app


def test_limit_string_uses_window_seconds(settings):
    assert settings.rate_limit == "100/60 seconds"


def test_requests_over_the_limit_are_rejected(settings):
    settings.rate_limit_requests = 3

    with TestClient(create_app(settings)) as client:
        statuses = [client.get("/").status_code for _ in range(4)]

    assert statuses == [200, 200, 200, 429]


def test_rejected_create_stores_nothing(settings):
    settings.rate_limit_requests = 1
    app = create_app(settings)

    with TestClient(app) as client:
        first = client.post("/", data={"url": "https://example.com/1"})
        second = client.post("/", data={"url": "https://example.com/2"})

    assert first.status_code == 201
    assert second.status_code == 429
    assert app.state.url_service.store.count() == 1


def test_limiter_can_be_disabled(settings):
    settings.rate_limit_requests = 1
    settings.rate_limit_enabled = False

    with TestClient(create_app(settings)) as client:
        statuses = [client.get("/").status_code for _ in range(3)]

    assert statuses == [200, 200, 200]


def test_limits_are_counted_per_route(settings):
    settings.rate_limit_requests = 1

    with TestClient(create_app(settings)) as client:
        landing = client.get("/")
        created = client.post("/", data={"url": "https://example.com/"})
        landing_again = client.get("/")

    assert landing.status_code == 200
    assert created.status_code == 201
    assert landing_again.status_code == 429


def test_every_route_is_visible_to_the_limiter(app):
    paths = {
        (route.path, tuple(sorted(route.methods)))
        for route in app.routes
        if isinstance(route, APIRoute)
    }

    assert ("/", ("GET",)) in paths
    assert ("/", ("POST",)) in paths
    assert ("/{short_code}", ("GET",)) in paths
