"""Shared fixtures."""

from typing import Callable, Dict, Union

import httpx
import pytest

from newsgrid.config import Config, ConfigModel


def page(body: str) -> str:
    """Wrap body markup in a minimal HTML page with some surrounding noise."""
    return (
        "<html><head><title>t</title></head><body>"
        "<nav><p>Skip to content</p></nav>"
        f"{body}"
        "<footer><p>Site footer</p></footer>"
        "</body></html>"
    )


Route = Union[str, Callable[[httpx.Request], httpx.Response]]


def route_transport(routes: Dict[str, Route]) -> httpx.MockTransport:
    """MockTransport answering by URL path; strings become 200 HTML responses."""

    def handler(request: httpx.Request) -> httpx.Response:
        route = routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, text="not found")
        if callable(route):
            return route(request)
        return httpx.Response(200, text=route, headers={"Content-Type": "text/html"})

    return httpx.MockTransport(handler)


@pytest.fixture
def config(tmp_path) -> Config:
    """Config holding default values, never read from disk."""
    cfg = Config(tmp_path / "config.yaml")
    cfg._config = ConfigModel()
    return cfg
