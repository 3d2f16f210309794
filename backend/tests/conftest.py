import os

# Keep test runs from writing log files; must be set before buildex settings load
os.environ.setdefault("LOG_TO_FILE", "false")

import httpx
import pytest

from buildex.core.overpass_connection import OverpassClient
from buildex.repos.places_repo import PlacesCache
from buildex.services.Places_service import NearbyPlacesService

ENDPOINTS = [
    "https://mirror-a.test/api/interpreter",
    "https://mirror-b.test/api/interpreter",
    "https://mirror-c.test/api/interpreter",
]

MUMBAI = (19.0760, 72.8777)


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class OverpassStub:
    """
    Stands in for the Overpass mirrors. Each endpoint URL maps to a canned
    httpx.Response, an exception to raise, or a callable(request) producing either.
    Every request is recorded in `requests`.
    """

    def __init__(self, replies: dict):
        self.replies = replies
        self.requests = []

    @property
    def calls(self) -> list:
        return [str(r.url) for r in self.requests]

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        reply = self.replies[str(request.url)]
        if callable(reply) and not isinstance(reply, httpx.Response):
            reply = reply(request)
            if hasattr(reply, "__await__"):
                reply = await reply
        if isinstance(reply, Exception):
            raise reply
        # hand out a fresh response so a canned reply can serve repeated calls
        return httpx.Response(reply.status_code, headers=reply.headers, content=reply.content)


def element(id, name=None, lat=None, lon=None, center=None, type="node", **extra_tags):
    tags = {k.replace("__", ":"): v for k, v in extra_tags.items()}
    if name is not None:
        tags["name"] = name
    el = {"type": type, "id": id, "tags": tags}
    if lat is not None:
        el["lat"] = lat
    if lon is not None:
        el["lon"] = lon
    if center is not None:
        el["center"] = {"lat": center[0], "lon": center[1]}
    return el


def overpass_payload(*elements) -> dict:
    return {"version": 0.6, "generator": "Overpass API", "elements": list(elements)}


def ok(*elements) -> httpx.Response:
    return httpx.Response(200, json=overpass_payload(*elements))


def status(code: int) -> httpx.Response:
    return httpx.Response(code, text=f"status {code}")


def mumbai_hospitals() -> httpx.Response:
    return ok(
        element(1001, "City Hospital", lat=19.080, lon=72.880, amenity="hospital"),
        element(1002, "Apollo Clinic", lat=19.070, lon=72.875, amenity="clinic"),
        element(1003, lat=19.075, lon=72.877, amenity="clinic"),
    )


def make_client(stub: OverpassStub, **kwargs) -> OverpassClient:
    kwargs.setdefault("timeout_seconds", 10.0)
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(stub))
    return OverpassClient(ENDPOINTS, http_client=http_client, **kwargs)


def make_service(replies: dict, clock: FakeClock = None, **client_kwargs):
    stub = OverpassStub(replies)
    cache = PlacesCache(ttl_seconds=300, clock=clock or FakeClock())
    service = NearbyPlacesService(cache, make_client(stub, **client_kwargs))
    return service, stub


@pytest.fixture
def clock():
    return FakeClock()
