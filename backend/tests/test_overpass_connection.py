import asyncio
from urllib.parse import parse_qs

import httpx
import pytest

from buildex.core.errors import AllEndpointsUnavailable, OverpassTimeoutError, ServiceError
from buildex.core.overpass_connection import OverpassClient
from conftest import ENDPOINTS, FakeClock, OverpassStub, element, make_client, ok, overpass_payload, status

A, B, C = ENDPOINTS
QUERY = '[out:json][timeout:25];\n(\nnode["amenity"="cafe"](around:3000,1.0,2.0);\n);\nout center tags;\n'


def run_query(stub, **kwargs):
    return asyncio.run(make_client(stub, **kwargs).query(QUERY))


def test_first_healthy_mirror_wins():
    stub = OverpassStub({A: ok(element(1, "Cafe", lat=1.0, lon=2.0)), B: status(200), C: status(200)})

    payload = run_query(stub)

    assert payload["elements"][0]["tags"]["name"] == "Cafe"
    assert stub.calls == [A]


def test_posts_form_encoded_query():
    stub = OverpassStub({A: ok()})
    run_query(stub, user_agent="buildex-tests")

    request = stub.requests[0]
    assert request.method == "POST"
    assert request.headers["content-type"] == "application/x-www-form-urlencoded"
    assert request.headers["user-agent"] == "buildex-tests"
    assert parse_qs(request.content.decode())["data"] == [QUERY]


def test_overloaded_mirrors_fail_over_in_order():
    stub = OverpassStub({A: status(503), B: status(503), C: ok(element(7, "Third", lat=0, lon=0))})

    payload = run_query(stub)

    assert payload["elements"][0]["id"] == 7
    assert stub.calls == [A, B, C]


@pytest.mark.parametrize("code", [429, 502, 503, 504])
def test_retryable_statuses_move_on(code):
    stub = OverpassStub({A: status(code), B: ok(), C: ok()})
    run_query(stub)
    assert stub.calls == [A, B]


def test_other_http_errors_are_fatal_for_that_mirror_only():
    stub = OverpassStub({A: status(500), B: status(400), C: ok()})
    assert run_query(stub) == overpass_payload()
    assert stub.calls == [A, B, C]


def test_transport_errors_move_on():
    stub = OverpassStub({A: httpx.ConnectError("connection refused"), B: ok(), C: ok()})
    run_query(stub)
    assert stub.calls == [A, B]


def test_invalid_json_moves_on():
    stub = OverpassStub({A: httpx.Response(200, text="<html>rate limited</html>"), B: ok(), C: ok()})
    run_query(stub)
    assert stub.calls == [A, B]


def test_all_mirrors_overloaded():
    stub = OverpassStub({A: status(504), B: status(504), C: status(504)})

    with pytest.raises(AllEndpointsUnavailable) as exc:
        run_query(stub)

    assert exc.value.attempts == 3
    assert exc.value.timed_out is False
    assert isinstance(exc.value.last_error, ServiceError)
    assert exc.value.last_error.status_code == 504
    assert exc.value.last_error.retryable
    assert stub.calls == [A, B, C]


def test_terminal_timeout_is_reported_as_timeout():
    stub = OverpassStub({A: status(503), B: status(503), C: httpx.ReadTimeout("read timed out")})

    with pytest.raises(AllEndpointsUnavailable) as exc:
        run_query(stub)

    assert exc.value.timed_out is True
    assert isinstance(exc.value.last_error, OverpassTimeoutError)
    assert exc.value.last_error.endpoint == C


def test_earlier_timeout_does_not_make_terminal_failure_a_timeout():
    stub = OverpassStub({A: httpx.ReadTimeout("read timed out"), B: status(503), C: status(502)})

    with pytest.raises(AllEndpointsUnavailable) as exc:
        run_query(stub)

    assert exc.value.timed_out is False


def test_hung_mirror_is_aborted_at_the_attempt_deadline():
    cancelled = []

    async def hang(request):
        try:
            await asyncio.sleep(30)
        except asyncio.CancelledError:
            cancelled.append(str(request.url))
            raise
        return ok()

    stub = OverpassStub({A: hang, B: ok(element(2, "Fast", lat=1, lon=1)), C: ok()})

    payload = run_query(stub, timeout_seconds=0.05)

    assert payload["elements"][0]["id"] == 2
    assert stub.calls == [A, B]
    assert cancelled == [A]


def test_overall_deadline_skips_remaining_mirrors():
    clock = FakeClock()

    def slow_503(request):
        clock.advance(6)
        return status(503)

    stub = OverpassStub({A: slow_503, B: slow_503, C: ok()})

    with pytest.raises(AllEndpointsUnavailable) as exc:
        run_query(stub, total_timeout_seconds=10, clock=clock)

    assert stub.calls == [A, B]
    assert exc.value.attempts == 2
    assert exc.value.timed_out is True


def test_requires_at_least_one_endpoint():
    with pytest.raises(ValueError):
        OverpassClient([])


def test_timeout_error_is_a_builtin_timeout():
    assert isinstance(OverpassTimeoutError(A, 10), TimeoutError)
