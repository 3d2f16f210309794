import asyncio
import httpx
import logging
import time
from typing import Any, Callable, Dict, Optional, Sequence

from buildex.core.config import settings
from buildex.core.errors import (
    AllEndpointsUnavailable,
    BuildexError,
    OverpassTimeoutError,
    ServiceError,
)
from buildex.core.logger import logs


class OverpassClient:
    """
    Runs Overpass QL queries against an ordered list of mirrors.

    Mirrors are tried strictly in configuration order. The first one that answers
    2xx with a JSON body wins; overload statuses (429/502/503/504), other HTTP errors,
    transport failures and timeouts all move on to the next mirror. When the list is
    exhausted, AllEndpointsUnavailable is raised.
    """

    def __init__(
        self,
        endpoints: Sequence[str],
        timeout_seconds: float = 10.0,
        total_timeout_seconds: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        user_agent: str = "buildex-nearby/1.0",
        clock: Callable[[], float] = time.monotonic,
    ):
        if not endpoints:
            raise ValueError("At least one Overpass endpoint is required")
        self.endpoints = list(endpoints)
        self.timeout_seconds = timeout_seconds
        self.total_timeout_seconds = total_timeout_seconds
        self.http_client = http_client
        self.headers = {"User-Agent": user_agent}
        self.clock = clock

    async def query(self, query: str) -> Dict[str, Any]:
        """Return the decoded JSON body from the first mirror that succeeds."""
        if self.http_client is not None:
            return await self._query_endpoints(self.http_client, query)

        async with httpx.AsyncClient(headers=self.headers) as client:
            return await self._query_endpoints(client, query)

    async def _query_endpoints(self, client: httpx.AsyncClient, query: str) -> Dict[str, Any]:
        deadline = None
        if self.total_timeout_seconds is not None:
            deadline = self.clock() + self.total_timeout_seconds

        last_error: Optional[BuildexError] = None
        attempts = 0

        for endpoint in self.endpoints:
            timeout = self.timeout_seconds
            if deadline is not None:
                remaining = deadline - self.clock()
                if remaining <= 0:
                    logs.log(logging.WARNING, f"Overpass deadline of {self.total_timeout_seconds:g}s spent, skipping remaining mirrors")
                    raise AllEndpointsUnavailable(attempts, last_error, timed_out=True)
                timeout = min(timeout, remaining)

            attempts += 1
            try:
                return await self._attempt(client, endpoint, query, timeout)
            except OverpassTimeoutError as e:
                last_error = e
                logs.log(logging.WARNING, f"{e}, trying next...")
            except ServiceError as e:
                last_error = e
                if e.retryable:
                    logs.log(logging.WARNING, f"Overpass endpoint {endpoint} returned {e.status_code}, trying next...")
                else:
                    logs.log(logging.ERROR, f"{e}, trying next...")

        logs.log(logging.ERROR, f"All Overpass endpoints failed: {last_error}", extra={"attempts": attempts})
        raise AllEndpointsUnavailable(attempts, last_error)

    async def _attempt(self, client: httpx.AsyncClient, endpoint: str, query: str, timeout: float) -> Dict[str, Any]:
        logs.log(logging.DEBUG, f"Querying Overpass endpoint {endpoint} (timeout {timeout:g}s)")
        try:
            # wait_for cancels the in-flight request once the attempt deadline passes
            response = await asyncio.wait_for(
                client.post(endpoint, data={"data": query}, headers=self.headers, timeout=timeout),
                timeout=timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException):
            raise OverpassTimeoutError(endpoint, timeout) from None
        except httpx.HTTPError as e:
            raise ServiceError(endpoint, detail=str(e) or type(e).__name__) from e

        if not response.is_success:
            raise ServiceError(endpoint, status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            raise ServiceError(endpoint, status_code=response.status_code, detail="response body is not valid JSON") from e

        if not isinstance(payload, dict):
            raise ServiceError(endpoint, status_code=response.status_code, detail="response body is not a JSON object")

        return payload


# Process-wide client configured from settings
overpass_client = OverpassClient(
    endpoints=settings.OVERPASS_ENDPOINTS,
    timeout_seconds=settings.OVERPASS_TIMEOUT_SECONDS,
    total_timeout_seconds=settings.OVERPASS_TOTAL_TIMEOUT_SECONDS,
    user_agent=settings.OVERPASS_USER_AGENT,
)
