import logging

import httpx

from core.errors import ProbeError, ProbeErrorKind
from core.http_date import parse_rfc1123

logger = logging.getLogger(__name__)

BACKEND_OVERRIDE_HEADER = "Backend-Override"


class MirrorProber:
    """
    Issues freshness and availability probes against mirror endpoints,
    targeting a single backend per request through the override header.
    """

    def __init__(self, client: httpx.AsyncClient):
        """
        Initialize the MirrorProber.

        Args:
            client (httpx.AsyncClient): Shared client used for every probe.
        """
        self.client = client

    async def _get(self, backend: str, url: str) -> httpx.Response:
        # Only status and headers are used, so the body is never read
        try:
            async with self.client.stream(
                "GET", url, headers={BACKEND_OVERRIDE_HEADER: backend}
            ) as resp:
                return resp
        except (httpx.RequestError, httpx.InvalidURL, UnicodeEncodeError) as e:
            raise ProbeError(
                ProbeErrorKind.TRANSPORT,
                f"request to {url} failed: {e}",
                backend=backend,
                url=url,
            ) from e

    async def fetch_freshness(self, backend: str, url: str) -> float:
        """
        Fetch the Last-Modified time of the mirror served by a backend.

        Args:
            backend (str): Backend name sent in the override header.
            url (str): Freshness endpoint.

        Returns:
            float: Last-Modified as Unix epoch seconds.

        Raises:
            ProbeError: On transport failure, a non-200 response, or a
                missing or malformed Last-Modified header.
        """
        resp = await self._get(backend, url)
        if resp.status_code != httpx.codes.OK:
            raise ProbeError(
                ProbeErrorKind.UNEXPECTED_STATUS,
                f"request failed with status code: {resp.status_code} {resp.reason_phrase}",
                backend=backend,
                url=url,
                status_code=resp.status_code,
            )

        last_modified = resp.headers.get("Last-Modified", "")
        try:
            seconds = parse_rfc1123(last_modified)
        except ValueError as e:
            raise ProbeError(
                ProbeErrorKind.PARSE,
                f"invalid Last-Modified header: {e}",
                backend=backend,
                url=url,
                status_code=resp.status_code,
            ) from e
        logger.debug(f"Freshness for {backend}: Last-Modified={last_modified!r}")
        return seconds

    async def fetch_availability(self, backend: str, url: str) -> int:
        """
        Fetch the HTTP status code a backend answers with.

        Every received status, including 4xx and 5xx, is a valid result.

        Raises:
            ProbeError: Only when no response was received.
        """
        resp = await self._get(backend, url)
        logger.debug(f"Availability for {backend}: status={resp.status_code}")
        return resp.status_code
