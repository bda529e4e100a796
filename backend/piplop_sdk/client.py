"""
Piplop API client for registering storyboards as IP on Story Protocol.
"""

import sys
from typing import Any, Optional

import httpx

from .errors import StoryProtocolError, TransportError
from .schema import Storyboard


class PiplopClient:
    """Client for the Piplop IP registration API.

    Holds only connection settings. Every call opens its own HTTP client, so a
    single instance can be shared between concurrent tasks.
    """

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        verbose: bool = False,
    ):
        """Initialize the client.

        Args:
            base_url: Base URL of the registration service, e.g. "http://localhost:8080".
            api_key: Optional bearer credential sent with registration requests.
            transport: Optional httpx transport, mainly for tests.
            verbose: Print request progress to stderr.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key or None
        self.transport = transport
        self.verbose = verbose

    def with_api_key(self, api_key: str) -> "PiplopClient":
        """Return a copy of this client that authenticates with `api_key`."""
        return PiplopClient(
            self.base_url,
            api_key,
            transport=self.transport,
            verbose=self.verbose,
        )

    def _log(self, message: str) -> None:
        if self.verbose:
            print(f"[PIPLOP] {message}", file=sys.stderr)

    def _http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport)

    async def register_storyboard(self, storyboard: Storyboard) -> str:
        """Register a storyboard as IP on Story Protocol.

        Only the storyboard id, title and description are sent.

        Returns:
            The IP ID assigned by the service.

        Raises:
            StoryProtocolError: Non-success status, or no `ip_id` in the response.
            TransportError: The request failed or the response was not JSON.
        """
        url = f"{self.base_url}/api/ip/register"
        payload = {
            "target_type": "storyboard",
            "target_id": storyboard.id,
            "title": storyboard.title,
            "description": storyboard.description,
        }

        headers = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        self._log(f"POST {url} (storyboard {storyboard.id})")
        try:
            async with self._http_client() as client:
                response = await client.post(url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            self._log(f"Request failed: {e}")
            raise TransportError(str(e)) from e

        if not response.is_success:
            self._log(f"Registration rejected with status {response.status_code}")
            raise StoryProtocolError(_response_text(response))

        try:
            result = response.json()
        except ValueError as e:
            raise TransportError(f"Invalid JSON in response: {e}") from e

        ip_id = result.get("ip_id") if isinstance(result, dict) else None
        if not isinstance(ip_id, str):
            raise StoryProtocolError("No IP ID in response")

        self._log(f"Registered as {ip_id}")
        return ip_id

    async def get_ip_status(self, ip_id: str) -> Any:
        """Fetch the status document for a registered IP asset.

        The parsed JSON body is returned as-is, whatever the HTTP status.
        No credential is attached.
        """
        url = f"{self.base_url}/api/ip/{ip_id}"

        self._log(f"GET {url}")
        try:
            async with self._http_client() as client:
                response = await client.get(url)
        except httpx.HTTPError as e:
            self._log(f"Request failed: {e}")
            raise TransportError(str(e)) from e

        try:
            return response.json()
        except ValueError as e:
            raise TransportError(f"Invalid JSON in response: {e}") from e


def _response_text(response: httpx.Response) -> str:
    try:
        return response.text
    except httpx.StreamError:
        return ""
