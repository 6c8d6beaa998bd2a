"""Async HTTP transport for the UniProt tabular API."""

import json
import logging
from typing import Any

import httpx

from uniprot_dictionary.config.schema import DictionaryConfig

logger = logging.getLogger(__name__)


def is_json_string(value: Any) -> bool:
    """Check whether value is a string holding a JSON object or array."""
    if not isinstance(value, str):
        return False
    try:
        parsed = json.loads(value)
    except ValueError:
        return False
    return isinstance(parsed, (dict, list))


class DictionaryRequestError(Exception):
    """
    Transport failure of a dictionary request.

    Attributes:
        status: HTTP status code (None for network failures)
        error: Parsed JSON error body, raw body text, or failure message
    """

    def __init__(self, error: Any, status: int | None = None):
        super().__init__(f"UniProt request failed (status={status}): {error}")
        self.status = status
        self.error = error

    @classmethod
    def from_response(cls, status: int, body: str) -> "DictionaryRequestError":
        """Build error from a non-2xx response, parsing JSON bodies."""
        error = json.loads(body) if is_json_string(body) else body
        return cls(error, status=status)

    def to_dict(self) -> dict[str, Any]:
        """Structured form handed to callback consumers."""
        if self.status is None:
            return {"error": self.error}
        return {"status": self.status, "error": self.error}


class HttpTransport:
    """
    Minimal GET transport returning response bodies as text.

    Timeouts are owned here; the dictionary layer never cancels requests.
    """

    def __init__(
        self,
        timeout: int = 30,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize transport.

        Args:
            timeout: Request timeout in seconds
            transport: Optional httpx transport (e.g. httpx.MockTransport)
        """
        self.timeout = timeout
        self._transport = transport

    async def get_text(self, url: str) -> str:
        """
        GET url and return the UTF-8 decoded body.

        Args:
            url: Fully encoded request URL

        Returns:
            Response body text

        Raises:
            DictionaryRequestError: On non-2xx status, network failure or
                a malformed URL
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Request to {url} failed: {e}")
            raise DictionaryRequestError(str(e)) from e

        response.encoding = "utf-8"
        if not response.is_success:
            raise DictionaryRequestError.from_response(
                response.status_code, response.text
            )
        return response.text

    @classmethod
    def from_config(cls, config: DictionaryConfig) -> "HttpTransport":
        """
        Create transport from dictionary configuration.

        Args:
            config: DictionaryConfig instance

        Returns:
            Configured HttpTransport instance
        """
        return cls(timeout=config.api.timeout_seconds)
