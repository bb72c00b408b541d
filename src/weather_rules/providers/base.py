"""Base forecast provider abstraction.

Providers fetch a forecast document over HTTP and validate it into the
`weather_rules.models.forecast.Forecast` model. A request is made exactly
once: there is no retry and no response cache. Any failure along the way
(transport, HTTP status, JSON decoding, validation) is raised as a
`ForecastUnavailableError` so callers handle a single error type.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

from weather_rules.models.forecast import Forecast

logger = logging.getLogger(__name__)


class ProviderError(Exception):
    """Base exception for forecast provider errors."""

    def __init__(
        self,
        message: str,
        provider: str,
        status_code: int | None = None,
        response_body: str | None = None,
    ):
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code
        self.response_body = response_body


class ForecastUnavailableError(ProviderError):
    """Raised when a forecast cannot be fetched or parsed."""

    pass


class ForecastProvider(ABC):
    """Abstract base class for forecast providers.

    Attributes:
        name: Provider name used in errors and logs
        base_url: Base URL for the API
    """

    name: str
    base_url: str

    def __init__(
        self,
        user_agent: str | None = None,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize the provider.

        Args:
            user_agent: User-Agent string for requests
            timeout: Request timeout in seconds
            client: Pre-built HTTP client (the provider will not close it)
        """
        self.user_agent = user_agent or "weather-rules/0.1.0"
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> ForecastProvider:
        """Enter async context manager."""
        self._get_client()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit async context manager."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
            self._owns_client = True
        return self._client

    def _get_default_headers(self) -> dict[str, str]:
        """Get default headers for requests."""
        return {
            "User-Agent": self.user_agent,
            "Accept": "application/json",
        }

    async def _fetch(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Perform a single GET request.

        Raises:
            ForecastUnavailableError: On transport failure or HTTP status >= 400
        """
        client = self._get_client()
        request_headers = self._get_default_headers()
        if headers:
            request_headers.update(headers)

        try:
            response = await client.get(url, params=params, headers=request_headers)
        except httpx.HTTPError as e:
            raise ForecastUnavailableError(
                f"Request to {url} failed: {e}",
                provider=self.name,
            ) from e

        if response.status_code >= 400:
            raise ForecastUnavailableError(
                f"API request failed: {response.status_code}",
                provider=self.name,
                status_code=response.status_code,
                response_body=response.text,
            )

        return response

    @abstractmethod
    async def fetch(self, url: str) -> Forecast:
        """Fetch and parse a forecast document.

        Args:
            url: Full forecast endpoint URL

        Returns:
            Parsed forecast

        Raises:
            ForecastUnavailableError: If the forecast cannot be retrieved
        """
        pass

    @abstractmethod
    def _translate_response(self, response_data: Any) -> Forecast:
        """Validate a decoded JSON response into a Forecast."""
        pass
