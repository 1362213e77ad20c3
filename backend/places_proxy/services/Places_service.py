import httpx
import logging
from typing import Optional
from places_proxy.models.places_model import PlacesQuery
from places_proxy.core.logger import logs

class PlacesProviderError(Exception):
    """Raised for any failure talking to the places provider."""

class PlacesService:
    def __init__(
        self,
        api_key: str,
        base_url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.transport = transport

    async def nearby_search(self, query: PlacesQuery) -> dict:
        """
        Forward one keyword search to the provider and return its body untouched.
        One outbound call, no retry, no caching.
        """
        logs.log(logging.INFO, "Searching for:", query.log_params())

        params = {
            "location": query.location,
            "radius": query.radius,
            "keyword": query.keyword,
            "key": self.api_key,
        }

        async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
            try:
                response = await client.get(self.base_url, params=params)
                response.raise_for_status()
                data = response.json()
            except httpx.HTTPStatusError as e:
                # The request URL carries the key, so only the status is logged
                logs.log(logging.ERROR, f"Places provider returned {e.response.status_code} for \"{query.keyword}\"")
                raise PlacesProviderError("provider returned an error status") from e
            except (httpx.HTTPError, ValueError) as e:
                logs.log(logging.ERROR, f"Error fetching places for \"{query.keyword}\": {type(e).__name__}")
                raise PlacesProviderError("provider request failed") from e

        results = data.get("results") if isinstance(data, dict) else None
        count = len(results) if isinstance(results, list) else 0
        logs.log(logging.INFO, f"Found {count} results for \"{query.keyword}\"")

        if isinstance(data, dict) and data.get("error_message"):
            logs.log(logging.ERROR, f"Google API Error: {data['error_message']}")

        return data
