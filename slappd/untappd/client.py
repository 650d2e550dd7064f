"""
Thin async client for the Untappd v4 API.
"""

import logging
from typing import Any, Dict, Optional
import httpx
from urllib.parse import quote
from pydantic import ValidationError
from slappd.config import Settings
from slappd.untappd.models import BeerInfo, SearchResponse

logger = logging.getLogger(__name__)


class UntappdError(Exception):
    """Raised for any failure talking to the Untappd API."""


class UntappdClient:
    
    def __init__(
        self,
        base_url: str,
        client_id: str,
        client_secret: str,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.client_id = client_id
        self.client_secret = client_secret
        self.transport = transport
    
    @classmethod
    def from_settings(cls, settings: Settings) -> "UntappdClient":
        return cls(
            base_url=settings.untappd_base_url,
            client_id=settings.untappd_client_id,
            client_secret=settings.untappd_client_secret
        )
    
    async def search(self, query: str) -> SearchResponse:
        """Search beers by free text."""
        data = await self._get("/search/beer", {"q": query})
        try:
            return SearchResponse.model_validate(data["beers"])
        except (KeyError, TypeError, ValidationError) as e:
            raise UntappdError(f"Unexpected search response: {str(e)}") from e
    
    async def info(self, bid: str) -> BeerInfo:
        """Fetch the detail record for a single beer id."""
        data = await self._get(f"/beer/info/{quote(bid, safe='')}", {"compact": "true"})
        try:
            return BeerInfo.model_validate(data["beer"])
        except (KeyError, TypeError, ValidationError) as e:
            raise UntappdError(f"Unexpected beer info response: {str(e)}") from e
    
    async def _get(self, path: str, params: Dict[str, str]) -> Dict[str, Any]:
        params = {
            **params,
            "client_id": self.client_id,
            "client_secret": self.client_secret
        }
        
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.get(f"{self.base_url}{path}", params=params)
                response.raise_for_status()
                body = response.json()
        except httpx.HTTPStatusError as e:
            raise UntappdError(f"Untappd API returned {e.response.status_code} for {path}") from e
        except httpx.HTTPError as e:
            raise UntappdError(f"Untappd API request failed for {path}: {str(e)}") from e
        except ValueError as e:
            raise UntappdError(f"Untappd API returned invalid JSON for {path}") from e
        
        if not isinstance(body, dict) or not isinstance(body.get("response"), dict):
            raise UntappdError(f"Untappd API response for {path} has no 'response' object")
        
        logger.debug(f"Untappd {path} returned {response.status_code}")
        return body["response"]
