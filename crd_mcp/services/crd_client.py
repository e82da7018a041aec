"""CRD search service: one HTTP round trip per search."""

from __future__ import annotations

import logging
import time
from typing import Optional

import httpx

from ..models.request import SearchRequest
from ..models.response import SearchResponse
from .classifier import classify_result_set
from .config import AppConfig, get_config
from .decoder import decode_result_set
from .encoder import build_query_params
from .errors import TransportError

logger = logging.getLogger(__name__)


class CrdSearchService:
    """Search the Collaborative Reference Database over its XML API.

    The service holds no per-request state; concurrent searches share only
    the underlying httpx connection pool.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialize the search service.

        Args:
            config: Endpoint configuration (defaults to environment config)
            client: Pre-built httpx client, mainly for tests
        """
        self.config = config or get_config()
        self._client = client or httpx.AsyncClient(timeout=self.config.http_timeout)

    async def search(self, request: SearchRequest) -> SearchResponse:
        """
        Run a search and return the normalized response.

        Raises:
            TransportError: The endpoint could not be reached or returned an HTTP error
            DecodeError: The body is not a valid result_set document
            UpstreamApplicationError: The endpoint rejected the request
            InvariantViolation: The response contradicts its status code
        """
        params = build_query_params(request)
        logger.debug("CRD request", extra={"params": params})

        start_time = time.time()
        try:
            response = await self._client.get(
                self.config.api_base_url,
                params=params,
                headers={"User-Agent": self.config.user_agent},
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error(f"CRD request failed: {exc}", extra={"type": request.type.value})
            raise TransportError(
                f"Failed to reach CRD endpoint: {exc}",
                details={"url": self.config.api_base_url},
            ) from exc

        result_set = decode_result_set(response.content)
        result = classify_result_set(result_set)

        duration_ms = (time.time() - start_time) * 1000
        logger.info(
            "CRD search complete",
            extra={
                "type": request.type.value,
                "hit_count": result.hit_count,
                "result_count": len(result.results),
                "duration_ms": f"{duration_ms:.2f}",
            },
        )
        return result

    async def aclose(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()


__all__ = ["CrdSearchService"]
