"""
Shared plumbing for geocoders backed by a JSON-over-HTTP API.
"""

import logging
from typing import Any, Dict, Optional

import requests

from graticule.core.config import settings
from graticule.core.http import build_session
from graticule.geocoding.base import BaseGeocoder, ProviderError

logger = logging.getLogger(__name__)

# What indexing into an unexpectedly shaped JSON body raises
MALFORMED_RESPONSE_ERRORS = (AttributeError, IndexError, KeyError, TypeError, ValueError)


class RestGeocoder(BaseGeocoder):
    """
    Base for HTTP geocoders.

    Owns a retrying requests session (see graticule.core.http) and turns
    transport failures into ProviderError so a MultiGeocoder can fall back.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.session = session or build_session()
        self.timeout = settings.HTTP_TIMEOUT if timeout is None else timeout

    def get_json(self, url: str, params: Dict[str, Any], address: str = "") -> Any:
        """
        GET `url` and decode the JSON body.

        Raises:
            ProviderError: On timeout, connection failure, non-200 status or bad JSON
        """
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.Timeout as e:
            logger.warning(f"{self.provider_name}: Timeout for {address}")
            raise ProviderError("Request timed out", provider=self.provider_name, address=address) from e
        except requests.RequestException as e:
            logger.warning(f"{self.provider_name}: Request failed for {address}: {e}")
            raise ProviderError(f"Request failed: {e}", provider=self.provider_name, address=address) from e

        if response.status_code != 200:
            logger.warning(f"{self.provider_name}: HTTP {response.status_code} for {address}")
            raise ProviderError(
                f"HTTP {response.status_code}",
                provider=self.provider_name,
                address=address,
            )

        try:
            return response.json()
        except ValueError as e:
            raise ProviderError("Invalid JSON response", provider=self.provider_name, address=address) from e

    def malformed_response(self, error: Exception, address: str = "") -> ProviderError:
        """Build the ProviderError for a response body we could not interpret."""
        logger.warning(f"{self.provider_name}: Malformed response for {address}: {error!r}")
        return ProviderError("Malformed response", provider=self.provider_name, address=address)
