"""
HTTP session factory shared by the provider adapters.

Retries with exponential backoff are handled by urllib3 at the transport
level, so an adapter only ever sees the final response or the final
exception.
"""

import logging
from typing import Optional, Tuple

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from graticule.core.config import settings

logger = logging.getLogger(__name__)

RETRY_STATUS_CODES: Tuple[int, ...] = (500, 502, 503, 504)


def build_session(
    user_agent: Optional[str] = None,
    max_retries: Optional[int] = None,
    backoff_factor: Optional[float] = None,
    status_forcelist: Tuple[int, ...] = RETRY_STATUS_CODES,
) -> requests.Session:
    """
    Create a requests session with a retry policy mounted for http and https.

    Args:
        user_agent: User-Agent header (default: settings.NOMINATIM_USER_AGENT)
        max_retries: Total retries (default: settings.MAX_RETRIES)
        backoff_factor: Backoff factor (default: settings.RETRY_BACKOFF)
        status_forcelist: Response codes that trigger a retry

    Returns:
        Configured requests.Session
    """
    retry_strategy = Retry(
        total=settings.MAX_RETRIES if max_retries is None else max_retries,
        backoff_factor=settings.RETRY_BACKOFF if backoff_factor is None else backoff_factor,
        status_forcelist=status_forcelist,
        allowed_methods=["HEAD", "GET"],
        raise_on_status=False,
    )

    session = requests.Session()
    adapter = HTTPAdapter(max_retries=retry_strategy)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.headers.update({
        "User-Agent": user_agent or settings.NOMINATIM_USER_AGENT,
        "Accept": "application/json",
    })

    logger.debug(f"HTTP session created (retries={retry_strategy.total})")
    return session
