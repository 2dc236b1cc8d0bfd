"""HTML fetching and URL validation."""

import asyncio
import logging
import re

import httpx

from dormchef_recipes.app.core.config import get_settings
from dormchef_recipes.app.services.url_parsing.errors import (
    FetchFailed,
    FetchTimeout,
    InvalidUrlFormat,
    NetworkError,
)
from dormchef_recipes.app.services.url_parsing.models import FetchedPage

logger = logging.getLogger(__name__)

URL_PREFIX_RE = re.compile(r"^https?://", re.I)


def validate_url_format(url: str) -> str:
    """Return the trimmed URL, or raise InvalidUrlFormat if it is not http(s)."""
    candidate = (url or "").strip()
    if not URL_PREFIX_RE.match(candidate):
        raise InvalidUrlFormat(f"URL must start with http:// or https://: {candidate[:200]}")
    return candidate


async def _get(url: str, headers: dict, timeout: httpx.Timeout) -> httpx.Response:
    async with httpx.AsyncClient(
        timeout=timeout, follow_redirects=True, headers=headers
    ) as client:
        return await client.get(url)


async def fetch_html(url: str) -> FetchedPage:
    """GET a page once with the import user agent and a hard timeout.

    The timeout bounds the whole fetch, redirects and body included, on top of
    httpx's per-phase timeouts. The final URL is returned so callers can tell
    whether the page was served from somewhere else. There are no retries.
    """
    settings = get_settings()
    headers = {
        "User-Agent": settings.import_user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    }
    deadline = settings.import_fetch_timeout_seconds
    timeout = httpx.Timeout(deadline)

    try:
        response = await asyncio.wait_for(_get(url, headers, timeout), timeout=deadline)
    except asyncio.TimeoutError as exc:
        logger.warning("Fetching %s exceeded %.1fs", url, deadline)
        raise FetchTimeout(f"No complete response within {deadline:g} seconds") from exc
    except httpx.TimeoutException as exc:
        logger.warning("Timed out fetching %s: %s", url, exc)
        raise FetchTimeout(str(exc) or None) from exc
    except (httpx.RequestError, httpx.InvalidURL) as exc:
        logger.warning("Network error fetching %s: %s", url, exc)
        raise NetworkError(str(exc) or None) from exc

    if not response.is_success:
        logger.warning(
            "Fetching %s returned status %s %s",
            url,
            response.status_code,
            response.reason_phrase,
        )
        raise FetchFailed(response.status_code, response.reason_phrase)

    final_url = str(response.url)
    logger.info(
        "Fetched %s (%d chars, final url %s)", url, len(response.text), final_url
    )
    return FetchedPage(text=response.text, final_url=final_url)
