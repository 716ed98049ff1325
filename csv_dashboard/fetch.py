"""
Data source for csv-dashboard.

Retrieves the raw text of one dataset, either over HTTP(S) with httpx or
from the local filesystem. Both paths are async so the pipeline can
fetch every dataset concurrently.

Failures raise ``FetchError``; the pipeline catches them per chart so
one unreachable dataset never stops the others. Timeout policy lives
here, not in the parser.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from urllib.parse import urljoin

import httpx

from csv_dashboard.exceptions import FetchError

logger = logging.getLogger(__name__)

_URL_SCHEMES = ("http://", "https://")


def is_url(location: str) -> bool:
    return location.lower().startswith(_URL_SCHEMES)


def resolve_location(base: str, file: str) -> str:
    """Join a dataset file name onto the configured source base.

    URL bases are joined with ``urljoin`` (a trailing ``/`` is added so
    the last path segment is kept); anything else is treated as a
    directory. An absolute URL in *file* is returned unchanged.
    """
    if is_url(file):
        return file
    if is_url(base):
        return urljoin(base if base.endswith("/") else base + "/", file)
    return str(Path(base) / file)


async def _fetch_http(location: str, client: httpx.AsyncClient | None, timeout: float) -> str:
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=timeout) as own_client:
                response = await own_client.get(location)
        else:
            response = await client.get(location, timeout=timeout)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise FetchError(
            f"HTTP error! status: {exc.response.status_code} for {location}"
        ) from exc
    except httpx.HTTPError as exc:
        raise FetchError(f"Request failed for {location}: {exc!r}") from exc
    return response.text


def _read_file(location: str) -> str:
    try:
        return Path(location).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise FetchError(f"Could not read {location}: {exc}") from exc


async def fetch_text(
    location: str,
    client: httpx.AsyncClient | None = None,
    timeout: float = 10.0,
) -> str:
    """Fetch the raw text of one dataset.

    Args:
        location: An http(s) URL or a filesystem path.
        client: Optional shared ``httpx.AsyncClient``. When ``None``, a
            short-lived client is created for this request.
        timeout: Request timeout in seconds (HTTP only).

    Returns:
        The resource content as text.

    Raises:
        FetchError: On non-2xx status, transport error, timeout, or
            file read failure.
    """
    try:
        if is_url(location):
            text = await _fetch_http(location, client, timeout)
        else:
            text = await asyncio.to_thread(_read_file, location)
    except FetchError as exc:
        logger.error("Failed to fetch %s: %s", location, exc)
        raise

    logger.info("Successfully fetched %s (%d chars)", location, len(text))
    return text
