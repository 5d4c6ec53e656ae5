# bgg_wrapped/scraper/bgg_collection.py

import asyncio
import xml.etree.ElementTree as ET
from typing import Awaitable, Callable, Dict, List, Optional
from urllib.parse import quote

import httpx

from bgg_wrapped.config import settings
from bgg_wrapped.errors import (
    EmptyCollection,
    EmptyUsername,
    ExportTimeout,
    TransportError,
    UpstreamRejected,
)
from bgg_wrapped.utils.logging import log_info, log_success, log_warning

# Body of the placeholder BGG returns while it is still building the export
PENDING_EXPORT_MARKER = "Your request for this collection has been accepted"

Sleep = Callable[[float], Awaitable[None]]


def _default_headers() -> Dict[str, str]:
    return {
        "User-Agent": settings.USER_AGENT,
        "Accept": "application/xml, text/xml, */*",
    }


def _make_client() -> httpx.AsyncClient:
    """One client per wrapped run, shared by all export attempts.

    HTTP/2 only when requested and the h2 package is importable.
    """
    want_http2 = settings.HTTP2
    try:
        if want_http2:
            import h2  # noqa: F401
        http2_flag = want_http2
    except ImportError:
        http2_flag = False

    return httpx.AsyncClient(
        headers=_default_headers(),
        follow_redirects=True,
        http2=http2_flag,
        timeout=httpx.Timeout(settings.HTTP_TIMEOUT_SECONDS),
    )


def collection_url(username: str) -> str:
    return f"{settings.BGG_PROXY_URL}?username={quote(username, safe='')}"


def is_pending_export(body: str) -> bool:
    return PENDING_EXPORT_MARKER in body


def check_document(root: ET.Element) -> ET.Element:
    """Reject BGG error payloads and empty collections."""
    error_node = root if root.tag == "error" else root.find(".//error")
    if error_node is not None:
        message = (error_node.findtext(".//message") or "").strip()
        raise UpstreamRejected(message or None)

    if not collection_items(root):
        raise EmptyCollection()

    return root


def collection_items(root: ET.Element) -> List[ET.Element]:
    return list(root.iter("item"))


async def fetch_collection(
    username: str,
    client: Optional[httpx.AsyncClient] = None,
    sleep: Sleep = asyncio.sleep,
) -> ET.Element:
    """
    Pobiera eksport kolekcji użytkownika z proxy BGG.

    BGG buduje eksport asynchronicznie: pierwsze zapytanie często zwraca tylko
    komunikat "accepted". Wtedy ponawiamy (świeże zapytanie) co
    EXPORT_RETRY_DELAY_SECONDS, maksymalnie EXPORT_MAX_RETRIES razy, a potem
    zgłaszamy ExportTimeout.
    """
    username = (username or "").strip()
    if not username:
        raise EmptyUsername()

    if client is None:
        async with _make_client() as own_client:
            return await _fetch_with_retry(own_client, username, sleep)
    return await _fetch_with_retry(client, username, sleep)


async def _fetch_with_retry(client: httpx.AsyncClient, username: str, sleep: Sleep) -> ET.Element:
    url = collection_url(username)
    delay = settings.EXPORT_RETRY_DELAY_SECONDS
    max_attempts = settings.EXPORT_MAX_RETRIES + 1

    log_info(f"➡️ Fetching collection export for '{username}' from: {url}")

    for attempt in range(1, max_attempts + 1):
        resp = await client.get(url)

        if not resp.is_success:
            log_warning(f"🚫 HTTP {resp.status_code} for '{username}' (attempt {attempt}/{max_attempts})")
            raise TransportError(status_code=resp.status_code)

        body = resp.text
        if is_pending_export(body):
            if attempt == max_attempts:
                break
            log_info(f"⏳ Export queued by BGG — czekam {delay:.1f}s (attempt {attempt}/{max_attempts})")
            await sleep(delay)
            continue

        root = check_document(ET.fromstring(body))
        log_success(f"📦 Export ready for '{username}' after {attempt} attempt(s)")
        return root

    log_warning(f"⌛ Export for '{username}' still pending after {max_attempts} attempts")
    raise ExportTimeout()
