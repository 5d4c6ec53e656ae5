"""Shared builders for collection XML and fake upstream responses."""

from typing import Callable, List, Optional

import httpx
import pytest

from bgg_wrapped.scraper.bgg_collection import PENDING_EXPORT_MARKER

PENDING_BODY = (
    f"<message>{PENDING_EXPORT_MARKER} and will be processed. "
    "Please try again later for access.</message>"
)


def build_item(
    name: Optional[str] = "Catan",
    year: Optional[str] = "1995",
    rating: Optional[str] = "7",
    own: str = "1",
    wishlist: str = "0",
    wishlist_priority: Optional[str] = None,
    num_plays: Optional[str] = "0",
    weight: Optional[str] = "2.3",
    min_players: Optional[str] = "3",
    max_players: Optional[str] = "4",
    play_time: Optional[str] = "60",
    object_id: int = 13,
) -> str:
    """One BGG xmlapi2-style ``<item>`` (collection export with stats=1)."""
    parts = [f'<item objecttype="thing" objectid="{object_id}" subtype="boardgame">']
    if name is not None:
        parts.append(f'<name sortindex="1">{name}</name>')
    if year is not None:
        parts.append(f"<yearpublished>{year}</yearpublished>")

    stats_attrs = ""
    for attr, value in (("minplayers", min_players), ("maxplayers", max_players), ("playingtime", play_time)):
        if value is not None:
            stats_attrs += f' {attr}="{value}"'
    parts.append(f"<stats{stats_attrs}>")
    if rating is not None:
        parts.append(f'<rating value="{rating}">')
    else:
        parts.append("<rating>")
    if weight is not None:
        parts.append(f'<averageweight value="{weight}"/>')
    parts.append("</rating></stats>")

    status = f'<status own="{own}" wishlist="{wishlist}"'
    if wishlist_priority is not None:
        status += f' wishlistpriority="{wishlist_priority}"'
    parts.append(status + "/>")

    if num_plays is not None:
        parts.append(f"<numplays>{num_plays}</numplays>")
    parts.append("</item>")
    return "".join(parts)


def build_collection(items: List[str]) -> str:
    return (
        '<?xml version="1.0" encoding="utf-8" standalone="yes"?>'
        f'<items totalitems="{len(items)}" termsofuse="https://boardgamegeek.com/xmlapi/termsofuse">'
        + "".join(items)
        + "</items>"
    )


def error_document(message: Optional[str]) -> str:
    inner = f"<message>{message}</message>" if message is not None else ""
    return f'<?xml version="1.0" encoding="utf-8"?><errors><error>{inner}</error></errors>'


class FakeUpstream:
    """Serves queued (status, body) pairs and records requested URLs."""

    def __init__(self, responses: List[tuple]) -> None:
        self._responses = list(responses)
        self.requests: List[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if len(self._responses) > 1:
            status, body = self._responses.pop(0)
        else:
            status, body = self._responses[0]
        return httpx.Response(status, text=body)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


class RecordingSleep:
    def __init__(self) -> None:
        self.calls: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def item_xml() -> Callable[..., str]:
    return build_item


@pytest.fixture
def collection_xml() -> Callable[[List[str]], str]:
    return build_collection


@pytest.fixture
def upstream() -> Callable[[List[tuple]], FakeUpstream]:
    return FakeUpstream


@pytest.fixture
def fake_sleep() -> RecordingSleep:
    return RecordingSleep()
