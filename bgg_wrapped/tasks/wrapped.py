# bgg_wrapped/tasks/wrapped.py

import asyncio
from datetime import datetime
from typing import Optional, Union

import httpx

from bgg_wrapped.errors import FetchError, unexpected_error
from bgg_wrapped.schemas.wrapped import PipelineError, WrappedSlides, WrappedSummary
from bgg_wrapped.scraper.bgg_collection import Sleep, collection_items, fetch_collection
from bgg_wrapped.scraper.normalize import normalize_items
from bgg_wrapped.services.aggregate import aggregate
from bgg_wrapped.services.slides import build_slides
from bgg_wrapped.utils.logging import log_debug, log_error, log_info, log_success, log_warning

WrappedResult = Union[WrappedSummary, PipelineError]


async def generate_wrapped(
    username: str,
    client: Optional[httpx.AsyncClient] = None,
    sleep: Sleep = asyncio.sleep,
) -> WrappedResult:
    """
    Fetch -> normalize -> aggregate for one BGG user.

    Never raises: every failure comes back as a PipelineError value, and no
    partial summary is ever returned.
    """
    log_info(f"🎁 Generating wrapped for '{(username or '').strip()}'")

    try:
        root = await fetch_collection(username, client=client, sleep=sleep)
        records = normalize_items(collection_items(root))
        log_debug(f"🧩 Normalized {len(records)} collection items")
        result = aggregate(records)
    except FetchError as e:
        log_warning(f"⚠️ Wrapped failed ({e.kind.value}): {e.message}")
        return e.to_error()
    except Exception as e:
        log_error(f"❌ Unexpected error while generating wrapped: {type(e).__name__}: {e}")
        return unexpected_error()

    summary = WrappedSummary(
        username=username.strip(),
        year=datetime.now().year,
        total_games=result.total_games,
        owned_count=result.owned_count,
        wishlist_count=result.wishlist_count,
        rated_count=result.rated_count,
        top_games=result.top_games,
        personality=result.personality,
        avg_weight=result.avg_weight,
        avg_playtime=result.avg_playtime,
        comfort_game=result.comfort_game,
        hidden_gem=result.hidden_gem,
    )
    log_success(
        f"🎉 Wrapped ready for '{summary.username}': {summary.total_games} games, "
        f"personality: {summary.personality.type}"
    )
    return summary


async def generate_wrapped_slides(
    username: str,
    client: Optional[httpx.AsyncClient] = None,
    sleep: Sleep = asyncio.sleep,
) -> Union[WrappedSlides, PipelineError]:
    result = await generate_wrapped(username, client=client, sleep=sleep)
    if isinstance(result, PipelineError):
        return result
    return WrappedSlides(username=result.username, year=result.year, slides=build_slides(result))
