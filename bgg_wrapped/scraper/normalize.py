# bgg_wrapped/scraper/normalize.py

import xml.etree.ElementTree as ET
from typing import Iterable, List

from bgg_wrapped.schemas.wrapped import GameRecord
from bgg_wrapped.utils.xml_fields import (
    attr_flag,
    attr_int,
    field_float,
    field_int,
    field_str,
    find_node,
    stat_float,
    stat_int,
)


def normalize_item(item: ET.Element) -> GameRecord:
    """Flatten one collection ``<item>`` into a GameRecord. Never raises on bad data."""
    status = find_node(item, "status")
    stats = find_node(item, "stats")

    return GameRecord(
        name=field_str(item, "name", default="Unknown"),
        year=field_int(item, "yearpublished"),
        rating=field_float(item, "rating"),
        owned=attr_flag(status, "own"),
        wishlist=attr_flag(status, "wishlist"),
        wishlist_priority=attr_int(status, "wishlistpriority"),
        num_plays=field_int(item, "numplays"),
        # community complexity lives under stats, not on the item itself
        weight=stat_float(stats, "averageweight"),
        min_players=stat_int(stats, "minplayers"),
        max_players=stat_int(stats, "maxplayers"),
        play_time=stat_int(stats, "playingtime"),
    )


def normalize_items(items: Iterable[ET.Element]) -> List[GameRecord]:
    return [normalize_item(item) for item in items]
