"""Tests for the record normalizer and the typed XML accessors."""

import math
import xml.etree.ElementTree as ET

from hypothesis import given, strategies as st

from bgg_wrapped.scraper.normalize import normalize_item
from bgg_wrapped.utils.convert import to_flag, to_float, to_int
from bgg_wrapped.utils.xml_fields import field_float, field_str, stat_int
from conftest import build_item


def _item(**kwargs) -> ET.Element:
    return ET.fromstring(build_item(**kwargs))


class TestConvert:
    def test_to_int_takes_leading_integer(self) -> None:
        assert to_int("12 min") == 12
        assert to_int(" 3.9") == 3
        assert to_int("1995") == 1995

    def test_to_int_defaults(self) -> None:
        assert to_int(None) == 0
        assert to_int("") == 0
        assert to_int("N/A") == 0
        assert to_int("-4") == 0
        assert to_int(float("nan")) == 0

    def test_to_int_overlong_digits(self) -> None:
        assert to_int("9" * 5000) == 0
        assert to_int("7" * 5000, default=3) == 3

    def test_to_float_parses_prefix(self) -> None:
        assert to_float("7.5/10") == 7.5
        assert to_float(".5") == 0.5
        assert to_float("8") == 8.0

    def test_to_float_rejects_non_finite_and_negative(self) -> None:
        assert to_float("N/A") == 0.0
        assert to_float("nan") == 0.0
        assert to_float("inf") == 0.0
        assert to_float("1e999") == 0.0
        assert to_float("-2.5") == 0.0
        assert to_float(float("inf")) == 0.0

    def test_to_flag(self) -> None:
        assert to_flag("1") is True
        assert to_flag(" 1 ") is True
        assert to_flag("0") is False
        assert to_flag("yes") is False
        assert to_flag(None) is False


class TestXmlFields:
    def test_value_attribute_wins_over_text(self) -> None:
        node = ET.fromstring('<item><rating value="8.5">ignored</rating></item>')
        assert field_float(node, "rating") == 8.5

    def test_own_text_only(self) -> None:
        node = ET.fromstring("<item><rating>8<averageweight>3.2</averageweight></rating></item>")
        assert field_float(node, "rating") == 8.0

    def test_missing_node_gives_default(self) -> None:
        assert field_str(None, "name", default="Unknown") == "Unknown"
        assert stat_int(None, "minplayers") == 0

    def test_stat_prefers_child_then_attribute(self) -> None:
        stats = ET.fromstring('<stats playingtime="45"><playingtime>90</playingtime></stats>')
        assert stat_int(stats, "playingtime") == 90
        stats = ET.fromstring('<stats playingtime="45"/>')
        assert stat_int(stats, "playingtime") == 45


class TestNormalizeItem:
    def test_full_item(self) -> None:
        record = normalize_item(
            _item(
                name="Brass: Birmingham",
                year="2018",
                rating="9",
                own="1",
                wishlist="0",
                num_plays="12",
                weight="3.87",
                min_players="2",
                max_players="4",
                play_time="120",
            )
        )
        assert record.name == "Brass: Birmingham"
        assert record.year == 2018
        assert record.rating == 9.0
        assert record.owned is True
        assert record.wishlist is False
        assert record.num_plays == 12
        assert record.weight == 3.87
        assert record.min_players == 2
        assert record.max_players == 4
        assert record.play_time == 120

    def test_unrated_item(self) -> None:
        record = normalize_item(_item(rating="N/A"))
        assert record.rating == 0.0

    def test_wishlist_priority(self) -> None:
        record = normalize_item(_item(own="0", wishlist="1", wishlist_priority="2"))
        assert record.owned is False
        assert record.wishlist is True
        assert record.wishlist_priority == 2

    def test_empty_item_uses_defaults(self) -> None:
        record = normalize_item(ET.fromstring("<item/>"))
        assert record.name == "Unknown"
        assert record.year == 0
        assert record.rating == 0.0
        assert record.owned is False
        assert record.wishlist is False
        assert record.wishlist_priority == 0
        assert record.num_plays == 0
        assert record.weight == 0.0
        assert record.min_players == 0
        assert record.max_players == 0
        assert record.play_time == 0

    def test_overlong_number_does_not_raise(self) -> None:
        record = normalize_item(_item(num_plays="9" * 5000, rating="8"))
        assert record.num_plays == 0
        assert record.rating == 8.0

    def test_bad_field_does_not_spoil_the_rest(self) -> None:
        record = normalize_item(_item(year="soon", rating="7.5", num_plays="lots"))
        assert record.year == 0
        assert record.num_plays == 0
        assert record.rating == 7.5
        assert record.name == "Catan"

    def test_weight_comes_from_stats(self) -> None:
        node = ET.fromstring(
            '<item><averageweight value="9"/><name>X</name>'
            '<stats><rating value="6"><averageweight value="2.5"/></rating></stats></item>'
        )
        # top-level lookup of averageweight is never used for weight
        assert normalize_item(node).weight == 2.5


_junk = st.one_of(
    st.none(),
    st.just("9" * 5000),
    st.sampled_from(["", "N/A", "nan", "NaN", "inf", "-inf", "-1", "-0.5", "1e999", "abc", " 7 ", "3.5x"]),
    st.floats(allow_nan=True, allow_infinity=True).map(str),
    st.integers(min_value=-10**6, max_value=10**6).map(str),
)


@given(
    year=_junk,
    rating=_junk,
    num_plays=_junk,
    weight=_junk,
    min_players=_junk,
    max_players=_junk,
    play_time=_junk,
    wishlist_priority=_junk,
)
def test_numeric_fields_are_finite_and_non_negative(
    year, rating, num_plays, weight, min_players, max_players, play_time, wishlist_priority
) -> None:
    record = normalize_item(
        _item(
            year=year,
            rating=rating,
            num_plays=num_plays,
            weight=weight,
            min_players=min_players,
            max_players=max_players,
            play_time=play_time,
            wishlist_priority=wishlist_priority,
        )
    )
    for value in (
        record.year,
        record.rating,
        record.num_plays,
        record.weight,
        record.min_players,
        record.max_players,
        record.play_time,
        record.wishlist_priority,
    ):
        assert math.isfinite(value)
        assert value >= 0
