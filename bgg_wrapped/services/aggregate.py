# bgg_wrapped/services/aggregate.py

from typing import Iterable, List, Optional, Sequence

from bgg_wrapped.schemas.wrapped import AggregateResult, GameRecord
from bgg_wrapped.services.personality import classify, personality_for

TOP_GAMES_LIMIT = 5
COMFORT_MIN_PLAYS = 3
HIDDEN_GEM_MIN_RATING = 8.0
HIDDEN_GEM_MIN_WEIGHT = 3.0


def _mean(values: Sequence[float]) -> float:
    count = len(values)
    if count == 0:
        return 0.0
    return sum(values) / count


def rank_by_rating(records: Iterable[GameRecord]) -> List[GameRecord]:
    """Rated games, best first; sorted() is stable so ties keep collection order."""
    rated = [g for g in records if g.rating > 0]
    return sorted(rated, key=lambda g: g.rating, reverse=True)


def pick_comfort_game(ranked: Sequence[GameRecord]) -> Optional[GameRecord]:
    for game in ranked:
        if game.num_plays > COMFORT_MIN_PLAYS:
            return game
    # nothing played often enough: fall back to the favourite
    return ranked[0] if ranked else None


def pick_hidden_gem(ranked: Sequence[GameRecord]) -> Optional[GameRecord]:
    for game in ranked:
        if game.rating >= HIDDEN_GEM_MIN_RATING and game.weight > HIDDEN_GEM_MIN_WEIGHT:
            return game
    return None


def aggregate(records: Sequence[GameRecord]) -> AggregateResult:
    owned = [g for g in records if g.owned]
    wishlisted = [g for g in records if g.wishlist]
    ranked = rank_by_rating(records)
    weighted = [g.weight for g in records if g.weight > 0]
    played = [g.play_time for g in records if g.play_time > 0]

    avg_rating = _mean([g.rating for g in ranked])
    avg_weight = _mean(weighted)
    avg_playtime = _mean(played)

    kind = classify(
        owned_count=len(owned),
        wishlist_count=len(wishlisted),
        rated_count=len(ranked),
        avg_rating=avg_rating,
        avg_weight=avg_weight,
    )

    return AggregateResult(
        total_games=len(records),
        owned_count=len(owned),
        wishlist_count=len(wishlisted),
        rated_count=len(ranked),
        avg_rating=avg_rating,
        avg_weight=avg_weight,
        avg_playtime=avg_playtime,
        personality=personality_for(kind),
        top_games=ranked[:TOP_GAMES_LIMIT],
        comfort_game=pick_comfort_game(ranked),
        hidden_gem=pick_hidden_gem(ranked),
    )
