# bgg_wrapped/services/personality.py
from enum import Enum

from bgg_wrapped.schemas.wrapped import Personality


class PersonalityType(str, Enum):
    DREAMER = "The Dreamer"
    CURATOR = "The Curator"
    STRATEGIST = "The Strategist"
    COLLECTOR = "The Collector"
    ENTHUSIAST = "The Enthusiast"


PERSONALITIES: dict[PersonalityType, Personality] = {
    PersonalityType.DREAMER: Personality(
        type=PersonalityType.DREAMER.value,
        description=(
            "Your wishlist tells a story of endless possibilities. You see the magic in every "
            "announcement, every Kickstarter, every 'what if.' The games you want say as much "
            "about you as the ones you own."
        ),
        emoji="✨",
    ),
    PersonalityType.CURATOR: Personality(
        type=PersonalityType.CURATOR.value,
        description=(
            "You know what you love. Your collection isn't about quantity—it's about quality, "
            "intention, and games that earn their place on your shelf. Every rating is a "
            "deliberate choice."
        ),
        emoji="🎯",
    ),
    PersonalityType.STRATEGIST: Personality(
        type=PersonalityType.STRATEGIST.value,
        description=(
            "You're drawn to depth, complexity, and games that reward mastery. Light fillers "
            "have their place, but you come alive when there's real weight on the table."
        ),
        emoji="🧠",
    ),
    PersonalityType.COLLECTOR: Personality(
        type=PersonalityType.COLLECTOR.value,
        description=(
            "Your shelf is a living library. You see potential everywhere, and every game "
            "represents a story waiting to be told. You're building something bigger than a "
            "collection—you're building a world."
        ),
        emoji="📚",
    ),
    PersonalityType.ENTHUSIAST: Personality(
        type=PersonalityType.ENTHUSIAST.value,
        description=(
            "You love games, pure and simple. Whether it's your tenth play of a favorite or "
            "trying something brand new, you show up for the experience, the people, and the "
            "joy of play."
        ),
        emoji="🎲",
    ),
}

DREAMER_WISHLIST_RATIO = 0.5
CURATOR_RATED_RATIO = 0.7
CURATOR_MIN_AVG_RATING = 7.5
STRATEGIST_MIN_WEIGHT = 3.5
COLLECTOR_MIN_OWNED = 100


def classify(
    owned_count: int,
    wishlist_count: int,
    rated_count: int,
    avg_rating: float,
    avg_weight: float,
) -> PersonalityType:
    """First matching rule wins; order matters."""
    if wishlist_count > owned_count * DREAMER_WISHLIST_RATIO:
        return PersonalityType.DREAMER

    # rated/owned is undefined for an empty shelf, so nobody curates nothing
    if owned_count > 0 and rated_count / owned_count > CURATOR_RATED_RATIO and avg_rating > CURATOR_MIN_AVG_RATING:
        return PersonalityType.CURATOR

    if avg_weight > STRATEGIST_MIN_WEIGHT:
        return PersonalityType.STRATEGIST

    if owned_count > COLLECTOR_MIN_OWNED:
        return PersonalityType.COLLECTOR

    return PersonalityType.ENTHUSIAST


def personality_for(kind: PersonalityType) -> Personality:
    return PERSONALITIES[kind]
