# bgg_wrapped/services/slides.py

from typing import List, Optional

from bgg_wrapped.schemas.wrapped import Slide, SlideItem, WrappedSummary

MAX_WEIGHT = 5.0
HOME_LINE = "This is the one that always feels like home."


def weight_verdict(avg_weight: float) -> str:
    if avg_weight < 2:
        return "You keep things accessible and fun."
    if avg_weight < 3:
        return "You balance depth with accessibility."
    if avg_weight < 4:
        return "You enjoy games with real strategic weight."
    return "You thrive on complexity and deep strategy."


def weight_percent(avg_weight: float) -> float:
    return min(max(avg_weight / MAX_WEIGHT * 100, 0.0), 100.0)


def _intro(summary: WrappedSummary) -> Slide:
    return Slide(
        kind="intro",
        emoji="🎲",
        title=f"Board Game Wrapped {summary.year}",
        lines=[f"@{summary.username}"],
    )


def _stats(summary: WrappedSummary) -> Slide:
    return Slide(
        kind="stats",
        title="Your Year at the Table",
        lines=[
            f"{summary.total_games} games in your collection",
            f"{summary.rated_count} games rated",
            f"{summary.wishlist_count} games dreaming about",
        ],
    )


def _personality(summary: WrappedSummary) -> Slide:
    p = summary.personality
    return Slide(kind="personality", emoji=p.emoji, title=p.type, lines=[p.description])


def _top_games(summary: WrappedSummary) -> Optional[Slide]:
    if not summary.top_games:
        return None
    return Slide(
        kind="top_games",
        title="Your Highest Rated Games",
        items=[
            SlideItem(rank=i, label=g.name, detail=f"Rating: {g.rating:.1f}/10")
            for i, g in enumerate(summary.top_games, start=1)
        ],
    )


def _comfort_game(summary: WrappedSummary) -> Optional[Slide]:
    game = summary.comfort_game
    if game is None:
        return None
    if game.num_plays > 0:
        caption = f"{game.num_plays} plays logged. {HOME_LINE}"
    else:
        caption = f"Rated {game.rating:.1f}/10. {HOME_LINE}"
    return Slide(kind="comfort_game", emoji="🏠", title="Your Comfort Game", lines=[game.name, caption])


def _hidden_gem(summary: WrappedSummary) -> Optional[Slide]:
    game = summary.hidden_gem
    if game is None:
        return None
    return Slide(
        kind="hidden_gem",
        emoji="💎",
        title="Your Hidden Gem",
        lines=[game.name, f"Not everyone gets this one, but you do. Rated {game.rating:.1f}/10."],
    )


def _complexity(summary: WrappedSummary) -> Optional[Slide]:
    if summary.avg_weight <= 0:
        return None
    return Slide(
        kind="complexity",
        title="Your Complexity Profile",
        lines=[
            f"{summary.avg_weight:.1f}",
            "average complexity",
            weight_verdict(summary.avg_weight),
        ],
        weight_percent=weight_percent(summary.avg_weight),
    )


def _outro(summary: WrappedSummary) -> Slide:
    return Slide(
        kind="outro",
        emoji="🎲",
        title=f"That's Your {summary.year}",
        lines=[
            "Every game, every rating, every choice tells your story as a board gamer.",
            "Powered by BoardGameGeek",
        ],
    )


SLIDE_BUILDERS = (
    _intro,
    _stats,
    _personality,
    _top_games,
    _comfort_game,
    _hidden_gem,
    _complexity,
    _outro,
)


def build_slides(summary: WrappedSummary) -> List[Slide]:
    """Slides in presentation order; sections with nothing to show are skipped."""
    slides = [build(summary) for build in SLIDE_BUILDERS]
    return [s for s in slides if s is not None]
