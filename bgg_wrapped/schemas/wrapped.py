# bgg_wrapped/schemas/wrapped.py
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

# ------------------
# COLLECTION RECORDS
# ------------------

class GameRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = "Unknown"
    year: int = Field(0, ge=0)
    rating: float = Field(0.0, ge=0)  # 0 = unrated
    owned: bool = False
    wishlist: bool = False
    wishlist_priority: int = Field(0, ge=0)
    num_plays: int = Field(0, ge=0)
    weight: float = Field(0.0, ge=0)  # community averageweight, 0 = unknown
    min_players: int = Field(0, ge=0)
    max_players: int = Field(0, ge=0)
    play_time: int = Field(0, ge=0)

# ------------------
# AGGREGATES
# ------------------

class Personality(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    description: str
    emoji: str


class AggregateResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_games: int = 0
    owned_count: int = 0
    wishlist_count: int = 0
    rated_count: int = 0
    avg_rating: float = 0.0
    avg_weight: float = 0.0
    avg_playtime: float = 0.0
    personality: Personality
    top_games: List[GameRecord] = []
    comfort_game: Optional[GameRecord] = None
    hidden_gem: Optional[GameRecord] = None


class WrappedSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str
    year: int
    total_games: int
    owned_count: int
    wishlist_count: int
    rated_count: int
    top_games: List[GameRecord]
    personality: Personality
    avg_weight: float
    avg_playtime: float
    comfort_game: Optional[GameRecord] = None
    hidden_gem: Optional[GameRecord] = None

# ------------------
# ERRORS
# ------------------

class ErrorKind(str, Enum):
    EMPTY_USERNAME = "empty_username"
    TRANSPORT_ERROR = "transport_error"
    EXPORT_TIMEOUT = "export_timeout"
    UPSTREAM_REJECTED = "upstream_rejected"
    EMPTY_COLLECTION = "empty_collection"
    UNEXPECTED = "unexpected"


class PipelineError(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str

# ------------------
# SLIDES
# ------------------

class SlideItem(BaseModel):
    rank: int
    label: str
    detail: str


class Slide(BaseModel):
    kind: str
    title: str
    emoji: Optional[str] = None
    lines: List[str] = []
    items: List[SlideItem] = []
    weight_percent: Optional[float] = None  # only on the complexity slide


class WrappedSlides(BaseModel):
    username: str
    year: int
    slides: List[Slide]
