"""Game-related IGDB objects."""

from dataclasses import dataclass, field

from .base import Entity, json_key
from .enums import (
    AchievementCategory,
    AchievementLanguage,
    AchievementRank,
    AgeRatingCategory,
    AgeRatingContentCategory,
    AgeRatingValue,
    DateCategory,
    ExternalGameCategory,
    GameCategory,
    GameStatus,
    RegionCategory,
    VersionFeatureCategory,
    VersionFeatureInclusion,
    WebsiteCategory,
)


@dataclass(frozen=True)
class Game(Entity):
    """A video game, DLC, expansion or bundle.

    Related objects are referenced by ID; fetch them from their own service.
    Timestamps are Unix time in seconds.
    """
    age_ratings: list[int] = field(default_factory=list)
    aggregated_rating: float = 0.0
    aggregated_rating_count: int = 0
    alternative_names: list[int] = field(default_factory=list)
    artworks: list[int] = field(default_factory=list)
    bundles: list[int] = field(default_factory=list)
    category: GameCategory | int = GameCategory.MAIN_GAME
    collection: int = 0
    cover: int = 0
    created_at: int = 0
    dlcs: list[int] = field(default_factory=list)
    expansions: list[int] = field(default_factory=list)
    external_games: list[int] = field(default_factory=list)
    first_release_date: int = 0
    follows: int = 0
    franchise: int = 0
    franchises: list[int] = field(default_factory=list)
    game_engines: list[int] = field(default_factory=list)
    game_modes: list[int] = field(default_factory=list)
    genres: list[int] = field(default_factory=list)
    hypes: int = 0
    involved_companies: list[int] = field(default_factory=list)
    keywords: list[int] = field(default_factory=list)
    multiplayer_modes: list[int] = field(default_factory=list)
    name: str = ""
    parent_game: int = 0
    platforms: list[int] = field(default_factory=list)
    player_perspectives: list[int] = field(default_factory=list)
    popularity: float = 0.0
    pulse_count: int = 0
    rating: float = 0.0
    rating_count: int = 0
    release_dates: list[int] = field(default_factory=list)
    screenshots: list[int] = field(default_factory=list)
    similar_games: list[int] = field(default_factory=list)
    slug: str = ""
    standalone_expansions: list[int] = field(default_factory=list)
    status: GameStatus | int = GameStatus.RELEASED
    storyline: str = ""
    summary: str = ""
    tags: list[int] = field(default_factory=list)
    themes: list[int] = field(default_factory=list)
    time_to_beat: int = 0
    total_rating: float = 0.0
    total_rating_count: int = 0
    updated_at: int = 0
    url: str = ""
    version_parent: int = 0
    version_title: str = ""
    videos: list[int] = field(default_factory=list)
    websites: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class Achievement(Entity):
    """Achievement data for a game on Steam, Playstation or Xbox."""
    achievement_icon: int = 0
    category: AchievementCategory | int = 0
    created_at: int = 0
    description: str = ""
    external_id: str = ""
    game: int = 0
    language: AchievementLanguage | int = 0
    name: str = ""
    owners_percentage: float = 0.0
    rank: AchievementRank | int = 0
    slug: str = ""
    tags: list[int] = field(default_factory=list)
    updated_at: int = 0


@dataclass(frozen=True)
class AgeRating(Entity):
    """An ESRB or PEGI age rating."""
    category: AgeRatingCategory | int = 0
    content_descriptions: list[int] = field(default_factory=list)
    rating: AgeRatingValue | int = 0
    rating_cover_url: str = ""
    synopsis: str = ""


@dataclass(frozen=True)
class AgeRatingContent(Entity):
    category: AgeRatingContentCategory | int = 0
    description: str = ""


@dataclass(frozen=True)
class AlternativeName(Entity):
    """Alternative or international name for a game."""
    comment: str = ""
    game: int = 0
    name: str = ""


@dataclass(frozen=True)
class Collection(Entity):
    """A series of related games."""
    created_at: int = 0
    games: list[int] = field(default_factory=list)
    name: str = ""
    slug: str = ""
    updated_at: int = 0
    url: str = ""


@dataclass(frozen=True)
class ExternalGame(Entity):
    """Game IDs on other services."""
    category: ExternalGameCategory | int = 0
    created_at: int = 0
    game: int = 0
    name: str = ""
    uid: str = ""
    updated_at: int = 0
    url: str = ""
    year: int = 0


@dataclass(frozen=True)
class Franchise(Entity):
    created_at: int = 0
    games: list[int] = field(default_factory=list)
    name: str = ""
    slug: str = ""
    updated_at: int = 0
    url: str = ""


@dataclass(frozen=True)
class GameMode(Entity):
    """Single player, multiplayer and so on."""
    created_at: int = 0
    name: str = ""
    slug: str = ""
    updated_at: int = 0
    url: str = ""


@dataclass(frozen=True)
class GameVersion(Entity):
    """Details about game editions and versions."""
    created_at: int = 0
    features: list[int] = field(default_factory=list)
    game: int = 0
    games: list[int] = field(default_factory=list)
    updated_at: int = 0
    url: str = ""


@dataclass(frozen=True)
class GameVersionFeature(Entity):
    category: VersionFeatureCategory | int = 0
    description: str = ""
    position: int = 0
    title: str = ""
    values: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class GameVersionFeatureValue(Entity):
    game: int = 0
    game_feature: int = 0
    included_feature: VersionFeatureInclusion | int = 0
    note: str = ""


@dataclass(frozen=True)
class GameVideo(Entity):
    """A video associated with a game. ``video_id`` is a YouTube slug."""
    game: int = 0
    name: str = ""
    video_id: str = ""


@dataclass(frozen=True)
class Genre(Entity):
    created_at: int = 0
    name: str = ""
    slug: str = ""
    updated_at: int = 0
    url: str = ""


@dataclass(frozen=True)
class Keyword(Entity):
    created_at: int = 0
    name: str = ""
    slug: str = ""
    updated_at: int = 0
    url: str = ""


@dataclass(frozen=True)
class MultiplayerMode(Entity):
    """Multiplayer capabilities of a game on one platform."""
    campaign_coop: bool = field(default=False, metadata=json_key("campaigncoop"))
    drop_in: bool = field(default=False, metadata=json_key("dropin"))
    lan_coop: bool = field(default=False, metadata=json_key("lancoop"))
    offline_coop: bool = field(default=False, metadata=json_key("offlinecoop"))
    offline_coop_max: int = field(default=0, metadata=json_key("offlinecoopmax"))
    offline_max: int = field(default=0, metadata=json_key("offlinemax"))
    online_coop: bool = field(default=False, metadata=json_key("onlinecoop"))
    online_coop_max: int = field(default=0, metadata=json_key("onlinecoopmax"))
    online_max: int = field(default=0, metadata=json_key("onlinemax"))
    platform: int = 0
    splitscreen: bool = False
    splitscreen_online: bool = field(default=False, metadata=json_key("splitscreenonline"))


@dataclass(frozen=True)
class PlayerPerspective(Entity):
    created_at: int = 0
    name: str = ""
    slug: str = ""
    updated_at: int = 0
    url: str = ""


@dataclass(frozen=True)
class ReleaseDate(Entity):
    """Release date of a game on one platform and region."""
    category: DateCategory | int = 0
    created_at: int = 0
    date: int = 0
    game: int = 0
    human: str = ""
    month: int = field(default=0, metadata=json_key("m"))
    platform: int = 0
    region: RegionCategory | int = 0
    updated_at: int = 0
    year: int = field(default=0, metadata=json_key("y"))


@dataclass(frozen=True)
class Theme(Entity):
    created_at: int = 0
    name: str = ""
    slug: str = ""
    updated_at: int = 0
    url: str = ""


@dataclass(frozen=True)
class TimeToBeat(Entity):
    """Average completion times in seconds."""
    completely: int = 0
    game: int = 0
    hastly: int = 0
    normally: int = 0


@dataclass(frozen=True)
class Title(Entity):
    """Job title of a person credited on a game."""
    created_at: int = 0
    description: str = ""
    games: list[int] = field(default_factory=list)
    name: str = ""
    slug: str = ""
    updated_at: int = 0
    url: str = ""


@dataclass(frozen=True)
class Website(Entity):
    """A website associated with a game."""
    category: WebsiteCategory | int = 0
    game: int = 0
    trusted: bool = False
    url: str = ""
