"""Data models for IGDB objects."""

from .base import CodedEnum, Count, Entity, Model
from .community import (
    Feed,
    FeedFollow,
    Follow,
    List,
    ListEntry,
    Page,
    PageWebsite,
    Pulse,
    PulseGroup,
    PulseSource,
    PulseURL,
    Rate,
    Review,
    ReviewVideo,
    SocialMetric,
    TestDummy,
)
from .company import Company, CompanyWebsite, GameEngine, InvolvedCompany
from .config import ClientConfig
from .enums import (
    AchievementCategory,
    AchievementLanguage,
    AchievementRank,
    AgeRatingCategory,
    AgeRatingContentCategory,
    AgeRatingValue,
    CreditCategory,
    DateCategory,
    ExternalGameCategory,
    FeedCategory,
    GameCategory,
    GameStatus,
    GenderCode,
    RegionCategory,
    SocialMetricCategory,
    SpeciesCode,
    TestDummyEnum,
    VersionFeatureCategory,
    VersionFeatureInclusion,
    WebsiteCategory,
)
from .game import (
    Achievement,
    AgeRating,
    AgeRatingContent,
    AlternativeName,
    Collection,
    ExternalGame,
    Franchise,
    Game,
    GameMode,
    GameVersion,
    GameVersionFeature,
    GameVersionFeatureValue,
    GameVideo,
    Genre,
    Keyword,
    MultiplayerMode,
    PlayerPerspective,
    ReleaseDate,
    Theme,
    TimeToBeat,
    Title,
    Website,
)
from .image import (
    AchievementIcon,
    Artwork,
    CharacterMugshot,
    CompanyLogo,
    Cover,
    GameEngineLogo,
    Image,
    ImageSize,
    PageBackground,
    PageLogo,
    PersonMugshot,
    PlatformLogo,
    Screenshot,
)
from .people import Character, Credit, Person, PersonWebsite
from .platform import (
    Platform,
    PlatformFamily,
    PlatformVersion,
    PlatformVersionCompany,
    PlatformVersionReleaseDate,
    PlatformWebsite,
    ProductFamily,
)
from .search import SearchResult, Status, UsageReport

__all__ = [
    "Achievement",
    "AchievementCategory",
    "AchievementIcon",
    "AchievementLanguage",
    "AchievementRank",
    "AgeRating",
    "AgeRatingCategory",
    "AgeRatingContent",
    "AgeRatingContentCategory",
    "AgeRatingValue",
    "AlternativeName",
    "Artwork",
    "Character",
    "CharacterMugshot",
    "ClientConfig",
    "CodedEnum",
    "Collection",
    "Company",
    "CompanyLogo",
    "CompanyWebsite",
    "Count",
    "Cover",
    "Credit",
    "CreditCategory",
    "DateCategory",
    "Entity",
    "ExternalGame",
    "ExternalGameCategory",
    "Feed",
    "FeedCategory",
    "FeedFollow",
    "Follow",
    "Franchise",
    "Game",
    "GameCategory",
    "GameEngine",
    "GameEngineLogo",
    "GameMode",
    "GameStatus",
    "GameVersion",
    "GameVersionFeature",
    "GameVersionFeatureValue",
    "GameVideo",
    "GenderCode",
    "Genre",
    "Image",
    "ImageSize",
    "InvolvedCompany",
    "Keyword",
    "List",
    "ListEntry",
    "Model",
    "MultiplayerMode",
    "Page",
    "PageBackground",
    "PageLogo",
    "PageWebsite",
    "Person",
    "PersonMugshot",
    "PersonWebsite",
    "Platform",
    "PlatformFamily",
    "PlatformLogo",
    "PlatformVersion",
    "PlatformVersionCompany",
    "PlatformVersionReleaseDate",
    "PlatformWebsite",
    "PlayerPerspective",
    "ProductFamily",
    "Pulse",
    "PulseGroup",
    "PulseSource",
    "PulseURL",
    "Rate",
    "RegionCategory",
    "ReleaseDate",
    "Review",
    "ReviewVideo",
    "Screenshot",
    "SearchResult",
    "SocialMetric",
    "SocialMetricCategory",
    "SpeciesCode",
    "Status",
    "TestDummy",
    "TestDummyEnum",
    "Theme",
    "TimeToBeat",
    "Title",
    "UsageReport",
    "VersionFeatureCategory",
    "VersionFeatureInclusion",
    "Website",
    "WebsiteCategory",
]
