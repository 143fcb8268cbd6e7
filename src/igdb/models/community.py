"""User, feed and pulse objects. Most live under the private endpoints."""

from dataclasses import dataclass, field

from .base import Entity, json_key
from .enums import FeedCategory, SocialMetricCategory, TestDummyEnum, WebsiteCategory


@dataclass(frozen=True)
class Feed(Entity):
    """A feed item such as a news article or new trailer."""
    category: FeedCategory | int = 0
    content: str = ""
    created_at: int = 0
    feed_likes_count: int = 0
    feed_video: int = 0
    games: list[int] = field(default_factory=list)
    meta: str = ""
    published_at: int = 0
    pulse: int = 0
    slug: str = ""
    title: str = ""
    uid: str = ""
    updated_at: int = 0
    url: str = ""
    user: int = 0


@dataclass(frozen=True)
class FeedFollow(Entity):
    created_at: int = 0
    feed: FeedCategory | int = 0
    published_at: int = 0
    updated_at: int = 0
    user: int = 0


@dataclass(frozen=True)
class Follow(Entity):
    game: int = 0
    user: int = 0


@dataclass(frozen=True)
class List(Entity):
    """A user created list of games."""
    created_at: int = 0
    description: str = ""
    entries_count: int = 0
    list_entries: list[int] = field(default_factory=list)
    list_tags: list[int] = field(default_factory=list)
    listed_games: list[int] = field(default_factory=list)
    name: str = ""
    numbering: bool = False
    private: bool = False
    similar_lists: list[int] = field(default_factory=list)
    slug: str = ""
    updated_at: int = 0
    url: str = ""
    user: int = 0


@dataclass(frozen=True)
class ListEntry(Entity):
    description: str = ""
    game: int = 0
    list_id: int = field(default=0, metadata=json_key("list"))
    platform: int = 0
    position: int = 0
    private: bool = False
    user: int = 0


@dataclass(frozen=True)
class Page(Entity):
    """A multipurpose page for youtubers, media and the like."""
    background: int = 0
    battlenet: str = ""
    category: int = 0
    color: int = 0
    company: int = 0
    country: int = 0
    created_at: int = 0
    description: str = ""
    feed: int = 0
    game: int = 0
    logo: int = 0
    name: str = ""
    origin: str = ""
    page_follows_count: int = 0
    slug: str = ""
    sub_category: int = 0
    updated_at: int = 0
    url: str = ""
    user: int = 0
    websites: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class PageWebsite(Entity):
    category: WebsiteCategory | int = 0
    trusted: bool = False
    url: str = ""


@dataclass(frozen=True)
class Pulse(Entity):
    """A single news article."""
    author: str = ""
    created_at: int = 0
    image: str = ""
    published_at: int = 0
    pulse_image: int = 0
    pulse_source: int = 0
    summary: str = ""
    tags: list[int] = field(default_factory=list)
    title: str = ""
    uid: str = ""
    updated_at: int = 0
    videos: list[str] = field(default_factory=list)
    website: int = 0


@dataclass(frozen=True)
class PulseGroup(Entity):
    """A combined group of news articles."""
    created_at: int = 0
    game: int = 0
    name: str = ""
    published_at: int = 0
    pulses: list[int] = field(default_factory=list)
    tags: list[int] = field(default_factory=list)
    updated_at: int = 0


@dataclass(frozen=True)
class PulseSource(Entity):
    """A news article source such as IGN."""
    game: int = 0
    name: str = ""
    page: int = 0


@dataclass(frozen=True)
class PulseURL(Entity):
    trusted: bool = False
    url: str = ""


@dataclass(frozen=True)
class Rate(Entity):
    rating: float = 0.0
    user: int = 0


@dataclass(frozen=True)
class Review(Entity):
    category: int = 0
    conclusion: str = ""
    content: str = ""
    created_at: int = 0
    game: int = 0
    introduction: str = ""
    likes: int = 0
    negative_points: str = ""
    platform: int = 0
    positive_points: str = ""
    slug: str = ""
    title: str = ""
    updated_at: int = 0
    url: str = ""
    user: int = 0
    user_rating: int = 0
    video: int = 0
    views: int = 0


@dataclass(frozen=True)
class ReviewVideo(Entity):
    trusted: bool = False
    url: str = ""


@dataclass(frozen=True)
class SocialMetric(Entity):
    category: SocialMetricCategory | int = 0
    created_at: int = 0
    social_metric_source: int = 0
    value: int = 0


@dataclass(frozen=True)
class TestDummy(Entity):
    """Object exercising every field type the API supports."""
    __test__ = False

    bool_value: bool = False
    created_at: int = 0
    enum_test: TestDummyEnum | int = 0
    float_value: float = 0.0
    game: int = 0
    integer_array: list[int] = field(default_factory=list)
    integer_value: int = 0
    name: str = ""
    new_integer_value: int = 0
    private: bool = False
    slug: str = ""
    string_array: list[str] = field(default_factory=list)
    test_dummies: list[int] = field(default_factory=list)
    test_dummy: int = 0
    updated_at: int = 0
    url: str = ""
    user: int = 0
