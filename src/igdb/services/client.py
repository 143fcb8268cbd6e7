"""Entry point wiring one service per IGDB resource."""

from typing import Any, TypeVar

import httpx
import structlog

from ..models import (
    Achievement,
    AchievementIcon,
    AgeRating,
    AgeRatingContent,
    AlternativeName,
    Artwork,
    Character,
    CharacterMugshot,
    ClientConfig,
    Collection,
    Company,
    CompanyLogo,
    CompanyWebsite,
    Cover,
    Credit,
    ExternalGame,
    Feed,
    FeedFollow,
    Follow,
    Franchise,
    Game,
    GameEngine,
    GameEngineLogo,
    GameMode,
    GameVersion,
    GameVersionFeature,
    GameVersionFeatureValue,
    GameVideo,
    Genre,
    InvolvedCompany,
    Keyword,
    List,
    ListEntry,
    MultiplayerMode,
    Page,
    PageBackground,
    PageLogo,
    PageWebsite,
    Person,
    PersonMugshot,
    PersonWebsite,
    Platform,
    PlatformFamily,
    PlatformLogo,
    PlatformVersion,
    PlatformVersionCompany,
    PlatformVersionReleaseDate,
    PlatformWebsite,
    PlayerPerspective,
    ProductFamily,
    Pulse,
    PulseGroup,
    PulseSource,
    PulseURL,
    Rate,
    ReleaseDate,
    Review,
    ReviewVideo,
    Screenshot,
    SearchResult,
    SocialMetric,
    Status,
    TestDummy,
    Theme,
    TimeToBeat,
    Title,
    Website,
)
from ..models.base import Entity
from ..models.config import DEFAULT_BASE_URL, DEFAULT_USER_AGENT
from .config import ConfigurationService
from .endpoints import Endpoint
from .entity import EntityService, SearchableService
from .errors import ConfigurationError, ErrorContext, IGDBError
from .http_client import HttpClientService

log = structlog.stdlib.get_logger()

E = TypeVar("E", bound=Entity)


class Client:
    """Client for the IGDB API.

    Each resource is reached through its own service attribute::

        with Client(client_id, token) as igdb:
            game = igdb.games.get(1942, set_fields("name", "rating"))
            hits = igdb.search.search("zelda", set_limit(5))

    A client may be shared between threads.
    """

    def __init__(
        self,
        client_id: str,
        access_token: str,
        http: httpx.Client | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self.http = HttpClientService(
            client_id,
            access_token,
            base_url=base_url,
            timeout=timeout,
            user_agent=user_agent,
            http=http,
        )

        self.achievements = self._service(Endpoint.ACHIEVEMENTS, Achievement)
        self.achievement_icons = self._service(Endpoint.ACHIEVEMENT_ICONS, AchievementIcon)
        self.age_ratings = self._service(Endpoint.AGE_RATINGS, AgeRating)
        self.age_rating_contents = self._service(Endpoint.AGE_RATING_CONTENTS, AgeRatingContent)
        self.alternative_names = self._service(Endpoint.ALTERNATIVE_NAMES, AlternativeName)
        self.artworks = self._service(Endpoint.ARTWORKS, Artwork)
        self.characters = self._searchable(Endpoint.CHARACTERS, Character)
        self.character_mugshots = self._service(Endpoint.CHARACTER_MUGSHOTS, CharacterMugshot)
        self.collections = self._searchable(Endpoint.COLLECTIONS, Collection)
        self.companies = self._service(Endpoint.COMPANIES, Company)
        self.company_logos = self._service(Endpoint.COMPANY_LOGOS, CompanyLogo)
        self.company_websites = self._service(Endpoint.COMPANY_WEBSITES, CompanyWebsite)
        self.covers = self._service(Endpoint.COVERS, Cover)
        self.credits = self._service(Endpoint.CREDITS, Credit)
        self.external_games = self._service(Endpoint.EXTERNAL_GAMES, ExternalGame)
        self.feeds = self._service(Endpoint.FEEDS, Feed)
        self.feed_follows = self._service(Endpoint.FEED_FOLLOWS, FeedFollow)
        self.follows = self._service(Endpoint.FOLLOWS, Follow)
        self.franchises = self._service(Endpoint.FRANCHISES, Franchise)
        self.games = self._searchable(Endpoint.GAMES, Game)
        self.game_engines = self._service(Endpoint.GAME_ENGINES, GameEngine)
        self.game_engine_logos = self._service(Endpoint.GAME_ENGINE_LOGOS, GameEngineLogo)
        self.game_modes = self._service(Endpoint.GAME_MODES, GameMode)
        self.game_versions = self._service(Endpoint.GAME_VERSIONS, GameVersion)
        self.game_version_features = self._service(Endpoint.GAME_VERSION_FEATURES, GameVersionFeature)
        self.game_version_feature_values = self._service(
            Endpoint.GAME_VERSION_FEATURE_VALUES, GameVersionFeatureValue
        )
        self.game_videos = self._service(Endpoint.GAME_VIDEOS, GameVideo)
        self.genres = self._service(Endpoint.GENRES, Genre)
        self.involved_companies = self._service(Endpoint.INVOLVED_COMPANIES, InvolvedCompany)
        self.keywords = self._service(Endpoint.KEYWORDS, Keyword)
        self.lists = self._service(Endpoint.LISTS, List)
        self.list_entries = self._service(Endpoint.LIST_ENTRIES, ListEntry)
        self.multiplayer_modes = self._service(Endpoint.MULTIPLAYER_MODES, MultiplayerMode)
        self.pages = self._service(Endpoint.PAGES, Page)
        self.page_backgrounds = self._service(Endpoint.PAGE_BACKGROUNDS, PageBackground)
        self.page_logos = self._service(Endpoint.PAGE_LOGOS, PageLogo)
        self.page_websites = self._service(Endpoint.PAGE_WEBSITES, PageWebsite)
        self.people = self._searchable(Endpoint.PEOPLE, Person)
        self.person_mugshots = self._service(Endpoint.PERSON_MUGSHOTS, PersonMugshot)
        self.person_websites = self._service(Endpoint.PERSON_WEBSITES, PersonWebsite)
        self.platforms = self._searchable(Endpoint.PLATFORMS, Platform)
        self.platform_families = self._service(Endpoint.PLATFORM_FAMILIES, PlatformFamily)
        self.platform_logos = self._service(Endpoint.PLATFORM_LOGOS, PlatformLogo)
        self.platform_versions = self._service(Endpoint.PLATFORM_VERSIONS, PlatformVersion)
        self.platform_version_companies = self._service(
            Endpoint.PLATFORM_VERSION_COMPANIES, PlatformVersionCompany
        )
        self.platform_version_release_dates = self._service(
            Endpoint.PLATFORM_VERSION_RELEASE_DATES, PlatformVersionReleaseDate
        )
        self.platform_websites = self._service(Endpoint.PLATFORM_WEBSITES, PlatformWebsite)
        self.player_perspectives = self._service(Endpoint.PLAYER_PERSPECTIVES, PlayerPerspective)
        self.product_families = self._service(Endpoint.PRODUCT_FAMILIES, ProductFamily)
        self.pulses = self._service(Endpoint.PULSES, Pulse)
        self.pulse_groups = self._service(Endpoint.PULSE_GROUPS, PulseGroup)
        self.pulse_sources = self._service(Endpoint.PULSE_SOURCES, PulseSource)
        self.pulse_urls = self._service(Endpoint.PULSE_URLS, PulseURL)
        self.rates = self._service(Endpoint.RATES, Rate)
        self.release_dates = self._service(Endpoint.RELEASE_DATES, ReleaseDate)
        self.reviews = self._service(Endpoint.REVIEWS, Review)
        self.review_videos = self._service(Endpoint.REVIEW_VIDEOS, ReviewVideo)
        self.screenshots = self._service(Endpoint.SCREENSHOTS, Screenshot)
        self.search = self._searchable(Endpoint.SEARCH, SearchResult)
        self.social_metrics = self._service(Endpoint.SOCIAL_METRICS, SocialMetric)
        self.test_dummies = self._service(Endpoint.TEST_DUMMIES, TestDummy)
        self.themes = self._searchable(Endpoint.THEMES, Theme)
        self.time_to_beats = self._service(Endpoint.TIME_TO_BEATS, TimeToBeat)
        self.titles = self._service(Endpoint.TITLES, Title)
        self.websites = self._service(Endpoint.WEBSITES, Website)

        log.debug("IGDB client created", base_url=self.http.base_url)

    @classmethod
    def from_config(cls, config: ClientConfig, http: httpx.Client | None = None) -> "Client":
        """Create a client from a validated configuration.

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        result = ConfigurationService().validate_config(config)
        if not result.is_valid:
            raise ConfigurationError(errors=result.errors)
        return cls(
            config.client_id,
            config.access_token,
            http=http,
            base_url=config.base_url,
            timeout=config.timeout,
            user_agent=config.user_agent,
        )

    def status(self) -> Status:
        """Return the usage report and plan of the configured API key.

        Raises:
            NoResultsError: If the API returned no status record
        """
        try:
            return self.http.get(Endpoint.STATUS, Status)[0]
        except IGDBError as e:
            raise e.with_context(ErrorContext("get", "API status"))

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type: type[Exception] | None, exc_val: Exception | None, exc_tb: Any) -> None:
        self.close()

    def _service(self, endpoint: Endpoint, model: type[E]) -> EntityService[E]:
        return EntityService(self.http, endpoint, model)

    def _searchable(self, endpoint: Endpoint, model: type[E]) -> SearchableService[E]:
        return SearchableService(self.http, endpoint, model)
