"""IGDB API endpoint paths."""

from enum import Enum


class Endpoint(str, Enum):
    """Resource paths relative to the API root URL."""
    ACHIEVEMENTS = "achievements/"
    ACHIEVEMENT_ICONS = "achievement_icons/"
    AGE_RATINGS = "age_ratings/"
    AGE_RATING_CONTENTS = "age_rating_content_descriptions/"
    ALTERNATIVE_NAMES = "alternative_names/"
    ARTWORKS = "artworks/"
    CHARACTERS = "characters/"
    CHARACTER_MUGSHOTS = "character_mug_shots/"
    COLLECTIONS = "collections/"
    COMPANIES = "companies/"
    COMPANY_LOGOS = "company_logos/"
    COMPANY_WEBSITES = "company_websites/"
    COVERS = "covers/"
    CREDITS = "private/credits/"
    EXTERNAL_GAMES = "external_games/"
    FEEDS = "feeds/"
    FEED_FOLLOWS = "private/feed_follows/"
    FOLLOWS = "private/follows/"
    FRANCHISES = "franchises/"
    GAMES = "games/"
    GAME_ENGINES = "game_engines/"
    GAME_ENGINE_LOGOS = "game_engine_logos/"
    GAME_MODES = "game_modes/"
    GAME_VERSIONS = "game_versions/"
    GAME_VERSION_FEATURES = "game_version_features/"
    GAME_VERSION_FEATURE_VALUES = "game_version_feature_values/"
    GAME_VIDEOS = "game_videos/"
    GENRES = "genres/"
    INVOLVED_COMPANIES = "involved_companies/"
    KEYWORDS = "keywords/"
    LISTS = "private/lists/"
    LIST_ENTRIES = "private/list_entries/"
    MULTIPLAYER_MODES = "multiplayer_modes/"
    PAGES = "pages/"
    PAGE_BACKGROUNDS = "page_backgrounds/"
    PAGE_LOGOS = "page_logos/"
    PAGE_WEBSITES = "page_websites/"
    PEOPLE = "people/"
    PERSON_MUGSHOTS = "person_mug_shots/"
    PERSON_WEBSITES = "person_websites/"
    PLATFORMS = "platforms/"
    PLATFORM_FAMILIES = "platform_families/"
    PLATFORM_LOGOS = "platform_logos/"
    PLATFORM_VERSIONS = "platform_versions/"
    PLATFORM_VERSION_COMPANIES = "platform_version_companies/"
    PLATFORM_VERSION_RELEASE_DATES = "platform_version_release_dates/"
    PLATFORM_WEBSITES = "platform_websites/"
    PLAYER_PERSPECTIVES = "player_perspectives/"
    PRODUCT_FAMILIES = "product_families/"
    PULSES = "pulses/"
    PULSE_GROUPS = "pulse_groups/"
    PULSE_SOURCES = "pulse_sources/"
    PULSE_URLS = "pulse_urls/"
    RATES = "private/rates/"
    RELEASE_DATES = "release_dates/"
    REVIEWS = "private/reviews/"
    REVIEW_VIDEOS = "private/review_videos/"
    SCREENSHOTS = "screenshots/"
    SEARCH = "search/"
    SOCIAL_METRICS = "private/social_metrics/"
    STATUS = "api_status"
    TEST_DUMMIES = "private/test_dummies/"
    THEMES = "themes/"
    TIME_TO_BEATS = "time_to_beats/"
    TITLES = "titles/"
    WEBSITES = "websites/"

    @property
    def count_path(self) -> str:
        return self.value + "count"

    @property
    def meta_path(self) -> str:
        return self.value + "meta"
