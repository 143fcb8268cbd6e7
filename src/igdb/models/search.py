"""Search results and API status records."""

from dataclasses import dataclass, field

from .base import Entity, Model


@dataclass(frozen=True)
class SearchResult(Entity):
    """A hit from the search endpoint.

    Exactly one of the reference fields is set, pointing at the matched
    character, collection, company, game, person, platform or theme.
    """
    alternative_name: str = ""
    character: int = 0
    collection: int = 0
    company: int = 0
    description: str = ""
    game: int = 0
    name: str = ""
    person: int = 0
    platform: int = 0
    popularity: float = 0.0
    published_at: int = 0
    test_dummy: int = 0
    theme: int = 0


@dataclass(frozen=True)
class UsageReport(Model):
    """Usage statistics for the current API key in the current period."""
    metric: str = ""
    period: str = ""
    period_start: str = ""
    period_end: str = ""
    max_value: int = 0
    current_value: int = 0


@dataclass(frozen=True)
class Status(Model):
    """Usage report and plan information for the configured API key."""
    authorized: bool = False
    plan: str = ""
    usage_reports: UsageReport = field(default_factory=UsageReport)
