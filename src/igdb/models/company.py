"""Company-related IGDB objects."""

from dataclasses import dataclass, field

from .base import Entity
from .enums import DateCategory, WebsiteCategory


@dataclass(frozen=True)
class Company(Entity):
    """Video game company, either a developer, a publisher or both."""
    change_date: int = 0
    change_date_category: DateCategory | int = 0
    changed_company_id: int = 0
    country: int = 0  # ISO 3166-1 numeric code
    created_at: int = 0
    description: str = ""
    developed: list[int] = field(default_factory=list)
    logo: int = 0
    name: str = ""
    parent: int = 0
    published: list[int] = field(default_factory=list)
    slug: str = ""
    start_date: int = 0
    start_date_category: DateCategory | int = 0
    updated_at: int = 0
    url: str = ""
    websites: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class CompanyWebsite(Entity):
    category: WebsiteCategory | int = 0
    trusted: bool = False
    url: str = ""


@dataclass(frozen=True)
class GameEngine(Entity):
    """Video game engine such as Unreal Engine."""
    companies: list[int] = field(default_factory=list)
    created_at: int = 0
    description: str = ""
    logo: int = 0
    name: str = ""
    platforms: list[int] = field(default_factory=list)
    slug: str = ""
    updated_at: int = 0
    url: str = ""


@dataclass(frozen=True)
class InvolvedCompany(Entity):
    """Links a company to a game along with its role."""
    company: int = 0
    created_at: int = 0
    developer: bool = False
    game: int = 0
    porting: bool = False
    publisher: bool = False
    supporting: bool = False
    updated_at: int = 0
