"""Platform-related IGDB objects."""

from dataclasses import dataclass, field

from .base import Entity, json_key
from .enums import DateCategory, RegionCategory, WebsiteCategory


@dataclass(frozen=True)
class Platform(Entity):
    """The hardware used to run a game or game delivery network."""
    abbreviation: str = ""
    alternative_name: str = ""
    category: int = 0
    created_at: int = 0
    generation: int = 0
    name: str = ""
    platform_family: int = 0
    platform_logo: int = 0
    product_family: int = 0
    slug: str = ""
    summary: str = ""
    updated_at: int = 0
    url: str = ""
    versions: list[int] = field(default_factory=list)
    websites: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class PlatformFamily(Entity):
    """A collection of closely related platforms."""
    name: str = ""
    slug: str = ""


@dataclass(frozen=True)
class PlatformVersion(Entity):
    """Hardware revision of a platform."""
    companies: list[int] = field(default_factory=list)
    connectivity: str = ""
    cpu: str = ""
    graphics: str = ""
    main_manufacturer: int = 0
    media: str = ""
    memory: str = ""
    name: str = ""
    os: str = ""
    output: str = ""
    platform_logo: int = 0
    platform_version_release_dates: list[int] = field(default_factory=list)
    resolutions: str = ""
    slug: str = ""
    sound: str = ""
    storage: str = ""
    summary: str = ""
    url: str = ""


@dataclass(frozen=True)
class PlatformVersionCompany(Entity):
    comment: str = ""
    company: int = 0
    developer: bool = False
    manufacturer: bool = False


@dataclass(frozen=True)
class PlatformVersionReleaseDate(Entity):
    category: DateCategory | int = 0
    created_at: int = 0
    date: int = 0
    human: str = ""
    month: int = field(default=0, metadata=json_key("m"))
    platform_version: int = 0
    region: RegionCategory | int = 0
    updated_at: int = 0
    year: int = field(default=0, metadata=json_key("y"))


@dataclass(frozen=True)
class PlatformWebsite(Entity):
    category: WebsiteCategory | int = 0
    trusted: bool = False
    url: str = ""


@dataclass(frozen=True)
class ProductFamily(Entity):
    name: str = ""
    slug: str = ""
