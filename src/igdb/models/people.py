"""Characters, people and their credits."""

from dataclasses import dataclass, field

from .base import Entity
from .enums import CreditCategory, GenderCode, SpeciesCode, WebsiteCategory


@dataclass(frozen=True)
class Character(Entity):
    """Video game character."""
    akas: list[str] = field(default_factory=list)
    country_name: str = ""
    created_at: int = 0
    description: str = ""
    games: list[int] = field(default_factory=list)
    gender: GenderCode | int = 0
    mug_shot: int = 0
    name: str = ""
    people: list[int] = field(default_factory=list)
    slug: str = ""
    species: SpeciesCode | int = 0
    updated_at: int = 0
    url: str = ""


@dataclass(frozen=True)
class Person(Entity):
    """A person involved in the making of a game."""
    bio: str = ""
    characters: list[int] = field(default_factory=list)
    country: int = 0
    created_at: int = 0
    credited_games: list[int] = field(default_factory=list)
    description: str = ""
    dob: int = 0
    gender: GenderCode | int = 0
    loves_count: int = 0
    mug_shot: int = 0
    name: str = ""
    nicknames: list[str] = field(default_factory=list)
    parent: int = 0
    slug: str = ""
    updated_at: int = 0
    url: str = ""
    voice_acted: list[int] = field(default_factory=list)
    websites: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class PersonWebsite(Entity):
    category: WebsiteCategory | int = 0
    trusted: bool = False
    url: str = ""


@dataclass(frozen=True)
class Credit(Entity):
    """An entry in the end credits of a game."""
    category: CreditCategory | int = 0
    character: int = 0
    character_credited_name: str = ""
    comment: str = ""
    company: int = 0
    country: int = 0
    created_at: int = 0
    credited_name: str = ""
    game: int = 0
    person: int = 0
    person_title: int = 0
    position: int = 0
    updated_at: int = 0
