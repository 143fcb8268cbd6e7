"""Image records and the image-backed IGDB objects."""

from dataclasses import dataclass
from enum import Enum

from .base import Entity


class ImageSize(str, Enum):
    """Maximum dimensions of an image served by the IGDB image CDN."""
    COVER_SMALL = "cover_small"  # 90x128
    COVER_BIG = "cover_big"  # 227x320
    SCREENSHOT_MED = "screenshot_med"  # 569x320
    SCREENSHOT_BIG = "screenshot_big"  # 889x500
    SCREENSHOT_HUGE = "screenshot_huge"  # 1280x720
    LOGO_MED = "logo_med"  # 284x160
    MICRO = "micro"  # 35x35
    THUMB = "thumb"  # 90x90
    HD = "720p"  # 1280x720
    FULL_HD = "1080p"  # 1920x1080


@dataclass(frozen=True)
class Image(Entity):
    """URL, dimensions and ID of a particular image."""
    alpha_channel: bool = False
    animated: bool = False
    height: int = 0
    image_id: str = ""
    url: str = ""
    width: int = 0

    def sized_url(self, size: ImageSize, ratio: int = 1) -> str:
        """Return the URL of this image at ``size`` and display pixel ratio."""
        from ..services.images import sized_image_url

        return sized_image_url(self.image_id, size, ratio)


@dataclass(frozen=True)
class AchievementIcon(Image):
    pass


@dataclass(frozen=True)
class Artwork(Image):
    """Official artwork for a game."""
    game: int = 0


@dataclass(frozen=True)
class CharacterMugshot(Image):
    pass


@dataclass(frozen=True)
class CompanyLogo(Image):
    pass


@dataclass(frozen=True)
class Cover(Image):
    """Cover art for a specific video game."""
    game: int = 0


@dataclass(frozen=True)
class GameEngineLogo(Image):
    pass


@dataclass(frozen=True)
class PageBackground(Image):
    pass


@dataclass(frozen=True)
class PageLogo(Image):
    pass


@dataclass(frozen=True)
class PersonMugshot(Image):
    pass


@dataclass(frozen=True)
class PlatformLogo(Image):
    pass


@dataclass(frozen=True)
class Screenshot(Image):
    """Screenshot of a specific game."""
    game: int = 0
