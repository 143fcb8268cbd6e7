"""Enumerated types used by IGDB objects.

Each enum mirrors an IGDB enumerated field. ``str(member)`` returns the label
the API documentation uses for that code. Filters on enumerated fields take
the numeric code, e.g. ``set_filter("category", Operator.EQUALS,
str(GameCategory.MAIN_GAME.value))``.
"""

from .base import CodedEnum


class AchievementCategory(CodedEnum):
    PLAYSTATION = 1, "Playstation"
    XBOX = 2, "Xbox"
    STEAM = 3, "Steam"


class AchievementRank(CodedEnum):
    BRONZE = 1, "Bronze"
    SILVER = 2, "Silver"
    GOLD = 3, "Gold"
    PLATINUM = 4, "Platinum"


class AchievementLanguage(CodedEnum):
    EUROPE = 1, "Europe"
    NORTH_AMERICA = 2, "North America"
    AUSTRALIA = 3, "Australia"
    NEW_ZEALAND = 4, "New Zealand"
    JAPAN = 5, "Japan"
    CHINA = 6, "China"
    ASIA = 7, "Asia"
    WORLDWIDE = 8, "Worldwide"
    HONG_KONG = 9, "Hong Kong"
    SOUTH_KOREA = 10, "South Korea"


class AgeRatingCategory(CodedEnum):
    ESRB = 1, "ESRB"
    PEGI = 2, "PEGI"


class AgeRatingValue(CodedEnum):
    THREE = 1, "3"
    SEVEN = 2, "7"
    TWELVE = 3, "12"
    SIXTEEN = 4, "16"
    EIGHTEEN = 5, "18"
    RP = 6, "RP"
    EC = 7, "EC"
    E = 8, "E"
    E10 = 9, "E10"
    T = 10, "T"
    M = 11, "M"
    AO = 12, "AO"


class AgeRatingContentCategory(CodedEnum):
    PEGI = 1, "PEGI"
    ESRB = 2, "ESRB"


class CreditCategory(CodedEnum):
    VOICE_ACTOR = 1, "voice_actor"
    LANGUAGE = 2, "language"
    COMPANY_CREDIT = 3, "company_credit"
    EMPLOYEE = 4, "employee"
    MISC = 5, "misc"
    SUPPORT_COMPANY = 6, "support_company"


class DateCategory(CodedEnum):
    YYYY_MM_DD = 0, "YYYY MM DD"
    YYYY_MMM = 1, "YYYY-MMM"
    YYYY = 2, "YYYY"
    YYYY_Q1 = 3, "YYYY-Q1"
    YYYY_Q2 = 4, "YYYY-Q2"
    YYYY_Q3 = 5, "YYYY-Q3"
    YYYY_Q4 = 6, "YYYY-Q4"
    TBD = 7, "TBD"


class ExternalGameCategory(CodedEnum):
    STEAM = 1, "Steam"
    GOG = 5, "GOG"
    YOUTUBE = 10, "YouTube"
    MICROSOFT = 11, "Microsoft"
    APPLE = 13, "Apple"
    TWITCH = 14, "Twitch"
    ANDROID = 15, "Android"


class FeedCategory(CodedEnum):
    PULSE_ARTICLE = 1, "Pulse Article"
    COMING_SOON = 2, "Coming Soon"
    NEW_TRAILER = 3, "New Trailer"
    USER_CONTRIBUTED_ITEM = 5, "User Contributed Item"
    USER_CONTRIBUTIONS_ITEM = 6, "User Contributions Item"
    PAGE_CONTRIBUTED_ITEM = 7, "Page Contributed Item"


class GameCategory(CodedEnum):
    MAIN_GAME = 0, "Main Game"
    DLC_ADDON = 1, "DLC / Addon"
    EXPANSION = 2, "Expansion"
    BUNDLE = 3, "Bundle"
    STANDALONE_EXPANSION = 4, "Standalone Expansion"


class GameStatus(CodedEnum):
    RELEASED = 0, "Released"
    ALPHA = 2, "Alpha"
    BETA = 3, "Beta"
    EARLY_ACCESS = 4, "Early Access"
    OFFLINE = 5, "Offline"
    CANCELLED = 6, "Cancelled"


class GenderCode(CodedEnum):
    MALE = 0, "Male"
    FEMALE = 1, "Female"
    UNKNOWN = 2, "Unknown"


class RegionCategory(CodedEnum):
    EUROPE = 1, "Europe (EU)"
    NORTH_AMERICA = 2, "North America (NA)"
    AUSTRALIA = 3, "Australia (AU)"
    NEW_ZEALAND = 4, "New Zealand (NZ)"
    JAPAN = 5, "Japan (JP)"
    CHINA = 6, "China (CH)"
    ASIA = 7, "Asia (AS)"
    WORLDWIDE = 8, "Worldwide"


class SocialMetricCategory(CodedEnum):
    FOLLOWS = 1, "Follows"
    LIKES = 2, "Likes"
    HATES = 3, "Hates"
    SHARES = 4, "Shares"
    VIEWS = 5, "Views"
    COMMENTS = 6, "Comments"


class SpeciesCode(CodedEnum):
    HUMAN = 1, "Human"
    ALIEN = 2, "Alien"
    ANIMAL = 3, "Animal"
    ANDROID = 4, "Android"
    UNKNOWN = 5, "Unknown"


class TestDummyEnum(CodedEnum):
    __test__ = False

    ENUM1 = 1, "Enum1"
    ENUM2 = 2, "Enum2"


class VersionFeatureCategory(CodedEnum):
    BOOLEAN = 0, "Boolean"
    DESCRIPTION = 1, "Description"


class VersionFeatureInclusion(CodedEnum):
    NOT_INCLUDED = 0, "Not Included"
    INCLUDED = 1, "Included"
    PREORDER_ONLY = 2, "Preorder Only"


class WebsiteCategory(CodedEnum):
    OFFICIAL = 1, "official"
    WIKIA = 2, "wikia"
    WIKIPEDIA = 3, "wikipedia"
    FACEBOOK = 4, "facebook"
    TWITTER = 5, "twitter"
    TWITCH = 6, "twitch"
    INSTAGRAM = 8, "instagram"
    YOUTUBE = 9, "youtube"
    IPHONE = 10, "iphone"
    IPAD = 11, "ipad"
    ANDROID = 12, "android"
    STEAM = 13, "steam"
    REDDIT = 14, "reddit"
    DISCORD = 15, "discord"
    GOOGLE_PLUS = 16, "google_plus"
    TUMBLR = 17, "tumblr"
    LINKEDIN = 18, "linkedin"
    PINTEREST = 19, "pinterest"
    SOUNDCLOUD = 20, "soundcloud"
