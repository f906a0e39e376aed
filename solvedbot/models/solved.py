"""
solved.ac search data models.

This module contains the search response models and the decoders for the
two fields solved.ac encodes in a non-obvious way: levels and counts.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional

from solvedbot.errors import DecodeError, InvalidLevel, MalformedCount

MAX_LEVEL = 30
GRADES_PER_TIER = 5

_ROMAN_GRADES = {1: "I", 2: "II", 3: "III", 4: "IV", 5: "V"}


class Tier(Enum):
    """Rating tier, lowest first."""
    BRONZE = "Bronze"
    SILVER = "Silver"
    GOLD = "Gold"
    PLATINUM = "Platinum"
    DIAMOND = "Diamond"
    RUBY = "Ruby"

    def __str__(self) -> str:
        return self.value


_TIERS = list(Tier)


class ClassDecoration(IntEnum):
    """Adornment shown after a user's class number."""
    NORMAL = 0
    SILVER = 1
    GOLD = 2

    @property
    def suffix(self) -> str:
        return {
            ClassDecoration.NORMAL: "",
            ClassDecoration.SILVER: "+",
            ClassDecoration.GOLD: "++",
        }[self]


@dataclass(frozen=True)
class Level:
    """Tier and grade of a problem or user; tier is None when unranked."""
    tier: Optional[Tier] = None
    grade: Optional[int] = None

    @property
    def is_ranked(self) -> bool:
        return self.tier is not None

    def __str__(self) -> str:
        if not self.is_ranked:
            return "Unranked"
        return f"{self.tier} {_ROMAN_GRADES[self.grade]}"


UNRANKED = Level()


def decode_level(raw: Any) -> Level:
    """
    Decode a solved.ac level code.

    Args:
        raw: Level code, 0 for unranked, 1 (Bronze V) to 30 (Ruby I)

    Returns:
        Decoded Level

    Raises:
        InvalidLevel: If the code is not an integer in 0..30

    Examples:
        >>> str(decode_level(6))
        'Silver V'
        >>> str(decode_level(0))
        'Unranked'
    """
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise InvalidLevel(raw)
    if raw < 0 or raw > MAX_LEVEL:
        raise InvalidLevel(raw)
    if raw == 0:
        return UNRANKED
    tier = _TIERS[(raw - 1) // GRADES_PER_TIER]
    grade = GRADES_PER_TIER - (raw - 1) % GRADES_PER_TIER
    return Level(tier=tier, grade=grade)


def decode_count(raw: Any) -> int:
    """
    Decode a count field.

    solved.ac sometimes answers a count with an empty list instead of 0,
    an empty list therefore means zero.

    Args:
        raw: Non-negative integer or empty list

    Returns:
        The count

    Raises:
        MalformedCount: For anything else
    """
    if isinstance(raw, list):
        if raw:
            raise MalformedCount(raw)
        return 0
    if isinstance(raw, bool) or not isinstance(raw, int) or raw < 0:
        raise MalformedCount(raw)
    return raw


def decode_class_decoration(raw: Any) -> ClassDecoration:
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise DecodeError(f"unknown class decoration: {raw!r}")
    try:
        return ClassDecoration(raw)
    except ValueError as e:
        raise DecodeError(f"unknown class decoration: {raw!r}") from e


def _string(data: Dict[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise DecodeError(f"{key} must be a string, found: {value!r}")
    return value


def _optional_string(data: Dict[str, Any], key: str) -> Optional[str]:
    if data.get(key) is None:
        return None
    return _string(data, key)


def _integer(data: Dict[str, Any], key: str, minimum: int = 0) -> int:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise DecodeError(f"{key} must be an integer >= {minimum}, found: {value!r}")
    return value


@dataclass(frozen=True)
class AutoComplete:
    """Autocomplete suggestion."""
    caption: str
    description: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AutoComplete":
        return cls(caption=_string(data, "caption"), description=_string(data, "description"))


@dataclass(frozen=True)
class Problem:
    """Model for a single problem."""
    id: int
    title: str
    level: Level
    solved: int
    caption: str
    description: str
    href: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Problem":
        return cls(
            id=_integer(data, "id", minimum=1),
            title=_string(data, "title"),
            level=decode_level(data["level"]),
            solved=_integer(data, "solved"),
            caption=_string(data, "caption"),
            description=_string(data, "description"),
            href=_string(data, "href"),
        )


@dataclass(frozen=True)
class User:
    """Model for a single user."""
    user_id: str
    bio: str
    profile_image_url: Optional[str]
    solved: int
    exp: int
    level: Level
    user_class: int
    class_decoration: ClassDecoration
    vote_count: int
    rank: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        return cls(
            user_id=_string(data, "user_id"),
            bio=_string(data, "bio"),
            profile_image_url=_optional_string(data, "profile_image_url"),
            solved=_integer(data, "solved"),
            exp=_integer(data, "exp"),
            level=decode_level(data["level"]),
            user_class=_integer(data, "class"),
            class_decoration=decode_class_decoration(data["class_decoration"]),
            vote_count=_integer(data, "vote_count"),
            rank=_integer(data, "rank", minimum=1),
        )


@dataclass(frozen=True)
class Algorithm:
    """Algorithm tag."""
    tag_name: str
    full_name_en: str
    full_name_ko: str
    problem_count: int
    caption: str
    description: str
    href: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Algorithm":
        return cls(
            tag_name=_string(data, "tag_name"),
            full_name_en=_string(data, "full_name_en"),
            full_name_ko=_string(data, "full_name_ko"),
            problem_count=decode_count(data["problem_count"]),
            caption=_string(data, "caption"),
            description=_string(data, "description"),
            href=_string(data, "href"),
        )


@dataclass(frozen=True)
class Wiki:
    """Wiki article."""
    title: str
    caption: str
    description: str
    href: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Wiki":
        return cls(
            title=_string(data, "title"),
            caption=_string(data, "caption"),
            description=_string(data, "description"),
            href=_string(data, "href"),
        )


@dataclass(frozen=True)
class Search:
    """Model for a search result."""
    autocomplete: List[AutoComplete] = field(default_factory=list)
    problems: List[Problem] = field(default_factory=list)
    problem_count: int = 0
    users: List[User] = field(default_factory=list)
    user_count: int = 0
    algorithms: List[Algorithm] = field(default_factory=list)
    algorithm_count: int = 0
    wiki_articles: List[Wiki] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Search":
        """
        Build a Search from the decoded `result` object of a response.

        Raises:
            DecodeError: If a field is missing or has the wrong shape
        """
        try:
            return cls(
                autocomplete=[AutoComplete.from_dict(item) for item in data["autocomplete"]],
                problems=[Problem.from_dict(item) for item in data["problems"]],
                problem_count=decode_count(data["problem_count"]),
                users=[User.from_dict(item) for item in data["users"]],
                user_count=decode_count(data["user_count"]),
                algorithms=[Algorithm.from_dict(item) for item in data["algorithms"]],
                algorithm_count=decode_count(data["algorithm_count"]),
                wiki_articles=[Wiki.from_dict(item) for item in data["wiki_articles"]],
            )
        except DecodeError:
            raise
        except (KeyError, TypeError, ValueError) as e:
            raise DecodeError(f"Unexpected search result shape: {e!r}") from e
