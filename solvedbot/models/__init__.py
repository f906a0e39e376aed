"""
Data models for the application.

This module contains all data models used throughout the application.
"""

from solvedbot.models.solved import (
    UNRANKED,
    Algorithm,
    AutoComplete,
    ClassDecoration,
    Level,
    Problem,
    Search,
    Tier,
    User,
    Wiki,
    decode_count,
    decode_level,
)

__all__ = [
    "UNRANKED",
    "Algorithm",
    "AutoComplete",
    "ClassDecoration",
    "Level",
    "Problem",
    "Search",
    "Tier",
    "User",
    "Wiki",
    "decode_count",
    "decode_level",
]
