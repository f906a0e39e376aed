"""
Application settings and configuration.

This module defines the configuration class for managing environment variables.
"""

import os

DEFAULT_SEARCH_URL = "https://api.solved.ac/v2/search/recommendations.json"
DEFAULT_PROFILE_IMAGE = "https://static.solved.ac/misc/360x360/default_profile.png"


class Config:
    """Configuration class for managing environment variables."""
    
    TELEGRAM_BOT_TOKEN: str = os.getenv("TELEGRAM_BOT_TOKEN", "")
    SOLVED_SEARCH_URL: str = os.getenv("SOLVED_SEARCH_URL", DEFAULT_SEARCH_URL)
    SOLVED_DEFAULT_PROFILE_IMAGE: str = os.getenv("SOLVED_DEFAULT_PROFILE_IMAGE", DEFAULT_PROFILE_IMAGE)
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    
    @classmethod
    def validate(cls) -> bool:
        """
        Validate configuration.
        
        Checks that all required environment variables are set.
        
        Returns:
            True if validation succeeds
            
        Raises:
            ValueError: If any required environment variables are missing
        """
        required = ["TELEGRAM_BOT_TOKEN"]
        missing = [var for var in required if not getattr(cls, var)]
        if missing:
            raise ValueError(f"Missing required environment variables: {', '.join(missing)}")
        return True
