"""
Configuration module.

This module provides configuration management for the application.
"""

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from solvedbot.config.settings import Config, DEFAULT_PROFILE_IMAGE, DEFAULT_SEARCH_URL

# Create a global config instance
config = Config()

__all__ = ["Config", "config", "DEFAULT_PROFILE_IMAGE", "DEFAULT_SEARCH_URL"]
