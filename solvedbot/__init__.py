"""Telegram bot answering problem and user lookups from solved.ac."""

__version__ = "0.1.0"
