"""
Services layer.

This module contains the clients the bot talks to:
- solved.ac search client
- Telegram client for sending replies
"""

from solvedbot.services.solved_client import SolvedClient
from solvedbot.services.telegram_client import (
    answer_inline_query,
    inline_article,
    send_photo,
    send_text,
)

__all__ = [
    "SolvedClient",
    "answer_inline_query",
    "inline_article",
    "send_photo",
    "send_text",
]
