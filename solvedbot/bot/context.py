"""Per-invocation collaborators passed to the command handlers."""

from dataclasses import dataclass

from telegram import Bot

from solvedbot.config import config
from solvedbot.services.solved_client import SolvedClient


@dataclass(frozen=True)
class BotContext:
    """Telegram bot and solved.ac client shared by the handlers of one update."""
    bot: Bot
    solved: SolvedClient
    default_profile_image: str = config.SOLVED_DEFAULT_PROFILE_IMAGE
