"""
Bot update handling module.

This module contains all Telegram bot update processing logic including:
- Command parsing
- Command routing
- Message templates
- Command handlers
"""

from solvedbot.bot.context import BotContext
from solvedbot.bot.parser import Command, parse_command
from solvedbot.bot.router import CommandKind, handle_update, process_command, resolve_command

__all__ = [
    "BotContext",
    "Command",
    "CommandKind",
    "handle_update",
    "parse_command",
    "process_command",
    "resolve_command",
]
