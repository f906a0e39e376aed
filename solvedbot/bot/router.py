"""
Command routing logic.

This module resolves command labels and routes updates to their handlers.

Labels are matched against the command words as subsequences, so any
abbreviation that keeps the letters in order works ("p", "prob", "pm" all
mean "problem"). Command words are tried in the order of COMMANDS and the
first match wins. Commands addressed to another bot ("/problem@other_bot")
are ignored.
"""

import logging
from enum import Enum
from typing import Optional, Tuple

from telegram import Update

from solvedbot.bot.context import BotContext
from solvedbot.bot.commands import (
    handle_inline_query,
    handle_plain_message,
    handle_problem_command,
    handle_user_command,
)
from solvedbot.bot.parser import COMMAND_SIGIL, parse_command
from solvedbot.errors import SolvedBotError

logger = logging.getLogger(__name__)


class CommandKind(Enum):
    PROBLEM = "problem"
    USER = "user"


# Priority order
COMMANDS: Tuple[Tuple[str, CommandKind], ...] = (
    ("problem", CommandKind.PROBLEM),
    ("user", CommandKind.USER),
)

_HANDLERS = {
    CommandKind.PROBLEM: handle_problem_command,
    CommandKind.USER: handle_user_command,
}


def _is_subsequence(label: str, word: str) -> bool:
    remaining = iter(word)
    return all(char in remaining for char in label)


def resolve_command(label: str, bot_username: Optional[str] = None) -> Optional[CommandKind]:
    """
    Resolve a command label.

    Args:
        label: Command label without the slash, may end with "@botname"
        bot_username: Username of this bot; commands addressed to another
            bot resolve to nothing

    Returns:
        Matching CommandKind, or None if the label matches no command

    Examples:
        >>> resolve_command("pr")
        <CommandKind.PROBLEM: 'problem'>
        >>> resolve_command("problem@other_bot", "solved_bot") is None
        True
    """
    label, _, addressee = label.partition("@")
    if addressee and bot_username and addressee.lower() != bot_username.lower():
        return None
    label = label.lower()
    if not label:
        return None
    for word, kind in COMMANDS:
        if _is_subsequence(label, word):
            return kind
    return None


async def process_command(context: BotContext, chat_id: int, message_id: int, message_text: str) -> bool:
    """
    Process bot commands and route to appropriate handler.

    Args:
        context: Bot context
        chat_id: Telegram chat ID
        message_id: Message to reply to
        message_text: Message text from user, starting with a slash

    Returns:
        True if command processed successfully, False otherwise

    Raises:
        SolvedBotError: If the search behind the command failed
    """
    command = parse_command(message_text)
    kind = resolve_command(command.label, context.bot.username)

    if kind is None:
        logger.info(f"Unknown command {command.label!r} from chat_id {chat_id}, ignoring")
        return True

    logger.info(f"Routing /{command.label} to {kind.value} handler, query={command.rest!r}")
    return await _HANDLERS[kind](context, chat_id, message_id, command)


def _trigger_text(update: Update) -> str:
    if update.inline_query is not None:
        return update.inline_query.query
    if update.message is not None and update.message.text is not None:
        return update.message.text
    return ""


async def _dispatch(context: BotContext, update: Update) -> bool:
    if update.inline_query is not None:
        query = update.inline_query
        return await handle_inline_query(context, query.id, query.query)

    message = update.message
    if message is None or message.text is None:
        return True

    if message.forward_origin is not None:
        logger.info(f"Ignoring forwarded message in chat_id {message.chat_id}")
        return True

    if message.text.startswith(COMMAND_SIGIL):
        return await process_command(context, message.chat_id, message.message_id, message.text)
    return await handle_plain_message(context, message.chat_id, message.message_id, message.text)


async def handle_update(context: BotContext, update: Update) -> bool:
    """
    Handle one Telegram update.

    Failures abort this update only: they are logged together with the text
    that triggered them and no reply is sent.

    Args:
        context: Bot context
        update: Telegram update

    Returns:
        True if the update was handled, False if handling failed
    """
    try:
        success = await _dispatch(context, update)
    except SolvedBotError as e:
        logger.error(f"Error handling update {update.update_id} ({_trigger_text(update)!r}): {e}")
        return False

    if not success:
        logger.warning(f"Failed to reply to update {update.update_id} ({_trigger_text(update)!r})")
    return success
