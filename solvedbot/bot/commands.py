"""
Bot command handlers.

This module contains all individual handler functions: the /problem and
/user commands, plain messages mentioning problem numbers, and inline queries.
Search failures propagate to the caller; Telegram send failures are reported
through the returned flag.
"""

import logging
import re
from typing import List

from solvedbot.bot.context import BotContext
from solvedbot.bot.messages import (
    format_problem_line,
    format_problem_listing,
    format_problem_title,
    format_user_card,
    get_no_results_message,
)
from solvedbot.bot.parser import Command
from solvedbot.services.telegram_client import (
    answer_inline_query,
    inline_article,
    send_photo,
    send_text,
)

logger = logging.getLogger(__name__)

# "#1000" or "1000번"
PROBLEM_MENTION = re.compile(r"#(\d{4,})|(\d{4,})번", re.ASCII)

# Telegram accepts at most 50 results per inline answer
MAX_INLINE_RESULTS = 50


def find_problem_numbers(text: str) -> List[str]:
    """
    Find problem numbers mentioned in free text, in order of appearance.

    Numbers are returned as written so they can be searched verbatim.

    Examples:
        >>> find_problem_numbers("#1000 and 1001번, not 999번")
        ['1000', '1001']
    """
    return [
        match.group(1) or match.group(2)
        for match in PROBLEM_MENTION.finditer(text)
    ]


async def handle_problem_command(context: BotContext, chat_id: int, message_id: int, command: Command) -> bool:
    """
    Handle /problem command - list every problem found for the query.

    Args:
        context: Bot context
        chat_id: Telegram chat ID
        message_id: Message to reply to
        command: Parsed command, its argument text is the query

    Returns:
        True if message sent successfully, False otherwise
    """
    search = await context.solved.search(command.rest)
    text = format_problem_listing(search.problems) or get_no_results_message()
    return await send_text(context.bot, chat_id, text, reply_to_message_id=message_id)


async def handle_user_command(context: BotContext, chat_id: int, message_id: int, command: Command) -> bool:
    """
    Handle /user command - show the profile card of the first user found.

    Args:
        context: Bot context
        chat_id: Telegram chat ID
        message_id: Message to reply to
        command: Parsed command, its argument text is the query

    Returns:
        True if message sent successfully, False otherwise
    """
    search = await context.solved.search(command.rest)
    if not search.users:
        return await send_text(
            context.bot, chat_id, get_no_results_message(), reply_to_message_id=message_id
        )

    user = search.users[0]
    photo_url = user.profile_image_url or context.default_profile_image
    return await send_photo(
        context.bot, chat_id, photo_url, format_user_card(user), reply_to_message_id=message_id
    )


async def handle_plain_message(context: BotContext, chat_id: int, message_id: int, text: str) -> bool:
    """
    Handle a non-command message - link every problem number it mentions.

    Each number is searched on its own and only an exact id match is linked.
    Nothing is sent when no problem was found.

    Args:
        context: Bot context
        chat_id: Telegram chat ID
        message_id: Message to reply to
        text: Message text

    Returns:
        True if nothing had to be sent or the reply was sent, False otherwise
    """
    lines = []
    for number in find_problem_numbers(text):
        search = await context.solved.search(number)
        problem = next((p for p in search.problems if p.id == int(number)), None)
        if problem is None:
            logger.debug(f"No exact match for problem {number}")
            continue
        lines.append(format_problem_line(problem))

    if not lines:
        return True
    return await send_text(context.bot, chat_id, "\n".join(lines), reply_to_message_id=message_id)


async def handle_inline_query(context: BotContext, inline_query_id: str, query: str) -> bool:
    """
    Handle an inline query - offer every problem and user found as a result.

    Args:
        context: Bot context
        inline_query_id: Id of the inline query
        query: Text typed by the user

    Returns:
        True if nothing had to be answered or the answer was accepted, False otherwise
    """
    if not query.strip():
        logger.debug(f"Ignoring blank inline query {inline_query_id}")
        return True

    search = await context.solved.search(query)
    results = [
        inline_article(f"problem-{problem.id}", format_problem_title(problem), format_problem_line(problem))
        for problem in search.problems
    ]
    results.extend(
        inline_article(f"user-{user.user_id}", user.user_id, format_user_card(user))
        for user in search.users
    )
    return await answer_inline_query(context.bot, inline_query_id, results[:MAX_INLINE_RESULTS])
