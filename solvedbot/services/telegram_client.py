"""
Telegram bot client service.

This module provides functionality for replying via Telegram bot API.
All text is sent as MarkdownV2 with link previews disabled.
"""

import logging
from typing import List, Optional

from telegram import (
    Bot,
    InlineQueryResultArticle,
    InputTextMessageContent,
    LinkPreviewOptions,
    ReplyParameters,
)
from telegram.constants import ParseMode
from telegram.error import TelegramError

logger = logging.getLogger(__name__)

NO_PREVIEW = LinkPreviewOptions(is_disabled=True)


def _reply_to(message_id: Optional[int]) -> Optional[ReplyParameters]:
    if message_id is None:
        return None
    return ReplyParameters(message_id=message_id)


def inline_article(result_id: str, title: str, text: str) -> InlineQueryResultArticle:
    """
    Build an inline query result carrying MarkdownV2 text.

    Args:
        result_id: Unique id of the result within one answer
        title: Title shown in the result list
        text: MarkdownV2 message text sent when the result is chosen

    Returns:
        InlineQueryResultArticle
    """
    content = InputTextMessageContent(
        text,
        parse_mode=ParseMode.MARKDOWN_V2,
        link_preview_options=NO_PREVIEW,
    )
    return InlineQueryResultArticle(id=result_id, title=title, input_message_content=content)


async def send_text(bot: Bot, chat_id: int, text: str, reply_to_message_id: Optional[int] = None) -> bool:
    """
    Send a text message to a chat.

    Args:
        bot: Telegram bot
        chat_id: Telegram chat ID to send message to
        text: MarkdownV2 message text
        reply_to_message_id: Message to reply to, if any

    Returns:
        True if message sent successfully, False otherwise
    """
    try:
        await bot.send_message(
            chat_id=chat_id,
            text=text,
            parse_mode=ParseMode.MARKDOWN_V2,
            link_preview_options=NO_PREVIEW,
            reply_parameters=_reply_to(reply_to_message_id),
        )
        logger.info(f"Successfully sent message to chat {chat_id}")
        return True
    except TelegramError as e:
        logger.error(f"Telegram error sending message to chat {chat_id}: {e}")
        return False


async def send_photo(
    bot: Bot,
    chat_id: int,
    photo_url: str,
    caption: str,
    reply_to_message_id: Optional[int] = None
) -> bool:
    """
    Send a photo with a MarkdownV2 caption to a chat.

    Args:
        bot: Telegram bot
        chat_id: Telegram chat ID to send photo to
        photo_url: URL of the photo
        caption: MarkdownV2 caption
        reply_to_message_id: Message to reply to, if any

    Returns:
        True if photo sent successfully, False otherwise
    """
    try:
        await bot.send_photo(
            chat_id=chat_id,
            photo=photo_url,
            caption=caption,
            parse_mode=ParseMode.MARKDOWN_V2,
            reply_parameters=_reply_to(reply_to_message_id),
        )
        logger.info(f"Successfully sent photo to chat {chat_id}")
        return True
    except TelegramError as e:
        logger.error(f"Telegram error sending photo to chat {chat_id}: {e}")
        return False


async def answer_inline_query(bot: Bot, inline_query_id: str, results: List[InlineQueryResultArticle]) -> bool:
    """
    Answer an inline query.

    Args:
        bot: Telegram bot
        inline_query_id: Id of the query being answered
        results: Selectable results

    Returns:
        True if the answer was accepted, False otherwise
    """
    try:
        await bot.answer_inline_query(inline_query_id=inline_query_id, results=results)
        logger.info(f"Answered inline query {inline_query_id} with {len(results)} results")
        return True
    except TelegramError as e:
        logger.error(f"Telegram error answering inline query {inline_query_id}: {e}")
        return False
