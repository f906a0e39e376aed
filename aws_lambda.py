#!/usr/bin/env python3
"""
AWS Lambda entry point for the solved.ac Telegram bot webhook.

API Gateway forwards each Telegram webhook call here. The update is decoded,
dispatched to the bot handlers and always acknowledged with HTTP 200 so that
Telegram does not redeliver updates whose handling failed.

Required Environment Variables:
    - TELEGRAM_BOT_TOKEN: Telegram bot token

Optional Environment Variables:
    - SOLVED_SEARCH_URL: solved.ac search endpoint
    - SOLVED_DEFAULT_PROFILE_IMAGE: Photo used for users without a profile image
    - LOG_LEVEL: Logging level (defaults to INFO)
"""

import asyncio
import json
import logging
import sys
import traceback
from typing import Any, Dict

from telegram import Bot, Update

from solvedbot.bot import BotContext, handle_update
from solvedbot.config import Config, config
from solvedbot.services import SolvedClient

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    stream=sys.stdout,
    force=True,
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)


def _json_response(status_code: int, payload: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {
            "Content-Type": "application/json"
        },
        "body": json.dumps(payload)
    }


def _is_api_gateway_event(event: Dict[str, Any]) -> bool:
    """
    Check if the event is from API Gateway.

    Args:
        event: Lambda event object

    Returns:
        True if event is from API Gateway, False otherwise
    """
    return (
        "httpMethod" in event or
        "requestContext" in event or
        ("path" in event and "body" in event)
    )


async def process_update(update_data: Dict[str, Any]) -> bool:
    """
    Decode a Telegram update and handle it.

    Args:
        update_data: Decoded JSON body of the webhook call

    Returns:
        True if the update was handled, False otherwise
    """
    async with Bot(token=config.TELEGRAM_BOT_TOKEN) as bot, SolvedClient() as solved:
        update = Update.de_json(update_data, bot)
        if update is None:
            logger.warning("Webhook body is not a Telegram update")
            return False
        context = BotContext(bot=bot, solved=solved)
        return await handle_update(context, update)


def handle_webhook_update(event: Dict[str, Any]) -> Dict[str, Any]:
    """
    Handle webhook update from API Gateway.

    Args:
        event: API Gateway event object

    Returns:
        API Gateway response dictionary
    """
    try:
        # API Gateway sends body as JSON string at top level, custom setups nest it in requestContext
        body = event.get("body") or event.get("requestContext", {}).get("body", "{}")
        if isinstance(body, str):
            update_data = json.loads(body)
        else:
            update_data = body

        if not isinstance(update_data, dict) or "update_id" not in update_data:
            logger.warning("Webhook body does not contain an update")
            return _json_response(200, {"ok": True, "message": "No update in body"})

        logger.info(f"Processing webhook update {update_data['update_id']}")
        success = asyncio.run(process_update(update_data))

        return _json_response(200, {
            "ok": success,
            "message": "Update processed" if success else "Failed to process update"
        })

    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse webhook body: {e}")
        return _json_response(400, {"ok": False, "error": "Invalid JSON in request body"})
    except Exception as e:
        logger.error(f"Error handling webhook update: {e}")
        logger.error(traceback.format_exc())
        return _json_response(500, {"ok": False, "error": str(e)})


def lambda_handler(event, context):
    try:
        Config.validate()
    except ValueError as e:
        logger.error(f"Configuration validation failed: {e}")
        return _json_response(500, {"ok": False, "error": str(e)})

    if not _is_api_gateway_event(event):
        logger.warning("Unknown event type - expected an API Gateway webhook call")
        return _json_response(400, {"ok": False, "error": "Unsupported event"})

    logger.info("Detected API Gateway event - processing webhook")
    return handle_webhook_update(event)
