"""Shared fixtures: solved.ac payloads and Telegram doubles."""

import os
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

os.environ.setdefault("TELEGRAM_BOT_TOKEN", "123456:TEST")

from solvedbot.bot.context import BotContext
from solvedbot.models.solved import Search


def _problem_data(**overrides):
    data = {
        "id": 1000,
        "title": "A+B",
        "level": 1,
        "solved": 150000,
        "caption": "A+B",
        "description": "두 정수 A와 B를 입력받은 다음, A+B를 출력하는 프로그램을 작성하시오.",
        "href": "https://www.acmicpc.net/problem/1000",
    }
    data.update(overrides)
    return data


def _user_data(**overrides):
    data = {
        "user_id": "koosaga",
        "bio": "Hello.",
        "profile_image_url": "https://static.solved.ac/uploads/profile/koosaga.png",
        "solved": 5678,
        "exp": 1234567890,
        "level": 30,
        "class": 10,
        "class_decoration": 2,
        "vote_count": 321,
        "rank": 1,
    }
    data.update(overrides)
    return data


def _search_data(problems=(), users=(), **overrides):
    data = {
        "autocomplete": [],
        "problems": list(problems),
        "problem_count": len(problems),
        "users": list(users),
        "user_count": len(users),
        "algorithms": [],
        "algorithm_count": [],
        "wiki_articles": [],
    }
    data.update(overrides)
    return data


@pytest.fixture
def problem_data():
    return _problem_data


@pytest.fixture
def user_data():
    return _user_data


@pytest.fixture
def search_data():
    return _search_data


@pytest.fixture
def bot():
    bot = AsyncMock()
    bot.username = "solved_bot"
    return bot


@pytest.fixture
def solved():
    client = AsyncMock()
    client.search.return_value = Search()
    return client


@pytest.fixture
def context(bot, solved):
    return BotContext(
        bot=bot,
        solved=solved,
        default_profile_image="https://static.solved.ac/misc/360x360/default_profile.png",
    )


@pytest.fixture
def message_update():
    def make(text, forwarded=False):
        message = SimpleNamespace(
            text=text,
            chat_id=427988146,
            message_id=1333,
            forward_origin=object() if forwarded else None,
        )
        return SimpleNamespace(update_id=1, message=message, inline_query=None)
    return make


@pytest.fixture
def inline_update():
    def make(query):
        inline_query = SimpleNamespace(id="inline-1", query=query)
        return SimpleNamespace(update_id=2, message=None, inline_query=inline_query)
    return make
