"""Unit tests for command resolution and update dispatch."""

import pytest

from solvedbot.bot.router import CommandKind, handle_update, process_command, resolve_command
from solvedbot.errors import EmptySearchResult, InvalidLevel
from solvedbot.models.solved import Search


@pytest.mark.parametrize(
    "label, expected",
    [
        ("problem", CommandKind.PROBLEM),
        ("pr", CommandKind.PROBLEM),
        ("p", CommandKind.PROBLEM),
        ("pm", CommandKind.PROBLEM),
        ("PROB", CommandKind.PROBLEM),
        ("problem@solved_bot", CommandKind.PROBLEM),
        ("user", CommandKind.USER),
        ("u", CommandKind.USER),
        ("ur", CommandKind.USER),
        # both words contain "e", the first command wins
        ("e", CommandKind.PROBLEM),
    ],
)
def test_resolve_command(label, expected):
    assert resolve_command(label) is expected


@pytest.mark.parametrize("label", ["xyz", "", "problems", "mp", "users", "@solved_bot"])
def test_resolve_command_no_match(label):
    assert resolve_command(label) is None


@pytest.mark.asyncio
async def test_unknown_command_is_ignored(context, bot, solved):
    assert await process_command(context, 1, 2, "/xyz 1000") is True

    solved.search.assert_not_awaited()
    bot.send_message.assert_not_awaited()


@pytest.mark.asyncio
async def test_abbreviated_command_runs_search(context, solved):
    await process_command(context, 1, 2, "/pr  A+B   easy")

    solved.search.assert_awaited_once_with("A+B   easy")


@pytest.mark.asyncio
async def test_handle_update_routes_commands(context, bot, solved, message_update):
    assert await handle_update(context, message_update("/problem A+B")) is True

    solved.search.assert_awaited_once_with("A+B")
    bot.send_message.assert_awaited_once()


@pytest.mark.asyncio
async def test_handle_update_routes_plain_text(context, bot, solved, message_update, search_data, problem_data):
    solved.search.return_value = Search.from_dict(search_data(problems=[problem_data()]))

    assert await handle_update(context, message_update("#1000 풀이")) is True

    solved.search.assert_awaited_once_with("1000")
    bot.send_message.assert_awaited_once()


@pytest.mark.asyncio
async def test_handle_update_ignores_forwarded_messages(context, bot, solved, message_update):
    assert await handle_update(context, message_update("#1000", forwarded=True)) is True

    solved.search.assert_not_awaited()
    bot.send_message.assert_not_awaited()


@pytest.mark.asyncio
async def test_handle_update_ignores_messages_without_text(context, solved, message_update):
    assert await handle_update(context, message_update(None)) is True

    solved.search.assert_not_awaited()


@pytest.mark.asyncio
async def test_handle_update_routes_inline_queries(context, bot, solved, inline_update):
    assert await handle_update(context, inline_update("A+B")) is True

    solved.search.assert_awaited_once_with("A+B")
    bot.answer_inline_query.assert_awaited_once()


@pytest.mark.asyncio
async def test_handle_update_drops_failed_search(context, bot, solved, message_update, caplog):
    solved.search.side_effect = EmptySearchResult("nobody")

    assert await handle_update(context, message_update("/user nobody")) is False

    bot.send_message.assert_not_awaited()
    bot.send_photo.assert_not_awaited()
    assert "/user nobody" in caplog.text


@pytest.mark.asyncio
async def test_handle_update_drops_decode_failure(context, bot, solved, message_update):
    solved.search.side_effect = InvalidLevel(31)

    assert await handle_update(context, message_update("1000번")) is False

    bot.send_message.assert_not_awaited()


@pytest.mark.parametrize(
    "label, expected",
    [
        ("problem@solved_bot", CommandKind.PROBLEM),
        ("u@Solved_Bot", CommandKind.USER),
        ("problem@other_bot", None),
        ("user@other_bot", None),
    ],
)
def test_resolve_command_checks_addressee(label, expected):
    assert resolve_command(label, "solved_bot") is expected


@pytest.mark.asyncio
async def test_command_for_another_bot_is_ignored(context, bot, solved):
    assert await process_command(context, 1, 2, "/problem@other_bot 1000") is True

    solved.search.assert_not_awaited()
    bot.send_message.assert_not_awaited()


@pytest.mark.asyncio
async def test_command_addressed_to_this_bot_runs(context, solved):
    await process_command(context, 1, 2, "/problem@solved_bot 1000")

    solved.search.assert_awaited_once_with("1000")
