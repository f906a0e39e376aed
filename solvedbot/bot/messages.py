"""
Message templates for bot responses.

This module contains all message templates used by the bot commands.
Every template returns MarkdownV2 text; values coming from solved.ac are
escaped here, at the point they are interpolated.
"""

from typing import Iterable

from solvedbot.bot.markdown import escape_markdown
from solvedbot.models.solved import Problem, User


def get_no_results_message() -> str:
    """Get message for a search without results."""
    return "검색 결과가 없습니다\\."


def format_problem_line(problem: Problem) -> str:
    """Format a problem as a single link line."""
    return (
        f"[{problem.level} \\| \\#{problem.id} \\- {escape_markdown(problem.caption)}]"
        f"({problem.href})"
    )


def format_problem_listing(problems: Iterable[Problem]) -> str:
    """
    Format problems one per line.

    Returns:
        Joined lines, empty string when there are no problems
    """
    return "\n".join(format_problem_line(problem) for problem in problems)


def format_problem_title(problem: Problem) -> str:
    """Get plain title of a problem for inline results."""
    return f"{problem.id}번 - {problem.caption}"


def format_user_card(user: User) -> str:
    """
    Format a user profile card.

    The user id is escaped for display but used as is inside the
    profile links.
    """
    user_id = escape_markdown(user.user_id)
    decoration = escape_markdown(user.class_decoration.suffix)
    return (
        f"*{user_id} \\({user.rank}위\\)*\n"
        f"__{user.level}, Class {user.user_class}{decoration}__\n"
        f"{escape_markdown(user.bio)}\n"
        f"*{user.solved:,}문제* 해결 \\| *경험치* {user.exp:,}\n"
        f"▸ [solved\\.ac](https://solved.ac/profile/{user.user_id}) "
        f"▸ [acmicpc\\.net](https://acmicpc.net/user/{user.user_id})"
    )
