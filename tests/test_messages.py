"""Unit tests for reply templates."""

from solvedbot.bot.messages import (
    format_problem_line,
    format_problem_listing,
    format_problem_title,
    format_user_card,
    get_no_results_message,
)
from solvedbot.models.solved import Problem, User


def test_format_problem_line(problem_data):
    problem = Problem.from_dict(problem_data(caption="A+B (easy)."))

    assert format_problem_line(problem) == (
        "[Bronze V \\| \\#1000 \\- A\\+B \\(easy\\)\\.](https://www.acmicpc.net/problem/1000)"
    )


def test_format_problem_listing_joins_lines(problem_data):
    problems = [
        Problem.from_dict(problem_data()),
        Problem.from_dict(problem_data(id=1001, caption="A-B", level=0, href="https://www.acmicpc.net/problem/1001")),
    ]

    lines = format_problem_listing(problems).split("\n")

    assert len(lines) == 2
    assert lines[1] == "[Unranked \\| \\#1001 \\- A\\-B](https://www.acmicpc.net/problem/1001)"


def test_format_problem_listing_empty():
    assert format_problem_listing([]) == ""


def test_format_problem_title(problem_data):
    assert format_problem_title(Problem.from_dict(problem_data())) == "1000번 - A+B"


def test_no_results_message():
    assert get_no_results_message() == "검색 결과가 없습니다\\."


def test_format_user_card(user_data):
    user = User.from_dict(user_data(user_id="some_one", bio="Hi!"))

    assert format_user_card(user) == (
        "*some\\_one \\(1위\\)*\n"
        "__Ruby I, Class 10\\+\\+__\n"
        "Hi\\!\n"
        "*5,678문제* 해결 \\| *경험치* 1,234,567,890\n"
        "▸ [solved\\.ac](https://solved.ac/profile/some_one) "
        "▸ [acmicpc\\.net](https://acmicpc.net/user/some_one)"
    )


def test_format_user_card_normal_class(user_data):
    user = User.from_dict(user_data(class_decoration=0, **{"class": 3}))

    assert "Class 3__" in format_user_card(user)
