"""
Command parsing utilities.

This module handles parsing of Telegram bot commands from message text.
"""

import re
from dataclasses import dataclass
from typing import Iterator

from solvedbot.errors import NotACommand

COMMAND_SIGIL = "/"

_WHITESPACE = re.compile(r"\s")
_TOKEN = re.compile(r"\S+")


@dataclass(frozen=True)
class Command:
    """Parsed command: label and the argument text left after it."""
    label: str
    rest: str

    def tokens(self) -> Iterator[str]:
        """Lazily yield whitespace-delimited arguments; each call starts over."""
        return (match.group(0) for match in _TOKEN.finditer(self.rest))

    def __iter__(self) -> Iterator[str]:
        return self.tokens()


def parse_command(message_text: str) -> Command:
    """
    Parse command from message text.
    
    Args:
        message_text: Message text from Telegram
        
    Returns:
        Parsed Command
        
    Raises:
        NotACommand: If the text does not start with a slash
        
    Examples:
        >>> parse_command("/problem 1000 abc")
        Command(label='problem', rest='1000 abc')
        >>> parse_command("/user")
        Command(label='user', rest='')
    """
    if not message_text or not message_text.startswith(COMMAND_SIGIL):
        raise NotACommand(message_text)
    
    delim = _WHITESPACE.search(message_text)
    if delim is None:
        return Command(label=message_text[1:], rest="")
    
    return Command(
        label=message_text[1:delim.start()],
        rest=message_text[delim.end():].lstrip(),
    )
