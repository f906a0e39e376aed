"""
Error types raised while handling an update.

Decoder failures (bad data from solved.ac) derive from DecodeError, failures of
the search request itself derive from SearchError and carry the query that
triggered them.
"""


class SolvedBotError(Exception):
    """Base class for all bot errors."""


class DecodeError(SolvedBotError):
    """Search response is not valid JSON or does not have the expected shape."""


class InvalidLevel(DecodeError):
    """Level code outside of 0..30."""

    def __init__(self, raw):
        super().__init__(f"level out of range: {raw!r}")
        self.raw = raw


class MalformedCount(DecodeError):
    """Count field that is neither a non-negative integer nor an empty list."""

    def __init__(self, raw):
        super().__init__(f"expected an integer or an empty list, found: {raw!r}")
        self.raw = raw


class SearchError(SolvedBotError):
    """Base class for failed solved.ac searches."""

    def __init__(self, query: str, message: str):
        super().__init__(message)
        self.query = query


class TransportError(SearchError):
    """solved.ac could not be reached or answered with an error status."""

    def __init__(self, query: str, reason: str):
        super().__init__(query, f"Could not reach solved.ac for query {query!r}: {reason}")


class EmptySearchResult(SearchError):
    """solved.ac answered with an envelope that has no result."""

    def __init__(self, query: str):
        super().__init__(query, f"Unsuccessful solved.ac search: {query}")


class NotACommand(SolvedBotError):
    """Text does not start with the command sigil."""

    def __init__(self, text: str):
        super().__init__(f"Command must start with a slash, found: {text}")
        self.text = text
