"""Exception types raised by newsgrid."""


class NewsgridError(Exception):
    """Base class for all newsgrid errors."""


class ConfigError(NewsgridError):
    """Configuration file is unreadable or invalid."""


class FeedError(NewsgridError):
    """The top stories feed could not be fetched or decoded.

    Fatal to a pipeline run.
    """


class DocumentFetchError(NewsgridError):
    """An article page could not be downloaded."""


class DocumentParseError(NewsgridError):
    """An article page could not be parsed into a markup tree."""


class TagExtractionError(NewsgridError):
    """Tags could not be derived from article text."""
