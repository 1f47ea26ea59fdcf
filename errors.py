"""
Exception types raised by the song library and its settings loader.

Each error also derives from the closest built-in exception so callers that
only know about ValueError / FileNotFoundError still catch them.
"""


class SongSearcherError(Exception):
    """Base class for all song searcher errors."""


class InvalidSongError(SongSearcherError, ValueError):
    """A song cannot be built: a required text field is empty or the row is short."""


class SourceNotFoundError(SongSearcherError, FileNotFoundError):
    """The songs data file cannot be opened."""


class MalformedNumericFieldError(SongSearcherError, ValueError):
    """The year or danceability column does not hold a number."""


class InvalidThresholdError(SongSearcherError, ValueError):
    """A negative danceability threshold was requested."""


class ConfigError(SongSearcherError):
    """The user settings file is not usable."""


class SourceEncodingError(SongSearcherError, ValueError):
    """A line of the songs data file cannot be decoded."""
