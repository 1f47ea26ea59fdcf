"""
In-memory song library loaded from a delimited songs file.

The library keeps songs in file order and answers two questions over a full
scan: the average danceability, and which songs reach a given danceability.
Nothing is persisted; the library lives as long as the process does.
"""

import logging
import math
from collections.abc import MutableSequence
from typing import Optional

from csv_line import parse_csv_line
from errors import (
    InvalidSongError,
    InvalidThresholdError,
    MalformedNumericFieldError,
    SourceEncodingError,
    SourceNotFoundError,
)
from song import Song

logger = logging.getLogger("song_searcher.library")

# Column positions in the songs file
TITLE_COL = 0
ARTIST_COL = 1
GENRE_COL = 2
YEAR_COL = 3
DANCEABILITY_COL = 6
MIN_COLUMNS = DANCEABILITY_COL + 1


def _parse_number(raw, convert, column_name, line_no):
    """Convert a raw column value, raising MalformedNumericFieldError on failure"""
    try:
        return convert(raw)
    except ValueError as exc:
        raise MalformedNumericFieldError(
            f"Line {line_no}: {column_name} is not a number: {raw!r}"
        ) from exc


def song_from_fields(fields, line_no=None):
    """Build a Song from the parsed columns of one data line

    Args:
        fields: Column strings as returned by parse_csv_line
        line_no: 1-based line number in the source, used in error messages

    Returns:
        Song: The song described by the row

    Raises:
        InvalidSongError: If the row is short or a text column is empty
        MalformedNumericFieldError: If year or danceability is not numeric
    """
    if len(fields) < MIN_COLUMNS:
        raise InvalidSongError(
            f"Line {line_no}: expected at least {MIN_COLUMNS} columns, got {len(fields)}"
        )

    year = _parse_number(fields[YEAR_COL], int, "year", line_no)
    danceability = _parse_number(fields[DANCEABILITY_COL], float, "danceability", line_no)

    try:
        return Song(
            fields[ARTIST_COL],
            fields[TITLE_COL],
            year,
            fields[GENRE_COL],
            danceability,
        )
    except InvalidSongError as exc:
        raise InvalidSongError(f"Line {line_no}: {exc}") from exc


class SongLibrary:
    """Ordered collection of songs plus the danceability queries.

    Any mutable sequence can back the library; a fresh list is used when no
    initial contents are given. Duplicates are allowed.
    """

    def __init__(self, songs: Optional[MutableSequence] = None):
        if songs is None:
            songs = []
        if not isinstance(songs, MutableSequence):
            raise TypeError(f"songs must be a mutable sequence, not {type(songs).__name__}")
        self._songs = songs

    @property
    def songs(self) -> MutableSequence:
        """The songs held by the library, in load order"""
        return self._songs

    def __len__(self):
        return len(self._songs)

    def __iter__(self):
        return iter(self._songs)

    def load_from(self, source, encoding="utf-8") -> MutableSequence:
        """Append every song in a delimited songs file to the library

        The first line is a header and is skipped, as are blank lines.
        Loading stops at the first bad row; songs appended before it stay.

        Args:
            source: Path to the songs file
            encoding: Text encoding of the file

        Returns:
            The library's full song sequence after loading

        Raises:
            SourceNotFoundError: If the file cannot be opened
            SourceEncodingError: If a line is not valid in *encoding*
            MalformedNumericFieldError: If a year or danceability is not numeric
            InvalidSongError: If a row is short or has an empty text column
        """
        try:
            f = open(source, "rb")
        except OSError as exc:
            raise SourceNotFoundError(f"Songs file not found: {source}") from exc

        added = 0
        with f:
            next(f, None)  # header

            # Decoded line by line so a bad byte is reported with its line number
            for line_no, raw in enumerate(f, start=2):
                try:
                    line = raw.decode(encoding)
                except UnicodeDecodeError as exc:
                    raise SourceEncodingError(
                        f"Line {line_no}: not valid {encoding} text"
                    ) from exc

                if not line.strip():
                    continue
                song = song_from_fields(parse_csv_line(line), line_no)
                self._songs.append(song)
                added += 1

        logger.info("Loaded %d songs from %s (%d total)", added, source, len(self._songs))
        return self._songs

    def average_danceability(self) -> float:
        """Return the mean danceability of all songs, or 0 when the library is empty"""
        total = 0.0
        count = 0
        for song in self._songs:
            total += song.danceability
            count += 1

        return total / count if count else 0.0

    def songs_at_or_above(self, min_danceability: float) -> list:
        """Return a new list of songs whose danceability is at least *min_danceability*

        Songs keep their library order. The returned list is independent of
        the library: changing one does not affect the other.

        Raises:
            InvalidThresholdError: If *min_danceability* is negative
        """
        # -0.0 counts as negative
        if min_danceability < 0 or math.copysign(1.0, min_danceability) < 0:
            raise InvalidThresholdError(f"Negative danceability threshold: {min_danceability}")

        return [song for song in self._songs if song.danceability >= min_danceability]
