"""
Immutable song record loaded from the songs data file.

Songs compare equal only when every field matches, but they *order* by
danceability alone, so ``sorted(songs)`` ranks them from least to most
danceable.
"""

from errors import InvalidSongError

_TEXT_FIELDS = ("artist", "title", "genre")


class Song:
    """One song entry: artist, title, year, genre and danceability score."""

    __slots__ = ("artist", "title", "year", "genre", "danceability")

    def __init__(self, artist, title, year, genre, danceability):
        values = {"artist": artist, "title": title, "genre": genre}
        for name in _TEXT_FIELDS:
            if not values[name]:
                raise InvalidSongError(f"Song {name} is empty, can't create song")

        object.__setattr__(self, "artist", artist)
        object.__setattr__(self, "title", title)
        object.__setattr__(self, "year", year)
        object.__setattr__(self, "genre", genre)
        object.__setattr__(self, "danceability", danceability)

    def __setattr__(self, name, value):
        raise AttributeError(f"Song is immutable, can't set {name}")

    def __delattr__(self, name):
        raise AttributeError(f"Song is immutable, can't delete {name}")

    def _key(self):
        return (self.artist, self.title, self.year, self.genre, self.danceability)

    def __eq__(self, other):
        if not isinstance(other, Song):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    # Ordering looks at danceability only
    def __lt__(self, other):
        if not isinstance(other, Song):
            return NotImplemented
        return self.danceability < other.danceability

    def __le__(self, other):
        if not isinstance(other, Song):
            return NotImplemented
        return self.danceability <= other.danceability

    def __gt__(self, other):
        if not isinstance(other, Song):
            return NotImplemented
        return self.danceability > other.danceability

    def __ge__(self, other):
        if not isinstance(other, Song):
            return NotImplemented
        return self.danceability >= other.danceability

    def __repr__(self):
        return (
            f"Song(artist={self.artist!r}, title={self.title!r}, year={self.year}, "
            f"genre={self.genre!r}, danceability={self.danceability})"
        )

    def to_dict(self):
        """Return the song as a plain dict with the same field names"""
        return {
            "artist": self.artist,
            "title": self.title,
            "year": self.year,
            "genre": self.genre,
            "danceability": self.danceability,
        }
