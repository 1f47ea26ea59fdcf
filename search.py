"""
Typo-tolerant song lookup over the loaded library.

Each song is scored against the query by tokenized Levenshtein distance:
  1. Split the query and the song's "title artist" text into words and add
     concatenations of neighbouring words, so "daftpunk" meets "Daft Punk".
  2. For every (query_token, song_token) pair take the edit distance; a query
     token found verbatim in the text scores 1.
  3. The sorted ``depth`` smallest distances form the sort key; Python's
     tuple comparison ranks the closest songs first.
"""

import re

from rapidfuzz.distance import Levenshtein

_PUNCT_SPACE = re.compile(r"[;:\-\+\.\?!,\[\]\(\)\{\}<>\*\~\|=_]")
_PUNCT_DROP = re.compile(r"""[\'\"\/\\#\$%&@\^`]""")


def _normalize(text: str) -> str:
    """Lowercase and strip punctuation (quotes from the data file included)."""
    text = text.lower()
    text = _PUNCT_SPACE.sub(" ", text)
    return _PUNCT_DROP.sub("", text)


def tokenize_neighbor(text: str) -> list[str]:
    """Tokenize *text* and append neighbouring-word concatenations.

    Example::

        "Get Lucky (feat. Pharrell)"
        -> ["get", "lucky", "feat", "pharrell", "getlucky", "luckyfeat", "featpharrell"]
    """
    tokens = _normalize(text).split()
    neighbor_tokens = [tokens[i] + tokens[i + 1] for i in range(len(tokens) - 1)]
    return tokens + neighbor_tokens


def _song_text(song) -> str:
    return f"{song.title} {song.artist}"


def _token_distance(query: str, text: str, depth: int) -> list[int]:
    query_tokens = tokenize_neighbor(query)
    text_lower = _normalize(text)
    text_tokens = tokenize_neighbor(text)

    distances: list[int] = []
    for qt in query_tokens:
        if qt in text_lower:
            distances.append(1)
        for tt in text_tokens:
            distances.append(Levenshtein.distance(qt, tt))

    distances.sort()
    return distances[:depth]


def fuzzy_search(query: str, songs, limit: int = 5, depth: int = 6) -> list:
    """Rank *songs* by similarity of their title and artist to *query*.

    Args:
        query: Raw search text.
        songs: Iterable of Song objects, e.g. a SongLibrary.
        limit: Maximum number of results.
        depth: Number of best token distances used in the sort key.

    Returns:
        Up to *limit* songs, best match first.
    """
    songs = list(songs)
    if not query.strip() or not songs:
        return []

    scored = sorted(songs, key=lambda s: _token_distance(query, _song_text(s), depth))
    return scored[:limit]
