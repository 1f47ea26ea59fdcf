"""Tests for search module"""

import pytest

import search
from song import Song


@pytest.fixture
def songs():
    """A few loaded songs, one with a quoted title"""
    return [
        Song("Daft Punk", "Get Lucky", 2013, "disco", 0.81),
        Song("Train", '"Hey, Soul Sister"', 2010, "neo mellow", 0.67),
        Song("Adele", "Rolling in the Deep", 2011, "british soul", 0.73),
        Song("Pharrell Williams", "Happy", 2014, "pop", 0.65),
    ]


def test_tokenize_neighbor():
    """Test that words and neighbouring-word pairs are produced"""
    assert search.tokenize_neighbor("Rolling in the Deep") == [
        "rolling",
        "in",
        "the",
        "deep",
        "rollingin",
        "inthe",
        "thedeep",
    ]


def test_tokenize_strips_quotes_and_punctuation():
    """Test that quotes and commas from the data file are removed"""
    assert search.tokenize_neighbor('"Hey, Soul Sister"') == [
        "hey",
        "soul",
        "sister",
        "heysoul",
        "soulsister",
    ]


def test_exact_title_ranks_first(songs):
    """Test that an exact title match is the top result"""
    assert search.fuzzy_search("happy", songs)[0].title == "Happy"


def test_typo_tolerant(songs):
    """Test that misspelled words still find the right song"""
    assert search.fuzzy_search("rollin in teh deep", songs)[0].title == "Rolling in the Deep"


def test_matches_artist(songs):
    """Test that the artist name is searched too"""
    assert search.fuzzy_search("daft punk", songs)[0].artist == "Daft Punk"


def test_compound_word(songs):
    """Test that a missing space still matches two words"""
    assert search.fuzzy_search("soulsister", songs)[0].artist == "Train"


def test_limit(songs):
    """Test that no more than limit results are returned"""
    assert len(search.fuzzy_search("soul", songs, limit=2)) == 2


def test_empty_query_or_songs(songs):
    """Test that blank queries or no songs give no results"""
    assert search.fuzzy_search("", songs) == []
    assert search.fuzzy_search("   ", songs) == []
    assert search.fuzzy_search("happy", []) == []
