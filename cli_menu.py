"""
CLI menu for loading songs and exploring their danceability.

This module provides the interactive loop: load the songs file, list songs
above a danceability threshold, show the average, and look songs up by name.
"""

import logging

import constants as cv
import search
from errors import (
    InvalidSongError,
    InvalidThresholdError,
    MalformedNumericFieldError,
    SourceEncodingError,
    SourceNotFoundError,
)

logger = logging.getLogger("song_searcher.menu")


def _print_banner():
    """Print the welcome banner and the numbered menu"""
    width = cv.SCREEN_WIDTH
    print("=" * width)
    print("SONG SEARCHER - Your Groovy Companion".center(width))
    print("=" * width)
    print("What's on your mind today?")
    print("  1  Load up your favorite tunes (load data file)")
    print("  2  Find songs that match your vibe (list songs by danceability)")
    print("  3  Check out the overall groove (show average danceability)")
    print("  4  Take a break from the music journey (exit)")
    print("[ f <text> : find song | h : help | q : quit ]".center(width))
    print("-" * width)


def _show_help():
    """Display help information for all commands"""
    help_text = """
================================================================================
                           SONG SEARCHER - HELP
================================================================================

  1                     Load the songs file set in user_specs.yaml
                        (or the SONG_SEARCHER_CSV environment variable)
  2                     List songs at or above a danceability threshold
  3                     Show the average danceability of loaded songs
  f <text>              Find loaded songs by title or artist (typo-tolerant)
  h or help             Show this help message
  4, q or x             Quit program

================================================================================
"""
    print(help_text)


def _truncate(text, max_length):
    """Truncate text with ellipsis if too long"""
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


def _format_song(song):
    return f" - {song.title} by {song.artist}"


def handle_load_data_file(library, csv_path):
    """Load *csv_path* into the library and report the outcome

    Returns:
        bool: True if the file loaded completely
    """
    before = len(library)
    try:
        library.load_from(csv_path)
    except SourceNotFoundError:
        logger.warning("Songs file not found: %s", csv_path)
        print("Oops! Seems like there's a glitch in the playlist. Please check your file.")
        print(f"  (looked for: {csv_path})")
        return False
    except (MalformedNumericFieldError, InvalidSongError, SourceEncodingError) as exc:
        logger.warning("Stopped loading %s: %s", csv_path, exc)
        print(f"Oops! The songs file has a bad row: {exc}")
        print(f"  {len(library) - before} songs were loaded before it.")
        return False

    print(f"Your music library is loaded and ready for exploration! ({len(library) - before} songs)")
    return True


def _read_threshold():
    """Prompt for a threshold; returns a float or None on bad input"""
    raw = input("Got a dance mood? Enter the danceability threshold: ").strip()
    try:
        return float(raw)
    except ValueError:
        print("Invalid input. Please enter a number for the danceability threshold.")
        return None


def handle_list_songs_by_danceability(library, threshold):
    """Print every song with danceability at or above *threshold*"""
    try:
        songs = library.songs_at_or_above(threshold)
    except InvalidThresholdError as exc:
        print(f"Invalid threshold: {exc}. Danceability can't be negative.")
        return

    if not songs:
        print(f"No songs found with at least {threshold} danceability. Time to explore new beats!")
        return

    print(f"Nice picks! Here are the songs with at least {threshold} danceability:")
    for song in songs:
        print(_truncate(_format_song(song), cv.SCREEN_WIDTH))


def handle_show_average_danceability(library):
    """Print the average danceability of all loaded songs"""
    average = library.average_danceability()
    print(f"The average danceability across the tunes is {average}. Let the good vibes roll!")


def handle_find(library, query):
    """Print the loaded songs closest to *query*"""
    if not query:
        print("Usage: f <text>")
        return

    results = search.fuzzy_search(query, library, limit=cv.DEFAULT_SEARCH_RESULTS)
    if not results:
        print("  No matches found.")
        return

    for song in results:
        line = f"  {song.danceability:>6.3f}  {song.title} by {song.artist} ({song.year}, {song.genre})"
        print(_truncate(line, cv.SCREEN_WIDTH))


def handle_exit_app():
    """Print a farewell message"""
    print("Thanks for hanging out with Song Searcher! Catch you on the flip side!")


def _dispatch_command(user_input, library, csv_path):
    """Route a single user command to its handler.

    Returns:
        bool: False when the user asked to quit.
    """
    cmd = user_input.lower()

    if cmd in ("4", "q", "x"):
        handle_exit_app()
        return False

    exact_handlers = {
        "1": lambda: handle_load_data_file(library, csv_path),
        "3": lambda: handle_show_average_danceability(library),
        "h": _show_help,
        "help": _show_help,
    }
    if cmd in exact_handlers:
        exact_handlers[cmd]()
        return True

    if cmd == "2":
        try:
            threshold = _read_threshold()
        except EOFError:
            handle_exit_app()
            return False
        if threshold is not None:
            handle_list_songs_by_danceability(library, threshold)
        return True

    if cmd == "f" or cmd.startswith("f "):
        handle_find(library, user_input[1:].strip())
        return True

    print("Oops! That's not a valid choice. Pick 1, 2, 3, or 4!")
    return True


def display_menu(library, csv_path):
    """Run the interactive menu until the user quits or input ends

    Args:
        library: SongLibrary the commands operate on
        csv_path: Songs file loaded by command 1
    """
    _print_banner()

    while True:
        try:
            user_input = input("> ").strip()
        except EOFError:
            handle_exit_app()
            break

        if not user_input:
            continue

        if not _dispatch_command(user_input, library, csv_path):
            break

        print("What else would you like to do?")
