"""
Song Searcher - danceability explorer for a songs CSV file

Main entry point for the application. Launches the interactive menu.
"""

import logging

import cli_menu
import reader
from song_library import SongLibrary


def main():
    # Ensure user_specs.yaml exists (prompts on first run)
    reader.ensure_user_specs()

    logging.basicConfig(
        level=reader.get_log_level(),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    csv_path = reader.get_songs_csv_path()
    logging.getLogger("song_searcher.main").info("Using songs file %s", csv_path)

    cli_menu.display_menu(SongLibrary(), csv_path)


if __name__ == "__main__":
    main()
