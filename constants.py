import os

USER_SPECS_DATA = "user_specs.yaml"
_PROJECT_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_SONGS_CSV = os.path.join(_PROJECT_DIR, "data", "songs.csv")
SONGS_CSV_ENV = "SONG_SEARCHER_CSV"

DEFAULT_LOG_LEVEL = "WARNING"
SCREEN_WIDTH = 80
DEFAULT_SEARCH_RESULTS = 5
