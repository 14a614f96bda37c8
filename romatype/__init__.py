import os

__version__ = "0.1.0"

# Get the base directory of the project (the directory containing this file)
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Path to the data directory (assumes 'data' is at the same level as 'romatype')
DATA_DIR = os.path.abspath(os.path.join(BASE_DIR, '..', 'data'))

# Leaderboard file used when ROMATYPE_SCORES_PATH is not set
SCORES_FILE = "scores.json"

# Top N entries kept on the leaderboard
MAX_SCORES = 10
