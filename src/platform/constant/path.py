from pathlib import Path


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent

# Log directory
LOG_DIR = BASE_DIR / 'logs'

# Ticketer data directory
DATA_DIR = BASE_DIR / 'data'

# Seed document used when the data file does not exist yet
PREFILL_FILE = BASE_DIR / 'script' / 'prefill.json'
