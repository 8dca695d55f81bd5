"""Central configuration for the How Many? service."""

import os
from pathlib import Path

import dotenv

# Load environment variables from .env file
dotenv.load_dotenv()

PACKAGE_ROOT = Path(__file__).parent
DATA_DIR = PACKAGE_ROOT / "data"

DEFAULT_PORT = "8000"
PORT = os.getenv("PORT") or DEFAULT_PORT

COMPANIES_FILE = Path(os.getenv("HOWMANY_COMPANIES_FILE", DATA_DIR / "companies.json"))
POPULATIONS_FILE = Path(os.getenv("HOWMANY_POPULATIONS_FILE", DATA_DIR / "populations.json"))

LOG_LEVEL = os.getenv("HOWMANY_LOG_LEVEL", "INFO").upper()

# Used by the randomizer when no company outnumbers the chosen location
FALLBACK_PATH = "/Gotland/Accenture"

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(filename)s:%(lineno)d - %(funcName)s - %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'
