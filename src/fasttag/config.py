# src/fasttag/config.py
"""
Settings, read once from the environment.

  FASTTAG_LEXICON_PATH   lexicon file (default: packaged sample lexicon)
  FASTTAG_REDIS_HOST     redis host for stored lexicons (default: localhost)
  FASTTAG_REDIS_PORT     (default: 6379)
  FASTTAG_REDIS_DB       (default: 0)
  FASTTAG_API_URL        base URL the CLI client talks to
  FASTTAG_LOG_LEVEL      DEBUG, INFO, WARNING, ... (default: WARNING)
"""

import os
from pathlib import Path


PACKAGE_DIR = Path(__file__).resolve().parent
SAMPLE_LEXICON_PATH = PACKAGE_DIR / "data" / "lexicon.txt"

LEXICON_PATH = Path(os.getenv("FASTTAG_LEXICON_PATH", str(SAMPLE_LEXICON_PATH)))

REDIS_HOST = os.getenv("FASTTAG_REDIS_HOST", "localhost")
REDIS_PORT = int(os.getenv("FASTTAG_REDIS_PORT", "6379"))
REDIS_DB = int(os.getenv("FASTTAG_REDIS_DB", "0"))

BASE_URL = os.getenv("FASTTAG_API_URL", "http://localhost:8000/api")

LOG_LEVEL = os.getenv("FASTTAG_LOG_LEVEL", "WARNING")

DEFAULT_LEXICON_NAME = "default"
