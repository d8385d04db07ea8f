# src/mandragora/config.py
from __future__ import annotations
import logging
import os

# ---------------------------------------------------------------------
# Search settings (overridable through the environment)
# ---------------------------------------------------------------------
SEARCH_DEPTH = int(os.getenv("MANDRAGORA_SEARCH_DEPTH", "3"))
DISCOUNT_FACTOR = float(os.getenv("MANDRAGORA_DISCOUNT", "0.8"))
EARLY_GAME_THRESHOLD = int(os.getenv("MANDRAGORA_EARLY_GAME_THRESHOLD", "15"))

# ---------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------
LOG_LEVEL = os.getenv("MANDRAGORA_LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger for scripts (library code only creates loggers)."""
    logging.basicConfig(level=(level or LOG_LEVEL).upper(), format=LOG_FORMAT)
