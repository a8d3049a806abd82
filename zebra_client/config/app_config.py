"""Centralised process settings (dotenv + env overrides)."""
from __future__ import annotations
import os
from pathlib import Path
from dotenv import load_dotenv

ROOT = Path.cwd()
load_dotenv(ROOT / ".env", override=False)

class settings:                            # pylint: disable=too-few-public-methods
    ZEBRA_API_KEY     = os.getenv("ZEBRA_API_KEY", "")
    ZEBRA_BASE_URL    = os.getenv("ZEBRA_BASE_URL") or None
    ZEBRA_TIMEOUT_MS  = int(os.getenv("ZEBRA_TIMEOUT_MS", 30000))
    ZEBRA_MAX_RETRIES = int(os.getenv("ZEBRA_MAX_RETRIES", 3))
    LOG_LEVEL         = os.getenv("LOG_LEVEL", "INFO").upper()
