# aistudy/config.py
"""Settings for the AI Study client, read once from the environment / .env."""
from __future__ import annotations
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv(Path(__file__).with_name(".env"))

APP_TITLE = "AI Study"
APP_SUBTITLE = "Personalized"

STORAGE_KEY = "glassy_v3_data"
DATA_DIR = Path(os.getenv("AISTUDY_DATA_DIR", str(Path.home() / ".aistudy"))).expanduser()

# browsers give localStorage about 5 MiB per origin
STORAGE_QUOTA = int(os.getenv("AISTUDY_STORAGE_QUOTA", str(5 * 1024 * 1024)))

APPEARANCE_MODE = os.getenv("AISTUDY_APPEARANCE", "dark")
LOG_LEVEL = os.getenv("AISTUDY_LOG_LEVEL", "INFO").upper()
