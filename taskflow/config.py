# -*- coding: utf-8 -*-

"""
TaskFlow - Configuration.

All settings are read once from the environment (a local .env file is
honoured) and exposed as module-level constants.
"""

import os

from dotenv import load_dotenv

load_dotenv()

APP_VERSION: str = "1.0.0"

SERVER_HOST: str = os.getenv("SERVER_HOST", "127.0.0.1")
SERVER_PORT: int = int(os.getenv("SERVER_PORT", "8000"))

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Empty -> in-memory storage, otherwise path of the JSON file backend
STORAGE_PATH: str = os.getenv("STORAGE_PATH", "").strip()
