# app_config.py
"""
Central configuration for the NeuroPath app.

- DATA_DIR: directory holding one JSON file per persisted key.
- ASSETS_DIR: directory with the exercise illustrations.
- LOG_LEVEL: root logging level name.
- SERVER_NAME / SERVER_PORT / SHARE: passed straight to demo.launch().
"""

import os


def _bool_env(name: str, default: str = "false") -> bool:
    value = os.getenv(name, default).strip().lower()
    return value in {"1", "true", "yes", "y"}


# Local key-value storage (dailyLogs.json, flowerGameScores.json, ...)
DATA_DIR: str = os.getenv("NEUROPATH_DATA_DIR", "user_data")

# Exercise illustrations: breathing.png, stretch3.png, sens.png, eye.png
ASSETS_DIR: str = os.getenv("NEUROPATH_ASSETS_DIR", "assets")

LOG_LEVEL: str = os.getenv("NEUROPATH_LOG_LEVEL", "INFO").strip().upper()

SERVER_NAME: str = os.getenv("NEUROPATH_SERVER_NAME", "127.0.0.1")

try:
    SERVER_PORT: int = int(os.getenv("NEUROPATH_SERVER_PORT", "7860"))
except ValueError:
    SERVER_PORT = 7860

SHARE: bool = _bool_env("NEUROPATH_SHARE", "false")
