# config.py
from __future__ import annotations
import os
from typing import List

APP_VERSION = "0.1.0"

APP_TITLE = os.environ.get("PAIRING_APP_TITLE", "Humidor Pairing Engine")
LOG_LEVEL = os.environ.get("PAIRING_LOG_LEVEL", "INFO").upper()

def allowed_origins() -> List[str]:
    raw = os.environ.get("PAIRING_ALLOWED_ORIGINS", "*")
    return [o.strip() for o in raw.split(",") if o.strip()] or ["*"]
