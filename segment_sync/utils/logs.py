from __future__ import annotations
"""
Console logging helpers for the sync job.
"""

import sys
from datetime import datetime

LEVEL_PREFIX = {
    "INFO": "ℹ️ ",
    "SUCCESS": "✅",
    "ERROR": "❌",
    "WARNING": "⚠️ ",
    "PROGRESS": "⏳"
}


def log_step(source: str, message: str, level: str = "INFO"):
    """Log with timestamp and source context. Warnings and errors go to stderr."""
    timestamp = datetime.now().strftime("%H:%M:%S")
    prefix = LEVEL_PREFIX.get(level, "")
    stream = sys.stderr if level in ("WARNING", "ERROR") else sys.stdout
    print(f"[{timestamp}] [{source}] {prefix} {message}", file=stream)
