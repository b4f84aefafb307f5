"""
Console progress logging shared by all layers.
"""
import sys
from datetime import datetime


LEVEL_ICONS = {
    "INFO": "ℹ️",
    "SUCCESS": "✅",
    "WARNING": "⚠️",
    "ERROR": "❌",
    "PROCESSING": "⚙️",
}

STDERR_LEVELS = ("WARNING", "ERROR")


def log_progress(message: str, level: str = "INFO"):
    """Timestamped status line; warnings and errors go to stderr."""
    stamp = datetime.now().strftime("%H:%M:%S")
    stream = sys.stderr if level in STDERR_LEVELS else sys.stdout
    print(f"  [{stamp}] {LEVEL_ICONS.get(level, '•')} {message}", file=stream)


def print_banner(title: str, width: int = 60):
    print("=" * width)
    print(title)
    print("=" * width)
