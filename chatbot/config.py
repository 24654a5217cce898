import logging
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Project paths
# ---------------------------------------------------------------------------

# Root of the project (repo root)
PROJECT_ROOT = Path(__file__).resolve().parents[1]

DATA_DIR = PROJECT_ROOT / "data"

# Questions file fed to the engine. Relative paths resolve against the
# working directory, like every other path handed to the question loader.
QUESTIONS_PATH = os.getenv(
    "CHATBOT_QUESTIONS_PATH",
    str(DATA_DIR / "troubleshooting.json"),
).strip()

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_LEVEL = os.getenv("CHATBOT_LOG_LEVEL", "INFO").strip().upper()
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# ---------------------------------------------------------------------------
# Web app
# ---------------------------------------------------------------------------

HOST = os.getenv("CHATBOT_HOST", "0.0.0.0").strip()
PORT = int(os.getenv("CHATBOT_PORT", "5000"))

# ---------------------------------------------------------------------------
# Console harness
# ---------------------------------------------------------------------------

# Commands that end a console session early
EXIT_COMMANDS = {"quit", "exit", "stop"}


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Configure root logging for an entry point (main.py, app.py)."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
    )
