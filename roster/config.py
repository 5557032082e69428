# roster/config.py
"""Настройки приложения: пути к данным, пороги и логирование."""
import logging
import os
import sys
from pathlib import Path

# --- КОНФИГУРАЦИЯ ---
PASS_THRESHOLD = 75
TOP_N = 3

if getattr(sys, 'frozen', False):
    # Запуск из EXE: данные лежат рядом с исполняемым файлом
    BASE_DIR = Path(sys.executable).resolve().parent
else:
    BASE_DIR = Path(__file__).resolve().parent.parent

DATA_DIR = Path(os.environ.get("ROSTER_DATA_DIR", BASE_DIR / "data"))
DATA_FILE = DATA_DIR / "students.json"
REPORTS_DIR = BASE_DIR / "reports"

LOG_LEVEL = os.environ.get("ROSTER_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = LOG_LEVEL):
    """Настраивает корневой логгер один раз при старте CLI."""
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
