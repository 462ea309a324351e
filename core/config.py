"""Runtime configuration for the meal planner.

Values come from environment variables; a `.env` file at the project root
is loaded first when present. Defaults are development conveniences only.
"""

import os
from pathlib import Path
from typing import Final, List

from dotenv import load_dotenv

BASE_DIR: Final[Path] = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / ".env")

# Store
DATABASE_URL: Final[str] = os.getenv("DATABASE_URL", "sqlite:///meal_planner.db")
READ_DATABASE_URL: Final[str] = os.getenv("READ_DATABASE_URL", DATABASE_URL)

# HTTP server
HOST: Final[str] = os.getenv("HOST", "0.0.0.0")
PORT: Final[int] = int(os.getenv("PORT", "4000"))
CORS_ORIGINS: Final[List[str]] = [
    origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
]

# Client
API_BASE_URL: Final[str] = os.getenv("MEAL_PLANNER_API_URL", "http://localhost:4000/api")

# Logging
LOG_LEVEL: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR: Final[Path] = Path(os.getenv("LOG_DIR", str(BASE_DIR / "logs")))
