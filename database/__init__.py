"""Database package: ORM models and session helpers."""

from .database import (
    ReadSessionLocal,
    WriteSessionLocal,
    get_read_session,
    get_write_session,
    init_db,
)
from . import models

__all__ = [
    "ReadSessionLocal",
    "WriteSessionLocal",
    "get_read_session",
    "get_write_session",
    "init_db",
    "models",
]
