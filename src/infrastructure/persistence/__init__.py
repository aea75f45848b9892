"""SQLAlchemy rows, engine management and repository adapters."""

from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.database import Database

__all__ = ["BaseModel", "Database"]
