"""FastAPI dependencies for the storage backend and the beacon notifier.

Both are process-wide singletons chosen from settings. Tests swap them out
through ``app.dependency_overrides``.
"""
import logging
from functools import lru_cache

from sosrelay.config import settings
from sosrelay.services.notifier import Notifier, build_notifier
from sosrelay.storage.base import EmergencyRequestStore
from sosrelay.storage.memory import MemoryStore

logger = logging.getLogger(__name__)


@lru_cache
def get_store() -> EmergencyRequestStore:
    if settings.STORAGE_BACKEND == "sql":
        from sosrelay.database import SessionLocal
        from sosrelay.storage.sql import SqlStore

        logger.info("Using SQL storage at %s", settings.DATABASE_URL.split("@")[-1])
        return SqlStore(SessionLocal)
    logger.info("Using in-memory storage")
    return MemoryStore()


@lru_cache
def get_notifier() -> Notifier:
    return build_notifier()
