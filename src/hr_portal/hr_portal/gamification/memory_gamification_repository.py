from __future__ import annotations

from typing import Optional

from ..database.memory_store import MemoryStore
from .model import GamificationProgress, GamificationSettings
from .repository import GamificationRepository

SETTINGS_NAME = "gamification"


class MemoryGamificationRepository(GamificationRepository):
    def __init__(self, store: MemoryStore):
        self._store = store
        self._progress = store.table("gamification")
        self._settings = store.table("settings")

    def get_progress(self, employee_id: int) -> Optional[GamificationProgress]:
        return self._progress.get(int(employee_id))

    def save_progress(self, progress: GamificationProgress) -> None:
        with self._store.lock:
            self._progress[progress.employee_id] = progress

    def get_settings(self) -> Optional[GamificationSettings]:
        return self._settings.get(SETTINGS_NAME)

    def save_settings(self, settings: GamificationSettings) -> None:
        with self._store.lock:
            self._settings[SETTINGS_NAME] = settings
