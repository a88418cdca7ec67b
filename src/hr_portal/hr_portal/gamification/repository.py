from __future__ import annotations

from typing import Optional, Protocol

from .model import GamificationProgress, GamificationSettings


class GamificationRepository(Protocol):
    def get_progress(self, employee_id: int) -> Optional[GamificationProgress]:
        raise NotImplementedError

    def save_progress(self, progress: GamificationProgress) -> None:
        raise NotImplementedError

    def get_settings(self) -> Optional[GamificationSettings]:
        raise NotImplementedError

    def save_settings(self, settings: GamificationSettings) -> None:
        """Upsert the singleton settings record."""

        raise NotImplementedError
