from __future__ import annotations

from typing import Optional

from ..audit.service import AuditRecorder
from ..common.validators import require_int
from ..core.constants import DEFAULT_POINTS_FOR_PERFECT_WEEK, DEFAULT_POINTS_FOR_PUNCTUALITY
from ..users.model import User
from .model import GamificationProgress, GamificationSettings
from .repository import GamificationRepository


class GamificationService:
    def __init__(self, gamification: GamificationRepository, audit: AuditRecorder):
        self._gamification = gamification
        self._audit = audit

    def progress_for(self, employee_id: int) -> GamificationProgress:
        return self._gamification.get_progress(int(employee_id)) or GamificationProgress(employee_id=int(employee_id))

    def get_settings(self) -> GamificationSettings:
        settings = self._gamification.get_settings()
        if settings is None:
            settings = GamificationSettings(
                points_for_punctuality=DEFAULT_POINTS_FOR_PUNCTUALITY,
                points_for_perfect_week=DEFAULT_POINTS_FOR_PERFECT_WEEK,
            )
            self._gamification.save_settings(settings)
        return settings

    def update_settings(
        self,
        *,
        points_for_punctuality,
        points_for_perfect_week,
        actor: Optional[User] = None,
    ) -> GamificationSettings:
        settings = GamificationSettings(
            points_for_punctuality=require_int(points_for_punctuality, "pointsForPunctuality"),
            points_for_perfect_week=require_int(points_for_perfect_week, "pointsForPerfectWeek"),
        )
        self._gamification.save_settings(settings)
        self._audit.record(actor, "Updated Gamification Settings")
        return settings
