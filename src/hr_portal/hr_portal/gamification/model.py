from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class Badge:
    badge_id: str
    name: str
    description: str
    icon: str


@dataclass(frozen=True)
class GamificationProgress:
    """Read-only points/badges/rank snapshot for one employee."""

    employee_id: int
    points: int = 0
    badges: Tuple[Badge, ...] = field(default_factory=tuple)
    leaderboard_rank: Optional[int] = None


@dataclass(frozen=True)
class GamificationSettings:
    points_for_punctuality: int
    points_for_perfect_week: int
