from __future__ import annotations

from dataclasses import asdict
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, dump_json, fetchone, load_json
from .model import Badge, GamificationProgress, GamificationSettings
from .repository import GamificationRepository

SETTINGS_NAME = "gamification"


class MySQLGamificationRepository(GamificationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_progress(self, employee_id: int) -> Optional[GamificationProgress]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT employee_id, points, badges, leaderboard_rank FROM gamification WHERE employee_id=%s",
                (int(employee_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return GamificationProgress(
                employee_id=int(r["employee_id"]),
                points=int(r["points"]),
                badges=tuple(Badge(**b) for b in (load_json(r.get("badges")) or [])),
                leaderboard_rank=r.get("leaderboard_rank"),
            )

    def save_progress(self, progress: GamificationProgress) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO gamification(employee_id, points, badges, leaderboard_rank)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    points=VALUES(points), badges=VALUES(badges), leaderboard_rank=VALUES(leaderboard_rank)
                """,
                (
                    progress.employee_id,
                    progress.points,
                    dump_json([asdict(b) for b in progress.badges]),
                    progress.leaderboard_rank,
                ),
            )

    def get_settings(self) -> Optional[GamificationSettings]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT value FROM settings WHERE name=%s", (SETTINGS_NAME,))
            r = fetchone(cur)
            if not r:
                return None
            value = load_json(r["value"])
            return GamificationSettings(
                points_for_punctuality=int(value["pointsForPunctuality"]),
                points_for_perfect_week=int(value["pointsForPerfectWeek"]),
            )

    def save_settings(self, settings: GamificationSettings) -> None:
        value = dump_json(
            {
                "pointsForPunctuality": settings.points_for_punctuality,
                "pointsForPerfectWeek": settings.points_for_perfect_week,
            }
        )
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO settings(name, value) VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE value=VALUES(value)
                """,
                (SETTINGS_NAME, value),
            )
