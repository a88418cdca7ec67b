from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional

from ..attendance.service import AttendanceService
from ..common.serializers import attendance_json, gamification_json, leave_balance_json, salary_json
from ..common.validators import require_int
from ..core.constants import ASSISTANT_ATTENDANCE_LIMIT, ASSISTANT_SALARY_LIMIT
from ..core.exceptions import ServiceUnavailableError, ValidationError
from ..gamification.service import GamificationService
from ..leaves.service import LeaveService
from ..salaries.service import SalaryService
from .client import TextGenerationError, TextGenerator

log = logging.getLogger(__name__)

PROMPT_TEMPLATE = """
You are an AI HR Assistant integrated into a SaaS-grade HR dashboard. Your role is to help employees check attendance, salary slips, and request leave, while enabling admins to manage analytics, exports, and employee records. Always respond in a professional, concise tone, and provide step-by-step guidance.

Here is the current user's data for context:
- User Name: {name}
- User Role: {role}
- Recent Attendance: {attendance}
- Recent Salary Slips: {salaries}
- Leave Balance: {leave_balance}
- Gamification Status: {gamification}

Based on this context, answer the following user query. Be helpful and concise.
User Query: "{prompt}"
"""


def _without_photo(record: dict) -> dict:
    # Check-in photos (base64 images) stay out of the prompt.
    return {k: v for k, v in record.items() if k != "checkInPhoto"}


def _dump(value: Any) -> str:
    return json.dumps(value, indent=2, default=str)


class AssistantService:
    """Answers a user's question with a bounded slice of their own HR records as context."""

    def __init__(
        self,
        attendance: AttendanceService,
        salaries: SalaryService,
        leaves: LeaveService,
        gamification: GamificationService,
        generator: Optional[TextGenerator] = None,
    ):
        self._attendance = attendance
        self._salaries = salaries
        self._leaves = leaves
        self._gamification = gamification
        self._generator = generator

    @property
    def configured(self) -> bool:
        return self._generator is not None

    def build_prompt(self, user: Mapping[str, Any], prompt: str) -> str:
        employee_id = require_int(user.get("id"), "user.id")
        attendance = self._attendance.recent_for_employee(employee_id, ASSISTANT_ATTENDANCE_LIMIT)
        salaries = self._salaries.recent_for_employee(employee_id, ASSISTANT_SALARY_LIMIT)
        return PROMPT_TEMPLATE.format(
            name=user.get("name"),
            role=user.get("role"),
            attendance=_dump([_without_photo(attendance_json(r)) for r in attendance]),
            salaries=_dump([salary_json(s) for s in salaries]),
            leave_balance=_dump(leave_balance_json(self._leaves.leave_balance(employee_id))),
            gamification=_dump(gamification_json(self._gamification.progress_for(employee_id))),
            prompt=prompt,
        )

    def answer(self, user: Optional[Mapping[str, Any]], prompt: Optional[str]) -> str:
        if self._generator is None:
            raise ServiceUnavailableError("AI Assistant is not configured on the server. API_KEY is missing.")
        if not prompt or not user or not isinstance(user, Mapping):
            raise ValidationError("Prompt and user are required.")

        full_prompt = self.build_prompt(user, prompt)
        try:
            return self._generator.generate(full_prompt)
        except TextGenerationError:
            log.exception("text generation failed for user %s", user.get("id"))
            raise ServiceUnavailableError("An error occurred while communicating with the AI.")
