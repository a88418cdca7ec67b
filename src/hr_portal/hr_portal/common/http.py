from __future__ import annotations

from typing import Any, Dict, Optional

from flask import request

from ..core.exceptions import ValidationError

ACTOR_HEADER = "X-User-ID"


def json_body() -> Dict[str, Any]:
    """The request's JSON object; an empty dict for an empty or non-JSON body."""

    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object.")
    return data


def actor_id() -> Optional[int]:
    raw = (request.headers.get(ACTOR_HEADER) or "").strip()
    if not raw.isdigit():
        return None
    return int(raw)
