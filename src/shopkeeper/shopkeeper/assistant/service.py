from __future__ import annotations

import json
import logging
from datetime import date
from typing import Iterable, Optional, Sequence

import requests

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import today_local
from ..core.constants import DEFAULT_ASSISTANT_MODEL, DEFAULT_ASSISTANT_TIMEOUT_SECONDS
from ..core.exceptions import AssistantError, ConfigurationError, ServiceError
from ..employees.model import Employee

logger = logging.getLogger(__name__)

GEMINI_ENDPOINT = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"

FALLBACK_MESSAGE = "Sorry, I couldn't answer that right now. Please check the assistant configuration and try again."
EMPTY_ANSWER_MESSAGE = "I couldn't generate an answer right now."

PROMPT_TEMPLATE = """
You are an intelligent assistant for a small shop owner.
Here is the current shop data in JSON format: {context}.

The user asks: "{query}"

Provide a helpful, concise answer. If analyzing data, look for trends (e.g., frequent lateness).
If asked about salary calculations, explain the logic simply.
Keep the tone professional yet friendly.
"""


def build_context(
    employees: Iterable[Employee],
    attendance: Sequence[AttendanceRecord],
    today: date,
) -> str:
    """JSON snapshot handed to the model: names, roles, salaries, a record count."""
    return json.dumps(
        {
            "employees": [
                {"name": e.name, "role": e.role, "baseSalary": e.base_salary}
                for e in employees
            ],
            "recentAttendanceCount": len(attendance),
            "today": today.isoformat(),
        },
        ensure_ascii=False,
    )


def build_prompt(query: str, context: str) -> str:
    return PROMPT_TEMPLATE.format(context=context, query=query)


class AssistantService:
    """Pass-through to an external text-generation service.

    Never raises to the caller: missing credentials and service failures are
    logged and turned into FALLBACK_MESSAGE.
    """

    def __init__(
        self,
        api_key: Optional[str],
        *,
        model: str = DEFAULT_ASSISTANT_MODEL,
        timeout: float = DEFAULT_ASSISTANT_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self._api_key = (api_key or "").strip() or None
        self._model = model
        self._timeout = timeout
        self._session = session or requests.Session()

    @property
    def configured(self) -> bool:
        return self._api_key is not None

    def ask(
        self,
        query: str,
        employees: Iterable[Employee],
        attendance: Sequence[AttendanceRecord],
        *,
        today: Optional[date] = None,
    ) -> str:
        context = build_context(employees, attendance, today or today_local())
        prompt = build_prompt(query, context)
        try:
            text = self._generate(prompt)
        except ConfigurationError as e:
            logger.warning("Assistant not configured: %s", e)
            return FALLBACK_MESSAGE
        except AssistantError as e:
            logger.error("Assistant call failed: %s", e)
            return FALLBACK_MESSAGE
        return text or EMPTY_ANSWER_MESSAGE

    def _generate(self, prompt: str) -> str:
        if not self._api_key:
            raise ConfigurationError("no API key available")

        url = GEMINI_ENDPOINT.format(model=self._model)
        body = {"contents": [{"parts": [{"text": prompt}]}]}
        try:
            response = self._session.post(
                url,
                params={"key": self._api_key},
                json=body,
                timeout=self._timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.Timeout as e:
            raise ServiceError(f"timed out after {self._timeout}s") from e
        except requests.RequestException as e:
            raise ServiceError(str(e)) from e
        except ValueError as e:
            raise ServiceError("response was not JSON") from e

        return self._extract_text(data)

    @staticmethod
    def _extract_text(data) -> str:
        try:
            candidates = data.get("candidates") or []
            if not candidates:
                return ""
            parts = candidates[0].get("content", {}).get("parts") or []
            return "".join(str(p.get("text") or "") for p in parts if isinstance(p, dict)).strip()
        except (AttributeError, TypeError, KeyError, IndexError) as e:
            raise ServiceError("unexpected response shape") from e
