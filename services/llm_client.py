from __future__ import annotations

import time
from typing import Any, Dict, List, Optional

from openai import OpenAI

from config.llm_routes import ROUTES
from config.settings import Settings, get_settings
from utils.llm_logger import log_call, sha256_text


DEFAULT_MODEL = "gpt-4o"
PROVIDER = "openai"


class LLMClient:
    """Minimal wrapper to centralize per-use-case routing and logging."""

    def __init__(self, settings: Optional[Settings] = None, client: Optional[Any] = None) -> None:
        self.settings = settings or get_settings()
        self._client = client

    @property
    def client(self) -> Any:
        # Built on first use so a missing key only fails when a call is made
        if self._client is None:
            self._client = OpenAI(api_key=self.settings.openai_api_key)
        return self._client

    def chat(
        self,
        *,
        use_case: str,
        messages: List[Dict[str, str]],
        model: Optional[str] = None,
        prompt_name: Optional[str] = None,
        prompt_text: Optional[str] = None,
    ) -> Any:
        route = ROUTES.get(use_case, {})
        model = model or route.get("model") or self.settings.openai_model or DEFAULT_MODEL
        op = route.get("operation", "chat")

        _t0 = time.time()
        try:
            resp = self.client.chat.completions.create(model=model, messages=messages)
        except Exception as e:
            log_call(
                caller=f"llm_client.chat:{use_case}",
                provider=PROVIDER,
                model=model,
                operation=op,
                prompt_name=prompt_name,
                prompt_hash=sha256_text(prompt_text),
                duration_ms=int((time.time() - _t0) * 1000),
                status="error",
                error=str(e),
            )
            raise
        _dt_ms = int((time.time() - _t0) * 1000)

        usage_obj = None
        usage = getattr(resp, "usage", None)
        if usage:
            usage_obj = {
                "prompt_tokens": getattr(usage, "prompt_tokens", None),
                "completion_tokens": getattr(usage, "completion_tokens", None),
                "total_tokens": getattr(usage, "total_tokens", None),
            }

        log_call(
            caller=f"llm_client.chat:{use_case}",
            provider=PROVIDER,
            model=model,
            operation=op,
            prompt_name=prompt_name,
            prompt_hash=sha256_text(prompt_text),
            duration_ms=_dt_ms,
            status="ok",
            usage=usage_obj,
        )
        return resp


def first_message_text(resp: Any) -> Optional[str]:
    """Text of the first completion choice, or None when the response carries none."""
    choices = getattr(resp, "choices", None)
    if not choices:
        return None
    message = getattr(choices[0], "message", None)
    return getattr(message, "content", None)
