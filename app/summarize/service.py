from __future__ import annotations

import logging
import time
from typing import Protocol

import httpx

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "Summarize the following note in clear, concise bullet points."
QUOTA_MESSAGE = "AI summary temporarily unavailable (quota exceeded). Try again later."
EMPTY_MESSAGE = "AI did not return a summary."
FALLBACK_CHARS = 60


class Summarizer(Protocol):
    def summarize(self, content: str) -> str: ...

    def close(self) -> None: ...


def fallback_summary(content: str) -> str:
    return f"Mock Summary (fallback): {content[:FALLBACK_CHARS]}..."


class MockSummarizer:
    """Canned summary used when no provider key is configured."""

    def __init__(self, delay: float = 1.0):
        self.delay = delay

    def summarize(self, content: str) -> str:
        if self.delay > 0:
            time.sleep(self.delay)
        words = len(content.split())
        return f"Mock Summary: This note has {words} words. Looks good!"

    def close(self) -> None:
        pass


def _is_quota_error(body: dict) -> bool:
    error = body.get("error") if isinstance(body, dict) else None
    if not isinstance(error, dict):
        return False
    if error.get("code") == "insufficient_quota":
        return True
    return "quota" in str(error.get("message") or "").lower()


class OpenAISummarizer:
    """
    Chat-completions call to the provider. Every failure is collapsed into a
    degraded summary string; nothing propagates to the route.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-3.5-turbo",
        base_url: str = "https://api.openai.com/v1",
        timeout: float = 30.0,
        client: httpx.Client | None = None,
    ):
        self.model = model
        self.url = base_url.rstrip("/") + "/chat/completions"
        self.timeout = timeout
        self.headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
        self._owns_client = client is None
        self.client = client or httpx.Client(timeout=timeout)

    def _payload(self, content: str) -> dict:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": content},
            ],
        }

    def summarize(self, content: str) -> str:
        try:
            resp = self.client.post(self.url, headers=self.headers, json=self._payload(content))
            body = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("summarize request failed: %s", e)
            return fallback_summary(content)

        if resp.is_error:
            if _is_quota_error(body):
                logger.warning("summarize provider quota exceeded")
                return QUOTA_MESSAGE
            logger.warning("summarize provider error status=%s body=%s", resp.status_code, str(body)[:200])
            return fallback_summary(content)

        try:
            text = body["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            text = None
        if not isinstance(text, str):
            if text is not None:
                logger.warning("summarize provider returned non-text content type=%s", type(text).__name__)
            return EMPTY_MESSAGE
        return text.strip() or EMPTY_MESSAGE

    def close(self) -> None:
        if self._owns_client:
            self.client.close()


def build_summarizer(settings) -> Summarizer:
    if settings.OPENAI_API_KEY:
        logger.info("summarizer: provider model=%s", settings.SUMMARY_MODEL)
        return OpenAISummarizer(
            api_key=settings.OPENAI_API_KEY,
            model=settings.SUMMARY_MODEL,
            base_url=settings.OPENAI_BASE_URL,
            timeout=settings.SUMMARY_TIMEOUT_SEC,
        )
    logger.info("summarizer: mock mode (no OPENAI_API_KEY)")
    return MockSummarizer(delay=settings.SUMMARY_MOCK_DELAY_SEC)
