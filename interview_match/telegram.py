"""Minimal client for the Telegram Bot HTTP API."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Iterator, Optional

import requests

log = logging.getLogger(__name__)

API_URL = "https://api.telegram.org"

_REQUEST_TIMEOUT = 30.0
_POLL_MARGIN = 10.0


class TelegramError(Exception):
    """Raised when a Bot API call fails or returns an error."""

    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.error_code = error_code


class TelegramAPI:
    """Calls Bot API methods over HTTPS with JSON payloads."""

    def __init__(
        self,
        token: str,
        *,
        session: Any = None,
        base_url: str = API_URL,
        debug: bool = False,
        retry_delay: float = 3.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if not token:
            raise ValueError("a bot token is required")
        self._token = token
        self._session = session if session is not None else requests.Session()
        self._base_url = base_url.rstrip("/")
        self._retry_delay = retry_delay
        self._sleep = sleep
        self.debug = debug

    def _call(
        self,
        method: str,
        params: Optional[dict] = None,
        timeout: float = _REQUEST_TIMEOUT,
    ) -> Any:
        url = f"{self._base_url}/bot{self._token}/{method}"
        payload = {key: value for key, value in (params or {}).items() if value is not None}
        if self.debug:
            log.debug("Endpoint: %s, params: %s", method, payload)
        try:
            response = self._session.post(url, json=payload, timeout=timeout)
        except requests.RequestException as exc:
            raise TelegramError(f"{method} request failed: {type(exc).__name__}") from exc
        try:
            body = response.json()
        except ValueError as exc:
            raise TelegramError(f"{method} returned a body that is not JSON") from exc
        if self.debug:
            log.debug("Endpoint: %s, response: %s", method, body)
        if not isinstance(body, dict) or not body.get("ok"):
            description = "request failed"
            code = None
            if isinstance(body, dict):
                description = body.get("description", description)
                code = body.get("error_code")
            raise TelegramError(f"{method}: {description}", code)
        return body.get("result")

    def get_me(self) -> dict:
        """Return the bot's own user record."""
        return self._call("getMe")

    def get_updates(self, offset: int = 0, timeout: int = 0) -> list[dict]:
        """Fetch pending updates starting at ``offset``, long-polling ``timeout`` seconds."""
        result = self._call(
            "getUpdates",
            {"offset": offset, "timeout": timeout},
            timeout=timeout + _POLL_MARGIN,
        )
        return list(result or [])

    def iter_updates(self, timeout: int = 60) -> Iterator[dict]:
        """Yield updates forever, retrying after failed polls."""
        offset = 0
        while True:
            try:
                updates = self.get_updates(offset, timeout)
            except TelegramError as exc:
                log.warning("Failed to get updates, retrying in %s seconds: %s", self._retry_delay, exc)
                self._sleep(self._retry_delay)
                continue
            for update in updates:
                offset = max(offset, update.get("update_id", -1) + 1)
                yield update

    def send_message(
        self,
        chat_id: int,
        text: str,
        reply_markup: Optional[dict] = None,
        parse_mode: Optional[str] = None,
    ) -> dict:
        """Send a text message, optionally with a keyboard and parse mode."""
        return self._call(
            "sendMessage",
            {
                "chat_id": chat_id,
                "text": text,
                "reply_markup": reply_markup,
                "parse_mode": parse_mode,
            },
        )

    def answer_callback_query(self, callback_query_id: str, text: str = "") -> Any:
        """Acknowledge a button press so the client stops its loading indicator."""
        return self._call(
            "answerCallbackQuery",
            {"callback_query_id": callback_query_id, "text": text},
        )