"""HTTP client side of the chat loop.

The server is stateless: the caller owns the conversation, appends the
user's turn *before* sending, and posts the whole history every time.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

TRANSPORT_ERROR_REPLY = "Sorry, an error occurred while processing your request."


class ChatClient:
    def __init__(
        self,
        base_url: str,
        timeout: float = 30,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    def send(self, history: List[Dict[str, str]]) -> str:
        """Post the full history and return the text to show as the assistant turn."""
        try:
            r = self._session.post(
                f"{self.base_url}/api/chat",
                json={"messages": history},
                headers={"Content-Type": "application/json; charset=utf-8"},
                timeout=self.timeout,
            )
            data = r.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Chat request to %s failed: %s", self.base_url, exc)
            return TRANSPORT_ERROR_REPLY

        if not isinstance(data, dict):
            logger.warning("Unexpected chat response body: %r", data)
            return TRANSPORT_ERROR_REPLY
        if data.get("error"):
            return f"Error: {data['error']}"
        return data.get("message") or TRANSPORT_ERROR_REPLY


class ChatSession:
    """Client-held conversation; each message is {"role": ..., "content": ...}."""

    def __init__(self, client: ChatClient, messages: Optional[List[Dict[str, str]]] = None):
        self.client = client
        self.messages: List[Dict[str, str]] = messages if messages is not None else []

    def submit(self, text: str) -> Optional[str]:
        user_msg = text.strip()
        if not user_msg:
            return None
        self.messages.append({"role": "user", "content": user_msg})
        reply = self.client.send(list(self.messages))
        self.messages.append({"role": "assistant", "content": reply})
        return reply
