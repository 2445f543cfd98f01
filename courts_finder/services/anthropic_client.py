"""Anthropic Messages API client."""
import logging
from typing import Dict, List, Optional

from courts_finder.services.upstream import UpstreamClient

logger = logging.getLogger(__name__)


class ClaudeClient(UpstreamClient):
    """Minimal client for ``POST /v1/messages``."""

    provider_name = "Anthropic"

    @property
    def api_key(self) -> Optional[str]:
        return self.settings.ANTHROPIC_API_KEY

    async def create_message(
        self,
        system: str,
        messages: List[Dict[str, str]],
        max_tokens: int = 2000,
        temperature: float = 0.7,
    ) -> str:
        """
        Send a conversation to Claude and return the reply text.

        Args:
            system: System prompt
            messages: Conversation as ``{"role", "content"}`` dicts, oldest first
            max_tokens: Reply token budget
            temperature: Sampling temperature

        Returns:
            Concatenated text blocks of the reply (empty if there are none)
        """
        api_key = self._require_api_key()

        data = await self._make_request(
            "POST",
            f"{self.settings.ANTHROPIC_BASE_URL}/v1/messages",
            json_data={
                "model": self.settings.CLAUDE_MODEL,
                "max_tokens": max_tokens,
                "temperature": temperature,
                "system": system,
                "messages": messages,
            },
            headers={
                "x-api-key": api_key,
                "anthropic-version": self.settings.ANTHROPIC_VERSION,
                "content-type": "application/json",
            },
        )

        blocks = data.get("content") or []
        return "".join(
            block.get("text", "") for block in blocks if block.get("type") == "text"
        )
