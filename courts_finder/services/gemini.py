"""Google Gemini content generation client."""
import logging
from typing import Any, Dict, Optional

from courts_finder.core.errors import UpstreamError
from courts_finder.services.upstream import UpstreamClient

logger = logging.getLogger(__name__)

DEFAULT_GENERATION_CONFIG = {
    "temperature": 0.7,
    "topP": 0.8,
    "topK": 40,
    "maxOutputTokens": 1024,
}


class GeminiClient(UpstreamClient):
    """Client for the Gemini ``generateContent`` endpoint."""

    provider_name = "Gemini"

    @property
    def api_key(self) -> Optional[str]:
        return self.settings.GOOGLE_GEMINI_API_KEY

    async def generate_content(
        self, prompt: str, config: Optional[Dict[str, Any]] = None
    ) -> str:
        """
        Generate text for a prompt.

        Args:
            prompt: Prompt text
            config: Generation config overrides

        Returns:
            Text of the first candidate
        """
        api_key = self._require_api_key()
        generation_config = dict(DEFAULT_GENERATION_CONFIG)
        if config:
            generation_config.update(config)

        url = (
            f"{self.settings.GEMINI_BASE_URL}/models/"
            f"{self.settings.GEMINI_MODEL}:generateContent"
        )
        data = await self._make_request(
            "POST",
            url,
            params={"key": api_key},
            json_data={
                "contents": [{"parts": [{"text": prompt}]}],
                "generationConfig": generation_config,
            },
        )

        try:
            return data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            logger.error("Unexpected Gemini response shape")
            raise UpstreamError(
                "Invalid response format from Gemini API", status_code=502, payload=data
            )

    async def generate_court_recommendations(
        self, location: str, sport: str, preferences: Optional[str] = None
    ) -> str:
        prompt = (
            f"As a sports facility expert, provide personalized recommendations "
            f"for {sport} courts in {location}.\n"
        )
        if preferences:
            prompt += f"User preferences: {preferences}\n"
        prompt += (
            "\nPlease provide:\n"
            "1. Top 3 recommended areas/districts to look for courts\n"
            f"2. Key features to look for in a quality {sport} facility\n"
            "3. Typical pricing expectations\n"
            "4. Best times to play for availability and rates\n"
            "\nKeep the response concise and helpful for someone looking to book court time."
        )
        return await self.generate_content(prompt)
