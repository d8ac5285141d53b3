# Client for the Google Gemini API (the default backend).
# Exposes generate(messages, params) like the other clients.

from typing import Any, Dict, List, Optional, Tuple

from google import genai
from google.genai import types

from ..errors import AuthenticationError, ProviderError
from ..types import Message, ModelParams


class GeminiClient:
    def __init__(self, model: str = "gemini-1.5-pro", api_key: Optional[str] = None):
        self.model = model
        # No key means every call fails, but the app still starts.
        self.client = genai.Client(api_key=api_key) if api_key else None

    def _config(self, params: ModelParams) -> Optional[types.GenerateContentConfig]:
        if params.temperature is None and params.max_tokens is None:
            return None
        return types.GenerateContentConfig(
            temperature=params.temperature,
            max_output_tokens=params.max_tokens,
        )

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        if self.client is None:
            raise AuthenticationError("Gemini", message="Missing Gemini API key (set GEMINI_AI_API)")
        contents = "\n\n".join(m.content for m in messages)
        try:
            resp = self.client.models.generate_content(
                model=self.model,
                contents=contents,
                config=self._config(params),
            )
        except Exception as e:
            raise ProviderError("Gemini", message=str(e)) from e
        text = resp.text
        if text is None:
            raise ProviderError("Gemini", message="Gemini returned no text")
        return text, {"engine": "gemini", "model": self.model}
