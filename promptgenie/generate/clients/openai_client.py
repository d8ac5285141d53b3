# Client for OpenAI Chat Completions API.
# Follows the same interface as GeminiClient.

from typing import List, Tuple, Dict, Any, Optional
from openai import OpenAI
from ..errors import AuthenticationError, ProviderError
from ..types import Message, ModelParams

class OpenAIClient:
    def __init__(self, model: str = "gpt-4o-mini", api_key: Optional[str] = None):
        self.model = model
        self.client = OpenAI(api_key=api_key) if api_key else None

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        if self.client is None:
            raise AuthenticationError("OpenAI", message="Missing OpenAI API key (set OPENAI_API_KEY)")
        formatted = [{"role": m.role, "content": m.content} for m in messages]
        kwargs: Dict[str, Any] = {}
        if params.temperature is not None:
            kwargs["temperature"] = params.temperature
        if params.max_tokens is not None:
            kwargs["max_tokens"] = params.max_tokens
        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                messages=formatted,
                **kwargs,
            )
        except Exception as e:
            raise ProviderError("OpenAI", message=str(e)) from e
        text = resp.choices[0].message.content
        if text is None:
            raise ProviderError("OpenAI", message="OpenAI returned no text")
        meta = {"engine": "openai", "model": self.model}
        return text, meta
