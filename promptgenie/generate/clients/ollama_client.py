# Client for Ollama local inference.

import requests
from typing import List, Tuple, Dict, Any
from ..errors import ProviderError
from ..types import Message, ModelParams

class OllamaClient:
    def __init__(self, model: str = "mistral:7b-instruct", host: str = "http://localhost:11434"):
        self.model = model
        self.host = host.rstrip("/")

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        options: Dict[str, Any] = {}
        if params.temperature is not None:
            options["temperature"] = float(params.temperature)
        if params.max_tokens is not None:
            options["num_predict"] = int(params.max_tokens)
        payload = {
            "model": self.model,
            "prompt": self._compose_prompt(messages),
            "stream": False,
            "options": options,
        }
        url = f"{self.host}/api/generate"
        try:
            resp = requests.post(url, json=payload, timeout=180)
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            raise ProviderError("Ollama", message=str(e)) from e
        return data.get("response", ""), {"engine": "ollama", "model": self.model}

    def _compose_prompt(self, messages: List[Message]) -> str:
        # a lone user turn goes through as-is
        if len(messages) == 1 and messages[0].role == "user":
            return messages[0].content
        parts = []
        for m in messages:
            parts.append(f"{m.role.upper()}:\n{m.content.strip()}\n")
        return "\n".join(parts)
