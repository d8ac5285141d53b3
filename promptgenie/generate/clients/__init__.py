# Model client selection.
# Every client exposes generate(messages, params) -> (text, meta).

from promptgenie.settings import Settings
from .echo_dev_client import EchoDevClient

PROVIDERS = ("gemini", "openai", "ollama", "echo")


def build_model_client(cfg: Settings):
    provider = (cfg.LLM_PROVIDER or "gemini").strip().lower()
    if provider == "gemini":
        from .gemini_client import GeminiClient
        return GeminiClient(model=cfg.GEMINI_MODEL, api_key=cfg.GEMINI_AI_API)
    if provider == "openai":
        from .openai_client import OpenAIClient
        return OpenAIClient(model=cfg.OPENAI_MODEL, api_key=cfg.OPENAI_API_KEY)
    if provider == "ollama":
        from .ollama_client import OllamaClient
        return OllamaClient(model=cfg.OLLAMA_MODEL, host=cfg.OLLAMA_HOST)
    if provider == "echo":
        return EchoDevClient()
    raise ValueError(f"Unknown LLM_PROVIDER {provider!r}; expected one of {', '.join(PROVIDERS)}")
