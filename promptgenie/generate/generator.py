# PromptGenerator: the gateway's call path.
# - validates prompt + parameters
# - expands the template
# - sends one message to whichever model client it was given
# - returns Completion or GenerationError, never raises for request data

from __future__ import annotations
import os
from typing import Any, Optional

import yaml

from promptgenie.expand import expand, validate_parameters, InvalidParameters
from promptgenie.log import get_logger
from .types import Message, ModelParams, Completion, GenerationError, GenerationResult, ErrorKind

FALLBACK_MESSAGE = "Failed to generate prompt"

logger = get_logger("promptgenie.generate")


def _message_of(exc: BaseException) -> str:
    return str(exc) or FALLBACK_MESSAGE


class PromptGenerator:
    def __init__(self, model_client, config_path: Optional[str] = None):
        self.model_client = model_client
        self.config_path = config_path
        self.cfg = self._load_config()

    def _load_config(self) -> dict:
        if not self.config_path or not os.path.exists(self.config_path):
            return {}
        with open(self.config_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def _params(self) -> ModelParams:
        return ModelParams(
            temperature=self.cfg.get("temperature"),
            max_tokens=self.cfg.get("max_tokens"),
        )

    def generate(self, prompt: Any, parameters: Any) -> GenerationResult:
        """Main entry point for generation."""
        if not isinstance(prompt, str) or not prompt.strip():
            return GenerationError(ErrorKind.VALIDATION, "Prompt is required")

        checked = validate_parameters(parameters)
        if isinstance(checked, InvalidParameters):
            return GenerationError(ErrorKind.VALIDATION, "Invalid parameters", violations=checked.violations)

        try:
            instruction = expand(prompt, checked.parameters)
            messages = [Message(role="user", content=instruction)]
            params = self._params()
        except Exception as e:
            logger.error("Error generating prompt: %s", e)
            return GenerationError(ErrorKind.INTERNAL, _message_of(e))

        try:
            text, meta = self.model_client.generate(messages, params)
        except Exception as e:
            logger.error("Error generating prompt: %s", e)
            return GenerationError(ErrorKind.UPSTREAM, _message_of(e))

        if not isinstance(text, str):
            logger.error("Error generating prompt: model returned %s instead of text", type(text).__name__)
            return GenerationError(ErrorKind.UPSTREAM, "Model returned no text")

        return Completion(text=text, meta=meta)
