# Generator package

# Makes generate/ importable and exposes key interfaces.

from .generator import PromptGenerator, FALLBACK_MESSAGE
from .types import Message, ModelParams, Completion, GenerationError, ErrorKind
from .errors import ProviderError, AuthenticationError
from .clients import build_model_client
from .clients.echo_dev_client import EchoDevClient

__all__ = [
    "PromptGenerator",
    "FALLBACK_MESSAGE",
    "Message",
    "ModelParams",
    "Completion",
    "GenerationError",
    "ErrorKind",
    "ProviderError",
    "AuthenticationError",
    "build_model_client",
    "EchoDevClient",
]
