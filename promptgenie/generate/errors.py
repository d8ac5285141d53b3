from typing import Any, Optional


class ProviderError(Exception):
    """Raised by a model client when the outbound call fails."""

    def __init__(self, provider: str, message: str = "", status_code: Optional[int] = None, response: Any = None):
        super().__init__(message)
        self.provider = provider
        self.message = message
        self.status_code = status_code
        self.response = response

    def __str__(self) -> str:
        return self.message


class AuthenticationError(ProviderError):
    def __init__(self, provider: str, message: str = "Missing API key", **kwargs):
        super().__init__(provider, message=message, **kwargs)
