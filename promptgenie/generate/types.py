# Simple, typed dataclasses shared across generator modules.

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union


@dataclass
class Message:
    """Single chat turn: system, user, or assistant."""
    role: str
    content: str


@dataclass
class ModelParams:
    """LLM parameters per request. None means provider default."""
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None


class ErrorKind(str, Enum):
    VALIDATION = "ValidationError"
    UPSTREAM = "UpstreamError"
    INTERNAL = "InternalError"


@dataclass
class Completion:
    """Successful generation: model text, untouched."""
    text: str
    meta: Dict[str, Any] = field(default_factory=dict)


@dataclass
class GenerationError:
    """Failed generation, tagged with what went wrong."""
    kind: ErrorKind
    message: str
    violations: List[str] = field(default_factory=list)

    @property
    def status(self) -> int:
        return 400 if self.kind is ErrorKind.VALIDATION else 500

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.message, "status": self.status}
        if self.violations:
            body["violations"] = list(self.violations)
        return body


GenerationResult = Union[Completion, GenerationError]
