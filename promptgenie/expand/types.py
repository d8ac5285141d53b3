# Parameter set that steers template expansion.
# Each field is a closed set of values; see OPTIONS for the allowed lists.

from __future__ import annotations
from typing import Dict, Literal, Tuple, get_args

from pydantic import BaseModel, ConfigDict

Tone = Literal["professional", "friendly", "technical", "casual"]
Complexity = Literal["basic", "intermediate", "advanced"]
Format = Literal["concise", "detailed", "comprehensive"]
Examples = Literal["none", "few", "many"]
Constraints = Literal["minimal", "moderate", "strict"]


class PromptParameters(BaseModel):
    """The five categorical choices for one generation."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    tone: Tone
    complexity: Complexity
    format: Format
    examples: Examples
    constraints: Constraints


OPTIONS: Dict[str, Tuple[str, ...]] = {
    name: get_args(field.annotation)
    for name, field in PromptParameters.model_fields.items()
}

DEFAULT_PARAMETERS = PromptParameters(
    tone="professional",
    complexity="intermediate",
    format="detailed",
    examples="few",
    constraints="moderate",
)
