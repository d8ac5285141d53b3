# Schema check for the raw `parameters` object of a request.
# Returns a tagged result instead of raising, so callers branch explicitly.

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List, Union

from pydantic import ValidationError

from .types import OPTIONS, PromptParameters


@dataclass
class ValidParameters:
    parameters: PromptParameters


@dataclass
class InvalidParameters:
    violations: List[str] = field(default_factory=list)


ParametersResult = Union[ValidParameters, InvalidParameters]


def _describe(error: dict) -> str:
    loc = error.get("loc") or ()
    name = str(loc[0]) if loc else "parameters"
    if error.get("type") == "missing":
        return f"{name}: field required"
    allowed = OPTIONS.get(name)
    if allowed:
        return f"{name}: must be one of {', '.join(allowed)}"
    return f"{name}: {error.get('msg', 'invalid value')}"


def validate_parameters(raw: Any) -> ParametersResult:
    """Check every field is present and a member of its enumeration.

    Unknown values are rejected rather than coerced to a default; all
    violations are reported together.
    """
    if not isinstance(raw, dict):
        return InvalidParameters(["parameters: must be an object"])
    try:
        return ValidParameters(PromptParameters.model_validate(raw))
    except ValidationError as e:
        return InvalidParameters([_describe(err) for err in e.errors()])
