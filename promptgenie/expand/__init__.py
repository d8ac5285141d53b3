# Expander package
# Exposes the template expander and the parameter validator.

from .prompts import expand
from .types import PromptParameters, DEFAULT_PARAMETERS, OPTIONS
from .validate import validate_parameters, ValidParameters, InvalidParameters

__all__ = [
    "expand",
    "PromptParameters",
    "DEFAULT_PARAMETERS",
    "OPTIONS",
    "validate_parameters",
    "ValidParameters",
    "InvalidParameters",
]
