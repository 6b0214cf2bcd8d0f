from domain.dispatch.builder import FALLBACK_REF, build, resolve_ref
from domain.dispatch.errors import (
    DISPATCH_VALIDATION_ERROR_PREFIX,
    DispatchValidationError,
    MissingRefError,
    MissingRequiredInputsError,
)
from domain.dispatch.validators import ValidationResult, validate

__all__ = [
    "DISPATCH_VALIDATION_ERROR_PREFIX",
    "DispatchValidationError",
    "FALLBACK_REF",
    "MissingRefError",
    "MissingRequiredInputsError",
    "ValidationResult",
    "build",
    "resolve_ref",
    "validate",
]
