# auth_validation/models/__init__.py
from .validation_result import ValidationResult

__all__ = [
    "ValidationResult",
]
