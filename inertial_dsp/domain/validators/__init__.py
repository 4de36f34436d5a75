"""
Módulo de validação de dados.

Fornece validadores para buffers e parâmetros dos filtros.
"""

from .base import Validator, ValidationResult, ValidationConfig
from .buffer_validator import BufferValidator, validate_buffers, check_positive, check_positive_int

__all__ = [
    # Base
    "Validator",
    "ValidationResult",
    "ValidationConfig",

    # Validators
    "BufferValidator",
    "validate_buffers",
    "check_positive",
    "check_positive_int",
]
