"""
Tipos comuns aos validadores de buffers.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ValidationResult:
    """Erros bloqueiam a chamada; avisos apenas acompanham o resultado."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, **metadata) -> "ValidationResult":
        return cls(is_valid=True, metadata=metadata)

    @classmethod
    def fail(cls, error: str, **metadata) -> "ValidationResult":
        return cls(is_valid=False, errors=[error], metadata=metadata)

    def add_error(self, error: str) -> None:
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str) -> None:
        self.warnings.append(warning)


@dataclass
class ValidationConfig:
    """Tamanho mínimo aceito e tamanho efetivo pedido pelo chamador."""
    min_data_points: int = 1
    data_size: Optional[int] = None


class Validator(ABC):
    """Verificação de pré-condições sobre os dados de uma chamada."""

    name: str = "base"

    @abstractmethod
    def validate(self, data: Any, config: Optional[ValidationConfig] = None) -> ValidationResult:
        pass
