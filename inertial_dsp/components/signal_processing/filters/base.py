"""
Base classes para filtros de sinal.

Define a interface comum que todos os filtros devem implementar,
o status tipado das funções sobre buffers e um registro para
descoberta automática de filtros.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Type, Optional, MutableSequence
import numpy as np


class FilterStatus(str, Enum):
    """
    Resultado das funções que escrevem em buffers do chamador.

    INVALID_INPUT significa que nada foi escrito: o buffer de saída
    continua exatamente como o chamador entregou.
    """
    OK = "ok"
    INVALID_INPUT = "invalid_input"

    @property
    def is_ok(self) -> bool:
        return self is FilterStatus.OK


def write_buffer(output_data: MutableSequence[float], values: np.ndarray) -> None:
    """Copia `values` para o início do buffer de saída do chamador."""
    n = len(values)
    if isinstance(output_data, np.ndarray):
        output_data[:n] = values
    else:
        output_data[:n] = [float(v) for v in values]


@dataclass
class BlockInput:
    """Entrada padronizada para blocos de processamento."""
    data: np.ndarray  # Amostras 1D
    metadata: Optional[Dict[str, Any]] = None  # Metadados extras


@dataclass
class BlockOutput:
    """Saída padronizada para blocos de processamento."""
    data: np.ndarray  # Dados processados
    metadata: Optional[Dict[str, Any]] = None  # Metadados/resultados
    success: bool = True
    error: Optional[str] = None


class SignalFilter(ABC):
    """
    Interface base para todos os filtros de sinal.

    Cada filtro deve:
    1. Ter um nome único (class attribute `name`)
    2. Implementar o método `apply()` para processar o sinal
    3. Opcionalmente implementar `validate_params()` para validação
    """

    name: str = "base"
    description: str = "Filtro base abstrato"

    def __init__(self, **params):
        """
        Inicializa o filtro com parâmetros.

        Args:
            **params: Parâmetros específicos do filtro
        """
        self.params = params
        self.validate_params()

    def validate_params(self) -> None:
        """
        Valida os parâmetros do filtro.

        Raises:
            ValueError: Se parâmetros inválidos
        """
        pass  # Override em subclasses se necessário

    @abstractmethod
    def apply(self, signal: np.ndarray, **kwargs) -> np.ndarray:
        """
        Aplica o filtro e retorna um novo array.

        Args:
            signal: Amostras 1D

        Returns:
            Sinal filtrado (o array de entrada não é modificado)
        """
        pass

    def _ensure_ok(self, status: FilterStatus, size: int) -> None:
        """Converte o status da função de buffer em exceção."""
        if not status.is_ok:
            raise ValueError(f"Filtro '{self.name}' rejeitou o sinal ({size} pontos, params={self.params})")

    def process(self, input_data: BlockInput, config: Optional[Dict[str, Any]] = None) -> BlockOutput:
        """
        Processa dados usando a interface de blocos.

        Erros não são propagados: viram BlockOutput com success=False
        e os dados originais.
        """
        try:
            samples = np.asarray(input_data.data, dtype=float)
            if samples.ndim != 1:
                raise ValueError(f"Dados devem ser array 1D, recebido shape {samples.shape}")

            filtered = self.apply(samples)

            metadata = {
                "filter_applied": self.name,
                "filter_params": self.params,
                **(input_data.metadata or {})
            }

            return BlockOutput(
                data=filtered,
                metadata=metadata,
                success=True
            )

        except Exception as e:
            return BlockOutput(
                data=input_data.data,  # Retorna dados originais em caso de erro
                metadata=input_data.metadata,
                success=False,
                error=str(e)
            )

    def __repr__(self) -> str:
        params_str = ", ".join(f"{k}={v}" for k, v in self.params.items())
        return f"{self.__class__.__name__}({params_str})"


class FilterRegistry:
    """
    Registro de filtros disponíveis.

    Permite descobrir filtros pelo nome e criar instâncias
    a partir de configurações JSON.
    """

    _filters: Dict[str, Type[SignalFilter]] = {}

    @classmethod
    def register(cls, filter_class: Type[SignalFilter]) -> Type[SignalFilter]:
        """
        Decorator para registrar um filtro.

        Usage:
            @FilterRegistry.register
            class MyFilter(SignalFilter):
                name = "my_filter"
                ...
        """
        cls._filters[filter_class.name] = filter_class
        return filter_class

    @classmethod
    def get(cls, name: str) -> Type[SignalFilter]:
        """
        Obtém uma classe de filtro pelo nome.

        Raises:
            KeyError: Se filtro não registrado
        """
        if name not in cls._filters:
            available = list(cls._filters.keys())
            raise KeyError(f"Filtro '{name}' não registrado. Disponíveis: {available}")
        return cls._filters[name]

    @classmethod
    def create(cls, name: str, **params) -> SignalFilter:
        """
        Cria uma instância de filtro.

        Args:
            name: Nome do filtro
            **params: Parâmetros do filtro

        Returns:
            Instância do filtro configurado
        """
        filter_class = cls.get(name)
        return filter_class(**params)

    @classmethod
    def list_filters(cls) -> Dict[str, str]:
        """Lista todos os filtros registrados com suas descrições."""
        return {
            name: filter_cls.description
            for name, filter_cls in cls._filters.items()
        }
