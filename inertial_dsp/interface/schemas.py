"""
Schemas de request/response para a API.
"""

from typing import Dict, Any, Optional, List
from pydantic import BaseModel, Field


class SignalRequest(BaseModel):
    """Campos comuns: amostras e tamanho efetivo opcional."""
    samples: List[float] = Field(..., description="Amostras de eixo único")
    data_size: Optional[int] = Field(None, description="Quantidade de amostras (default: todas)")


class MovingAverageRequest(SignalRequest):
    window_size: int = Field(13, description="Janela da média móvel causal")


class LowPassRequest(SignalRequest):
    cutoff_frequency: float = Field(5.0, description="Frequência de corte (Hz)")
    sampling_rate: float = Field(50.0, description="Taxa de amostragem (Hz)")


class ExponentialRequest(SignalRequest):
    alpha: float = Field(0.1, description="Fator de suavização (0-1]")


class MotionRequest(SignalRequest):
    threshold: float = Field(0.5, description="Limiar de |segunda derivada|")
    sampling_rate: float = Field(50.0, description="Taxa de amostragem (Hz)")


class ZuptRequest(BaseModel):
    accel: List[float] = Field(..., description="Acelerações")
    velocity: List[float] = Field(..., description="Velocidades a corrigir")
    threshold: float = Field(0.1, description="Limiar de |aceleração| para repouso")
    continuous_count_threshold: int = Field(5, description="Amostras consecutivas necessárias")
    data_size: Optional[int] = Field(None, description="Quantidade de amostras (default: todas)")


class PipelineRequest(BaseModel):
    samples: List[float]
    filters: List[Dict[str, Any]] = Field(
        default_factory=list,
        description="Lista ordenada de filtros: {'name': ..., <parâmetros>}",
    )


class SignalResponse(BaseModel):
    """Saída dos filtros; com status invalid_input, `output` repete a entrada."""
    status: str
    output: List[float]


class ZuptResponse(BaseModel):
    status: int = Field(..., description="-1 inválido, 0 sem repouso, 1 repouso confirmado")
    velocity: List[float]


class PipelineResponse(BaseModel):
    success: bool
    output: List[float] = Field(default_factory=list)
    steps: List[Dict[str, Any]] = Field(default_factory=list)
    error: Optional[str] = None
