"""
Filtros de Sinal - Módulo de processamento de sinais.

Implementa os filtros de pré-processamento de amostras inerciais
de eixo único (acelerômetro/giroscópio).
"""

from .base import SignalFilter, FilterRegistry, FilterStatus, BlockInput, BlockOutput
from .moving_average import MovingAverageFilter, calculate_moving_average
from .lowpass import LowPassFilter, butterworth_low_pass, low_pass_alpha
from .exponential import ExponentialSmoothingFilter, exponential_smoothing_in_place
from .pipeline import (
    FilterPipeline,
    create_filter_pipeline,
    create_smoothing_pipeline,
)

__all__ = [
    # Base
    "SignalFilter",
    "FilterRegistry",
    "FilterStatus",
    "BlockInput",
    "BlockOutput",

    # Moving Average
    "MovingAverageFilter",
    "calculate_moving_average",

    # Low Pass
    "LowPassFilter",
    "butterworth_low_pass",
    "low_pass_alpha",

    # Exponential
    "ExponentialSmoothingFilter",
    "exponential_smoothing_in_place",

    # Pipeline
    "FilterPipeline",
    "create_filter_pipeline",
    "create_smoothing_pipeline",
]
