"""
Suavização Exponencial in-place.

Variante de parâmetro único do passa-baixa: alpha fixo e o
próprio buffer de entrada é sobrescrito.
"""

import logging
import numpy as np
from typing import Optional, MutableSequence

from ..base import SignalFilter, FilterRegistry, FilterStatus, write_buffer
from .....domain.validators import validate_buffers
from .....infrastructure.config.constants import DEFAULT_SMOOTHING_ALPHA

logger = logging.getLogger(__name__)


def exponential_smoothing_in_place(
    data: MutableSequence[float],
    data_size: Optional[int] = None,
    alpha: float = DEFAULT_SMOOTHING_ALPHA,
) -> FilterStatus:
    """
    Suaviza `data` no próprio buffer.

    `data[0]` é a semente; para i >= 1,
    `data[i] = alpha * data[i] + (1 - alpha) * data[i-1]`, onde
    `data[i-1]` já é o valor suavizado.

    Returns:
        FilterStatus.OK, ou INVALID_INPUT sem modificar o buffer
    """
    validation = validate_buffers(data, data_size=data_size)
    if not 0 < alpha <= 1:
        validation.add_error(f"alpha deve estar entre 0 e 1, recebido: {alpha}")
    if not validation.is_valid:
        logger.debug("Suavização exponencial ignorada: %s", "; ".join(validation.errors))
        return FilterStatus.INVALID_INPUT

    n = validation.metadata["data_size"]
    smoothed = np.array(data, dtype=float)[:n]

    for i in range(1, n):
        smoothed[i] = alpha * smoothed[i] + (1 - alpha) * smoothed[i-1]

    write_buffer(data, smoothed)
    return FilterStatus.OK


@FilterRegistry.register
class ExponentialSmoothingFilter(SignalFilter):
    """
    Filtro de suavização exponencial com alpha fixo.

    `apply` trabalha sobre uma cópia; para sobrescrever o buffer
    use `exponential_smoothing_in_place` diretamente.

    Parâmetros:
        alpha: Fator de suavização (0-1). Maior = mais peso para valores recentes
    """

    name = "exponential"
    description = "Suavização exponencial (alpha fixo)"

    def __init__(self, alpha: float = DEFAULT_SMOOTHING_ALPHA, **kwargs):
        self.alpha = alpha
        super().__init__(alpha=alpha, **kwargs)

    def validate_params(self) -> None:
        if not 0 < self.alpha <= 1:
            raise ValueError(f"alpha deve estar entre 0 e 1, recebido: {self.alpha}")

    def apply(self, signal: np.ndarray, **kwargs) -> np.ndarray:
        smoothed = np.array(signal, dtype=float)
        if len(smoothed) == 0:
            return smoothed

        status = exponential_smoothing_in_place(smoothed, alpha=self.alpha)
        self._ensure_ok(status, len(smoothed))
        return smoothed
