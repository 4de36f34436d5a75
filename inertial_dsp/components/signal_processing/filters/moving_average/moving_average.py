"""
Filtro de Média Móvel (Moving Average) causal.

Suaviza o sinal calculando a média de uma janela que termina
no ponto atual. Sem olhar para o futuro, sem wraparound e sem
preenchimento com zeros.

IMPORTANTE: No início do sinal a janela é truncada.
Exemplo com window=5:
  - Ponto 0: média de [0]           (1 dado)
  - Ponto 1: média de [0, 1]        (2 dados)
  - Ponto 2: média de [0, 1, 2]     (3 dados)
  - Ponto 3: média de [0, 1, 2, 3]  (4 dados)
  - Ponto 4+: média de últimos 5    (janela completa)
"""

import logging
import numpy as np
from typing import Optional, MutableSequence, Sequence

from ..base import SignalFilter, FilterRegistry, FilterStatus, write_buffer
from .....domain.validators import validate_buffers, check_positive_int

logger = logging.getLogger(__name__)


def calculate_moving_average(
    input_data: Sequence[float],
    output_data: MutableSequence[float],
    window_size: int,
    data_size: Optional[int] = None,
) -> FilterStatus:
    """
    Calcula a média móvel causal de `input_data` em `output_data`.

    `output[i]` é a média de `input[max(0, i-window_size+1) .. i]`.
    Os primeiros `window_size-1` pontos usam menos amostras.

    Args:
        input_data: Amostras de entrada (somente leitura)
        output_data: Buffer do chamador, sobrescrito em [0, data_size)
        window_size: Número máximo de amostras por média (>= 1)
        data_size: Quantidade de amostras (default: len(input_data))

    Returns:
        FilterStatus.OK, ou INVALID_INPUT sem escrever nada
    """
    validation = validate_buffers(input_data, output_data, data_size=data_size)
    check_positive_int(validation, window_size=window_size)
    if not validation.is_valid:
        logger.debug("Média móvel ignorada: %s", "; ".join(validation.errors))
        return FilterStatus.INVALID_INPUT

    n = validation.metadata["data_size"]
    signal = np.asarray(input_data, dtype=float)[:n]
    filtered = np.empty(n)

    # Ponto i: média de signal[max(0, i-window+1):i+1]
    for i in range(n):
        start = max(0, i - window_size + 1)
        filtered[i] = np.mean(signal[start:i + 1])

    write_buffer(output_data, filtered)
    return FilterStatus.OK


@FilterRegistry.register
class MovingAverageFilter(SignalFilter):
    """
    Filtro de média móvel simples causal (SMA - Simple Moving Average).

    Usa janela truncada no início do sinal.

    Parâmetros:
        window: Tamanho da janela (número de pontos)
    """

    name = "moving_average"
    description = "Média móvel causal - suavização básica"

    def __init__(self, window: int = 13, **kwargs):
        self.window = window
        super().__init__(window=window, **kwargs)

    def validate_params(self) -> None:
        if isinstance(self.window, bool) or not isinstance(self.window, (int, np.integer)):
            raise ValueError(f"window deve ser inteiro, recebido: {self.window!r}")
        if self.window < 1:
            raise ValueError(f"window deve ser >= 1, recebido: {self.window}")

    def apply(self, signal: np.ndarray, **kwargs) -> np.ndarray:
        signal = np.asarray(signal, dtype=float)
        if len(signal) == 0:
            return signal.copy()

        filtered = np.zeros(len(signal))
        status = calculate_moving_average(signal, filtered, int(self.window))
        self._ensure_ok(status, len(signal))
        return filtered
