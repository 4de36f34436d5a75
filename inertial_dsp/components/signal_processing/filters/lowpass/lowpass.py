"""
Filtro Passa-Baixa (Low Pass Filter) de primeira ordem.

Remove componentes de alta frequência do sinal,
preservando tendências e variações lentas.

Equivalente discreto de um circuito RC (Butterworth de ordem 1):
    dt    = 1 / sampling_rate
    RC    = 1 / (2π · cutoff_frequency)
    alpha = dt / (RC + dt)
    y[0]  = x[0]
    y[i]  = alpha · x[i] + (1 - alpha) · y[i-1]

A recorrência é IIR: cada saída depende da anterior, então o
cálculo é inerentemente sequencial.
"""

import logging
import numpy as np
from typing import Optional, MutableSequence, Sequence

from ..base import SignalFilter, FilterRegistry, FilterStatus, write_buffer
from .....domain.validators import ValidationResult, validate_buffers, check_positive
from .....infrastructure.config.constants import TWO_PI

logger = logging.getLogger(__name__)


def low_pass_alpha(cutoff_frequency: float, sampling_rate: float) -> float:
    """Fator de suavização do filtro RC para as frequências dadas (Hz)."""
    dt = 1.0 / sampling_rate
    rc = 1.0 / (TWO_PI * cutoff_frequency)
    return dt / (rc + dt)


def butterworth_low_pass(
    input_data: Sequence[float],
    output_data: MutableSequence[float],
    cutoff_frequency: float,
    sampling_rate: float,
    data_size: Optional[int] = None,
) -> FilterStatus:
    """
    Aplica o passa-baixa de primeira ordem de `input_data` em `output_data`.

    Args:
        input_data: Amostras de entrada (somente leitura)
        output_data: Buffer do chamador, sobrescrito em [0, data_size)
        cutoff_frequency: Frequência de corte em Hz (> 0)
        sampling_rate: Taxa de amostragem em Hz (> 0)
        data_size: Quantidade de amostras (default: len(input_data))

    Returns:
        FilterStatus.OK, ou INVALID_INPUT sem escrever nada
    """
    validation = validate_buffers(input_data, output_data, data_size=data_size)
    check_positive(validation, cutoff_frequency=cutoff_frequency, sampling_rate=sampling_rate)
    if not validation.is_valid:
        logger.debug("Passa-baixa ignorado: %s", "; ".join(validation.errors))
        return FilterStatus.INVALID_INPUT

    n = validation.metadata["data_size"]
    signal = np.asarray(input_data, dtype=float)[:n]
    alpha = low_pass_alpha(float(cutoff_frequency), float(sampling_rate))

    # Filtro IIR de primeira ordem
    filtered = np.empty(n)
    filtered[0] = signal[0]
    for i in range(1, n):
        filtered[i] = alpha * signal[i] + (1 - alpha) * filtered[i-1]

    write_buffer(output_data, filtered)
    return FilterStatus.OK


@FilterRegistry.register
class LowPassFilter(SignalFilter):
    """
    Filtro passa-baixa RC de primeira ordem.

    Parâmetros:
        cutoff_freq: Frequência de corte (Hz)
        sample_rate: Taxa de amostragem (Hz)
    """

    name = "lowpass"
    description = "Filtro passa-baixa de primeira ordem (Butterworth ordem 1)"

    def __init__(
        self,
        cutoff_freq: float = 5.0,
        sample_rate: float = 50.0,
        **kwargs
    ):
        self.cutoff_freq = cutoff_freq
        self.sample_rate = sample_rate
        super().__init__(cutoff_freq=cutoff_freq, sample_rate=sample_rate, **kwargs)

    def validate_params(self) -> None:
        # Mesma regra das funções de buffer: número finito > 0
        result = check_positive(
            ValidationResult.ok(),
            cutoff_freq=self.cutoff_freq,
            sample_rate=self.sample_rate,
        )
        if not result.is_valid:
            raise ValueError("; ".join(result.errors))

    @property
    def alpha(self) -> float:
        return low_pass_alpha(self.cutoff_freq, self.sample_rate)

    def apply(self, signal: np.ndarray, **kwargs) -> np.ndarray:
        signal = np.asarray(signal, dtype=float)
        if len(signal) == 0:
            return signal.copy()

        filtered = np.zeros(len(signal))
        status = butterworth_low_pass(signal, filtered, self.cutoff_freq, self.sample_rate)
        self._ensure_ok(status, len(signal))
        return filtered
