"""
Detector de movimento baseado na segunda derivada.

Trata o sinal como posição e estima a aceleração por
diferenças finitas nos pontos interiores:
    accel[i] = (x[i+1] - 2·x[i] + x[i-1]) / dt²

Os pontos 0 e n-1 não têm segunda derivada nesse esquema e
ficam fixos em 0.0, logo nunca são classificados como movimento.
"""

import logging
import numpy as np
from typing import Optional, MutableSequence, Sequence

from ..base import (
    MotionDetector,
    DetectorRegistry,
    DetectionConfig,
    DetectionResult,
)
from ...signal_processing.filters.base import FilterStatus, write_buffer
from ....domain.validators import validate_buffers, check_positive
from ....infrastructure.config.constants import MIN_MOTION_SAMPLES, MOTION_DETECTED, NO_MOTION

logger = logging.getLogger(__name__)


def second_derivative(signal: np.ndarray, sampling_rate: float) -> np.ndarray:
    """Segunda derivada nos pontos interiores; bordas em 0.0."""
    signal = np.asarray(signal, dtype=float)
    dt = 1.0 / sampling_rate
    accel = np.zeros(len(signal))
    if len(signal) >= MIN_MOTION_SAMPLES:
        accel[1:-1] = (signal[2:] - 2 * signal[1:-1] + signal[:-2]) / (dt * dt)
    return accel


def detect_movement(
    input_data: Sequence[float],
    output_data: MutableSequence[float],
    threshold: float,
    sampling_rate: float,
    data_size: Optional[int] = None,
) -> FilterStatus:
    """
    Escreve em `output_data` 1.0 onde |aceleração| > threshold, senão 0.0.

    Args:
        input_data: Sinal tipo posição, amostrado uniformemente
        output_data: Buffer do chamador, sobrescrito em [0, data_size)
        threshold: Limiar de aceleração (> 0)
        sampling_rate: Taxa de amostragem em Hz (> 0)
        data_size: Quantidade de amostras (default: len(input_data))

    Returns:
        FilterStatus.OK, ou INVALID_INPUT sem escrever nada
        (inclusive quando data_size < 3)
    """
    validation = validate_buffers(
        input_data, output_data, data_size=data_size, min_size=MIN_MOTION_SAMPLES
    )
    check_positive(validation, threshold=threshold, sampling_rate=sampling_rate)
    if not validation.is_valid:
        logger.debug("Detecção de movimento ignorada: %s", "; ".join(validation.errors))
        return FilterStatus.INVALID_INPUT

    n = validation.metadata["data_size"]
    accel = second_derivative(np.asarray(input_data, dtype=float)[:n], float(sampling_rate))

    # Limiar aplicado a todo o buffer, inclusive às bordas fixas em 0.0
    mask = np.where(np.abs(accel) > threshold, MOTION_DETECTED, NO_MOTION)

    write_buffer(output_data, mask)
    return FilterStatus.OK


@DetectorRegistry.register
class SecondDerivativeDetector(MotionDetector):
    """
    Detector baseado na segunda derivada de um sinal de posição.

    Útil quando o movimento pode ser inferido de mudanças de
    aceleração. O sinal pode ser bruto ou pré-suavizado.
    """

    name = "second_derivative"
    description = "Detecta movimento pela magnitude da segunda derivada"

    def detect(
        self,
        signal: np.ndarray,
        velocity: Optional[np.ndarray] = None,
        config: DetectionConfig = None
    ) -> DetectionResult:
        """Detecta movimento pela segunda derivada."""
        cfg = config or self.config
        signal = np.atleast_1d(np.asarray(signal, dtype=float)).flatten()
        mask = np.zeros(len(signal))

        status = detect_movement(signal, mask, cfg.threshold, cfg.sampling_rate)
        if not status.is_ok:
            return DetectionResult.invalid(
                self.name,
                f"Entrada inválida ({len(signal)} pontos, "
                f"threshold={cfg.threshold}, sampling_rate={cfg.sampling_rate})"
            )

        motion_samples = int(np.count_nonzero(mask))
        peak = float(np.max(np.abs(second_derivative(signal, cfg.sampling_rate))))
        details = {"motion_samples": motion_samples, "peak_accel": peak}

        if motion_samples == 0:
            return DetectionResult.not_detected(
                self.name,
                f"Pico de aceleração ({peak:.4f}) não supera o limiar ({cfg.threshold})",
                output=mask,
                details=details,
            )

        return DetectionResult.detected_with(
            self.name,
            f"Movimento em {motion_samples} de {len(signal)} amostras",
            output=mask,
            details=details,
        )
