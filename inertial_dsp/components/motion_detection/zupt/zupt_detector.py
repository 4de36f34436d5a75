"""
ZUPT (Zero Velocity Update) Detector
=====================================

Detecta intervalos estacionários por comprimento de sequência:
amostras consecutivas com |aceleração| < threshold. Enquanto a
sequência se forma, a velocidade correspondente é zerada no buffer
do chamador. Quando a sequência atinge `continuous_count_threshold`
a varredura para imediatamente.

Máquina de estados de dois estados:
    RESET        --abaixo do limiar-->  ACCUMULATING (c = 1)
    ACCUMULATING --abaixo do limiar-->  ACCUMULATING (c += 1)
    qualquer     --acima do limiar--->  RESET (c = 0)
    c >= continuous_count_threshold  ->  estacionário confirmado
"""

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, MutableSequence, Sequence
import numpy as np

from ..base import (
    MotionDetector,
    DetectorRegistry,
    DetectionConfig,
    DetectionResult,
)
from ....domain.validators import validate_buffers, check_positive, check_positive_int
from ....infrastructure.config.constants import ZERO_VELOCITY

logger = logging.getLogger(__name__)


class ZuptStatus(IntEnum):
    """Resultado de três valores do detector ZUPT."""
    INVALID_INPUT = -1
    NOT_DETECTED = 0
    STATIONARY = 1


class RunPhase(str, Enum):
    RESET = "reset"
    ACCUMULATING = "accumulating"


@dataclass
class ZuptRunState:
    """
    Contador de sequência abaixo do limiar.

    Por padrão vive apenas durante uma chamada de `apply_zupt`.
    Passar a mesma instância em chamadas sucessivas mantém o
    contador entre blocos de um mesmo fluxo.
    """
    count: int = 0
    phase: RunPhase = RunPhase.RESET
    samples_seen: int = 0

    def advance(self, below_threshold: bool) -> int:
        """Aplica uma amostra e retorna o contador atualizado."""
        self.samples_seen += 1
        if below_threshold:
            self.count += 1
            self.phase = RunPhase.ACCUMULATING
        else:
            self.count = 0
            self.phase = RunPhase.RESET
        return self.count

    def reset(self) -> None:
        self.count = 0
        self.phase = RunPhase.RESET
        self.samples_seen = 0


def apply_zupt(
    velocity_data: MutableSequence[float],
    accel_data: Sequence[float],
    threshold: float,
    continuous_count_threshold: int,
    data_size: Optional[int] = None,
    state: Optional[ZuptRunState] = None,
) -> ZuptStatus:
    """
    Aplica Zero Velocity Update em `velocity_data`.

    Args:
        velocity_data: Velocidades do chamador; zeradas nas amostras
            da sequência estacionária em formação
        accel_data: Acelerações usadas na detecção
        threshold: Limiar de |aceleração| para repouso (> 0)
        continuous_count_threshold: Amostras consecutivas necessárias (>= 1)
        data_size: Quantidade de amostras (default: len(accel_data))
        state: Estado externo para uso em fluxo contínuo (opcional)

    Returns:
        ZuptStatus.STATIONARY ao confirmar repouso (varredura interrompida),
        NOT_DETECTED se nenhuma sequência atingiu o limiar,
        INVALID_INPUT se a entrada não pôde ser avaliada (nada é escrito)
    """
    validation = validate_buffers(accel_data, velocity_data, data_size=data_size)
    check_positive(validation, threshold=threshold)
    check_positive_int(validation, continuous_count_threshold=continuous_count_threshold)
    if not validation.is_valid:
        logger.debug("ZUPT não avaliado: %s", "; ".join(validation.errors))
        return ZuptStatus.INVALID_INPUT

    n = validation.metadata["data_size"]
    accel = np.asarray(accel_data, dtype=float)[:n]
    run = state if state is not None else ZuptRunState()

    for i in range(n):
        below = abs(accel[i]) < threshold
        run.advance(below)
        if not below:
            continue

        velocity_data[i] = ZERO_VELOCITY
        if run.count >= continuous_count_threshold:
            return ZuptStatus.STATIONARY

    return ZuptStatus.NOT_DETECTED


@DetectorRegistry.register
class ZuptDetector(MotionDetector):
    """
    Detector de repouso com correção de velocidade.

    Trabalha sobre uma cópia da velocidade, devolvida em `output`.
    Com `streaming=True` o contador persiste entre chamadas até `reset()`.
    """

    name = "zupt"
    description = "Detecta intervalos estacionários e zera a velocidade"

    def __init__(self, config: DetectionConfig = None, streaming: bool = False, **kwargs):
        super().__init__(config=config, **kwargs)
        self.streaming = streaming
        self.state = ZuptRunState()

    def reset(self) -> None:
        self.state.reset()

    def detect(
        self,
        signal: np.ndarray,
        velocity: Optional[np.ndarray] = None,
        config: DetectionConfig = None
    ) -> DetectionResult:
        """Detecta repouso na aceleração `signal`."""
        cfg = config or self.config
        accel = np.atleast_1d(np.asarray(signal, dtype=float)).flatten()
        if velocity is None:
            corrected = np.zeros(len(accel))
        else:
            corrected = np.array(velocity, dtype=float).flatten()

        state = self.state if self.streaming else ZuptRunState()
        seen_before = state.samples_seen

        status = apply_zupt(
            corrected,
            accel,
            cfg.zupt_threshold,
            cfg.continuous_count_threshold,
            state=state,
        )

        if status is ZuptStatus.INVALID_INPUT:
            return DetectionResult.invalid(
                self.name,
                f"Entrada inválida ({len(accel)} pontos, threshold={cfg.zupt_threshold}, "
                f"continuous_count_threshold={cfg.continuous_count_threshold})",
                details={"zupt_status": int(status)},
            )

        details = {
            "zupt_status": int(status),
            "run_length": state.count,
            "samples_scanned": state.samples_seen - seen_before,
        }

        if status is ZuptStatus.STATIONARY:
            details["confirmed_at"] = state.samples_seen - seen_before - 1
            return DetectionResult.detected_with(
                self.name,
                f"Repouso confirmado após {state.count} amostras consecutivas",
                output=corrected,
                details=details,
            )

        return DetectionResult.not_detected(
            self.name,
            f"Nenhuma sequência atingiu {cfg.continuous_count_threshold} amostras",
            output=corrected,
            details=details,
        )
