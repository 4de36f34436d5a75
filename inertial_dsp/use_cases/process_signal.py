"""
Caso de uso: Processar colunas de um CSV de sensores inerciais.

Responsabilidade única: orquestrar o fluxo linear
leitura -> suavização -> ZUPT -> detecção de movimento -> gráfico.
"""

import logging
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np

from ..components.signal_processing.filters import (
    FilterStatus,
    calculate_moving_average,
    butterworth_low_pass,
)
from ..components.motion_detection import ZuptStatus, apply_zupt, detect_movement
from ..domain.entities import FilterParameters, SensorSeries
from ..infrastructure.config.settings import Settings
from ..infrastructure.data import ColumnReadResult, read_csv_column
from ..infrastructure.visualization import ChannelTrace, plot_channels

logger = logging.getLogger(__name__)


@dataclass
class ProcessRequest:
    """Dados de entrada para processamento."""
    data_file: Path
    start_column: int
    end_column: int
    apply_lowpass: bool = False
    plot_dir: Optional[Path] = None


@dataclass
class ChannelReport:
    """Resumo do processamento de uma coluna."""
    column: int
    count: int
    status: str = "ok"
    zupt_status: int = int(ZuptStatus.INVALID_INPUT)
    stationary: bool = False
    motion_samples: int = 0
    duration: Optional[float] = None
    error: Optional[str] = None


@dataclass
class ProcessReport:
    """Resultado de todas as colunas processadas."""
    channels: List[ChannelReport] = field(default_factory=list)
    plot_path: Optional[Path] = None

    @property
    def any_success(self) -> bool:
        return any(c.status == "ok" for c in self.channels)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "channels": [asdict(c) for c in self.channels],
            "plot_path": str(self.plot_path) if self.plot_path else None,
        }


class ProcessSignalUseCase:
    """
    Caso de uso para processar colunas de aceleração de um CSV.

    Cada coluna é tratada como aceleração de um eixo: é suavizada,
    integrada em velocidade (corrigida por ZUPT) e em deslocamento,
    sobre o qual roda a detecção de movimento.
    """

    def __init__(
        self,
        settings: Settings,
        reader: Callable[..., ColumnReadResult] = read_csv_column,
        plotter: Callable[..., Optional[Path]] = plot_channels,
    ):
        self.settings = settings
        self.params: FilterParameters = settings.parameters()
        self.reader = reader
        self.plotter = plotter

    def execute(self, request: ProcessRequest) -> ProcessReport:
        """
        Executa o processamento das colunas [start_column, end_column].

        Falhas de leitura de uma coluna são registradas e não
        interrompem as demais.
        """
        report = ProcessReport()
        traces: List[ChannelTrace] = []

        for column in range(request.start_column, request.end_column + 1):
            read = self.reader(request.data_file, self.settings.max_samples, column)
            if not read.success:
                logger.error("Falha ao ler a coluna %d de %s", column, request.data_file)
                report.channels.append(
                    ChannelReport(column=column, count=read.count, status="read_error", error=read.error)
                )
                continue

            if read.count == 0:
                logger.warning("Coluna %d sem valores", column)
                report.channels.append(ChannelReport(column=column, count=0, status="empty"))
                continue

            series = read.to_series(name=f"Coluna {column}", sampling_rate=self.params.sampling_rate)
            channel, filtered = self._process_column(series, request.apply_lowpass)
            report.channels.append(channel)
            traces.append(ChannelTrace(series.name, series.samples, filtered))

        if request.plot_dir is not None and traces:
            title = f"Colunas {request.start_column} a {request.end_column}"
            save_path = Path(request.plot_dir) / f"columns_{request.start_column}_{request.end_column}.png"
            report.plot_path = self.plotter(traces, title=title, save_path=save_path)

        return report

    def _process_column(
        self,
        series: SensorSeries,
        apply_lowpass: bool,
    ) -> Tuple[ChannelReport, np.ndarray]:
        params = self.params
        column = series.column
        samples = series.samples
        n = series.num_points

        # 1. Suavização
        smoothed = np.zeros(n)
        status = calculate_moving_average(samples, smoothed, params.window_size)
        if status is not FilterStatus.OK:
            return ChannelReport(column=column, count=n, status=status.value), samples.copy()

        accel = smoothed
        if apply_lowpass:
            accel = np.zeros(n)
            status = butterworth_low_pass(smoothed, accel, params.cutoff_frequency, params.sampling_rate)
            if status is not FilterStatus.OK:
                return ChannelReport(column=column, count=n, status=status.value), smoothed

        # 2. Velocidade integrada e corrigida por ZUPT
        dt = params.dt
        velocity = np.cumsum(accel) * dt
        zupt_status = apply_zupt(
            velocity,
            accel,
            params.zupt_threshold,
            params.continuous_count_threshold,
        )

        # 3. Deslocamento e detecção de movimento
        position = np.cumsum(velocity) * dt
        mask = np.zeros(n)
        motion_status = detect_movement(position, mask, params.motion_threshold, params.sampling_rate)
        motion_samples = int(np.count_nonzero(mask)) if motion_status.is_ok else 0

        logger.info(
            "%s: %d amostras (%.2f s), zupt=%s, movimento em %d amostras",
            series.name, n, series.duration, zupt_status.name, motion_samples,
        )

        return ChannelReport(
            column=column,
            count=n,
            status="ok",
            zupt_status=int(zupt_status),
            stationary=zupt_status is ZuptStatus.STATIONARY,
            motion_samples=motion_samples,
            duration=series.duration,
        ), accel
