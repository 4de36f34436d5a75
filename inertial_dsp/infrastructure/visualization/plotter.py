"""Plotagem de entrada/saída dos filtros por canal."""
from __future__ import annotations

import matplotlib
matplotlib.use("Agg")

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

import numpy as np
import matplotlib.pyplot as plt

logger = logging.getLogger(__name__)

MAX_COLUMNS = 3


@dataclass
class ChannelTrace:
    """Triplas (índice, entrada, saída) de um canal lógico."""
    label: str
    input_values: np.ndarray
    output_values: np.ndarray

    @property
    def index(self) -> np.ndarray:
        return np.arange(min(len(self.input_values), len(self.output_values)))


def plot_channels(
    traces: Sequence[ChannelTrace],
    title: str = "",
    save_path: Path | None = None,
) -> Path | None:
    """
    Sobrepõe entrada e saída de cada canal em subplots (grade de até 3 colunas).

    Canal de exibição sem retorno consumido pelo núcleo: devolve o
    caminho do PNG salvo, ou None quando exibido/sem canais.
    """
    if not traces:
        logger.warning("Nenhum canal para plotar")
        return None

    cols = min(MAX_COLUMNS, len(traces))
    rows = math.ceil(len(traces) / cols)
    fig, axes = plt.subplots(rows, cols, figsize=(5 * cols, 3.5 * rows), squeeze=False)

    for ax, trace in zip(axes.flat, traces):
        idx = trace.index
        ax.plot(idx, trace.input_values[:len(idx)], lw=1, label="Input")
        ax.plot(idx, trace.output_values[:len(idx)], lw=1.5, label="Output")
        ax.set_title(trace.label)
        ax.set_xlabel("amostra")
        ax.legend(fontsize=8)
        ax.grid(True)

    for ax in list(axes.flat)[len(traces):]:
        ax.set_visible(False)

    fig.suptitle(title)
    fig.tight_layout()

    if save_path is None:
        # Com o backend Agg não há janela: sem save_path nada é produzido
        if matplotlib.get_backend().lower() == "agg":
            logger.warning("Backend Agg não exibe gráficos; informe save_path para salvar o PNG")
        else:
            plt.show()
        plt.close(fig)
        return None

    save_path = Path(save_path)
    save_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(save_path)
    plt.close(fig)
    logger.info("Gráfico salvo em %s", save_path)
    return save_path
