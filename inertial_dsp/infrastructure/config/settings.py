"""
Configurações da aplicação.

Responsabilidade única: centralizar configurações do ambiente.
"""

import os
from pathlib import Path
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from ...domain.entities.parameters import FilterParameters


ENV_PREFIX = "INERTIAL_DSP_"


def _env(name: str, default: str) -> str:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


@dataclass
class Settings:
    """Configurações da aplicação."""

    # Paths
    base_dir: Path
    data_file: Path
    plot_dir: Optional[Path]

    # Leitura do CSV
    max_samples: int
    start_column: int
    end_column: int

    # Parâmetros dos filtros
    window_size: int
    cutoff_frequency: float
    sampling_rate: float
    motion_threshold: float
    zupt_threshold: float
    zupt_min_samples: int

    # Logging
    log_level: str

    # Segurança da API
    api_token: str

    @classmethod
    def from_env(cls) -> "Settings":
        """Cria configurações a partir de variáveis de ambiente."""
        base_dir = Path(__file__).resolve().parents[3]
        plot_dir = _env("PLOT_DIR", "")

        return cls(
            base_dir=base_dir,
            data_file=Path(_env("DATA_FILE", "./demo.csv")),
            plot_dir=Path(plot_dir) if plot_dir else None,
            max_samples=int(_env("MAX_SAMPLES", "100000")),
            start_column=int(_env("START_COLUMN", "5")),
            end_column=int(_env("END_COLUMN", "10")),
            window_size=int(_env("WINDOW_SIZE", "13")),
            cutoff_frequency=float(_env("CUTOFF_HZ", "5.0")),
            sampling_rate=float(_env("SAMPLING_RATE", "50.0")),
            motion_threshold=float(_env("MOTION_THRESHOLD", "0.5")),
            zupt_threshold=float(_env("ZUPT_THRESHOLD", "0.1")),
            zupt_min_samples=int(_env("ZUPT_MIN_SAMPLES", "5")),
            log_level=_env("LOG_LEVEL", "INFO"),
            api_token=os.getenv("TOKEN", "1337"),
        )

    def parameters(self) -> FilterParameters:
        """Parâmetros imutáveis usados em cada chamada dos filtros."""
        return FilterParameters(
            window_size=self.window_size,
            cutoff_frequency=self.cutoff_frequency,
            sampling_rate=self.sampling_rate,
            motion_threshold=self.motion_threshold,
            zupt_threshold=self.zupt_threshold,
            continuous_count_threshold=self.zupt_min_samples,
        )


@lru_cache()
def get_settings() -> Settings:
    """Retorna instância singleton das configurações."""
    return Settings.from_env()
