"""
Parâmetros de configuração dos filtros e detectores.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass(frozen=True)
class FilterParameters:
    """
    Configuração imutável usada por chamada.

    Nenhum estado é persistido entre chamadas; o detector ZUPT
    recebe apenas `zupt_threshold` e `continuous_count_threshold`.
    """
    window_size: int = 13
    cutoff_frequency: float = 5.0
    sampling_rate: float = 50.0
    motion_threshold: float = 0.5
    zupt_threshold: float = 0.1
    continuous_count_threshold: int = 5

    @property
    def dt(self) -> float:
        """Intervalo entre amostras em segundos."""
        return 1.0 / self.sampling_rate

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
