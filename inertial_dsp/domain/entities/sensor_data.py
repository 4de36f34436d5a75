"""
Entidades relacionadas a dados de sensores.
"""

from dataclasses import dataclass
from typing import Optional
import numpy as np


@dataclass
class SensorSeries:
    """Coluna de amostras de um sensor de eixo único."""
    name: str
    column: int
    samples: np.ndarray
    sampling_rate: Optional[float] = None
    total_rows: int = 0

    @property
    def num_points(self) -> int:
        """Número de amostras na série."""
        return len(self.samples)

    @property
    def duration(self) -> Optional[float]:
        """Duração em segundos, se a taxa de amostragem for conhecida."""
        if not self.sampling_rate:
            return None
        return self.num_points / self.sampling_rate
