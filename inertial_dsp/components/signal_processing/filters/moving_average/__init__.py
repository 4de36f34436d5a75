"""
Filtro de Média Móvel.

Suaviza o sinal calculando a média de uma janela deslizante causal.
"""

from .moving_average import MovingAverageFilter, calculate_moving_average

__all__ = ["MovingAverageFilter", "calculate_moving_average"]
