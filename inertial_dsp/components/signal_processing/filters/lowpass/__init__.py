"""
Filtro Passa-Baixa.

Remove componentes de alta frequência do sinal.
"""

from .lowpass import LowPassFilter, butterworth_low_pass, low_pass_alpha

__all__ = ["LowPassFilter", "butterworth_low_pass", "low_pass_alpha"]
