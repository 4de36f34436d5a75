"""
Suavização Exponencial.

Dá mais peso a observações recentes, com decaimento exponencial.
"""

from .exponential import ExponentialSmoothingFilter, exponential_smoothing_in_place

__all__ = ["ExponentialSmoothingFilter", "exponential_smoothing_in_place"]
