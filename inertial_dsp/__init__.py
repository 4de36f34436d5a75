"""
inertial-dsp - Primitivas de filtragem e detecção para dead-reckoning inercial.

Suavização por média móvel, passa-baixa de primeira ordem,
detecção de movimento pela segunda derivada e detecção de
repouso com Zero Velocity Update.
"""

from .components.signal_processing.filters import (
    FilterStatus,
    calculate_moving_average,
    butterworth_low_pass,
    exponential_smoothing_in_place,
)
from .components.motion_detection import ZuptStatus, ZuptRunState, apply_zupt, detect_movement

__version__ = "1.0.0"

__all__ = [
    "FilterStatus",
    "calculate_moving_average",
    "butterworth_low_pass",
    "exponential_smoothing_in_place",
    "detect_movement",
    "apply_zupt",
    "ZuptStatus",
    "ZuptRunState",
]
