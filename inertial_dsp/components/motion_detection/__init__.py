"""
Módulo de detecção de movimento e repouso.

Fornece detectores para sinais inerciais de eixo único.
"""

from .base import (
    MotionDetector,
    DetectorRegistry,
    DetectionConfig,
    DetectionResult,
)
from .second_derivative import SecondDerivativeDetector, detect_movement, second_derivative
from .zupt import ZuptDetector, ZuptRunState, ZuptStatus, RunPhase, apply_zupt

__all__ = [
    # Base
    "MotionDetector",
    "DetectorRegistry",
    "DetectionConfig",
    "DetectionResult",

    # Detectors
    "SecondDerivativeDetector",
    "ZuptDetector",

    # Buffer functions
    "detect_movement",
    "second_derivative",
    "apply_zupt",
    "ZuptRunState",
    "ZuptStatus",
    "RunPhase",
]
