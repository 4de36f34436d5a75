from .second_derivative_detector import SecondDerivativeDetector, detect_movement, second_derivative

__all__ = ["SecondDerivativeDetector", "detect_movement", "second_derivative"]
