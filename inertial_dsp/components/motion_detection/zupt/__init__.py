from .zupt_detector import ZuptDetector, ZuptRunState, ZuptStatus, RunPhase, apply_zupt

__all__ = ["ZuptDetector", "ZuptRunState", "ZuptStatus", "RunPhase", "apply_zupt"]
