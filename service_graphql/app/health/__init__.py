from .liveness import LivenessProber, LivenessResult

__all__ = ["LivenessProber", "LivenessResult"]
