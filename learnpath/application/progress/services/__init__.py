from .progress_propagator import ProgressPropagator

__all__ = ["ProgressPropagator"]
