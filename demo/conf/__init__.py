from .configs import BenchmarkConfig


__all__ = (
    BenchmarkConfig.__name__,
)
