from .rotating_sequence import RotatingSequence


__all__ = (
    RotatingSequence.__name__,
)
