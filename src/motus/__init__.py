"""motus: training-program periodization engine."""

__version__ = "0.1.0"
