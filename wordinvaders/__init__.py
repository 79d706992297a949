"""An arcade shooter for practising spelling, one missing letter at a time."""

__version__ = "0.3.0"
__all__ = ["__version__"]