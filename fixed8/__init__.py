"""Fixed-point numbers with 8 fractional bits, and a small demo command."""

__version__ = "0.1.0"
__all__ = ["fixed", "demo"]