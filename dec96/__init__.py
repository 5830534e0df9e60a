"""A 96-bit fixed-scale decimal type with add, subtract, multiply, round and compare."""

__version__ = "0.1.0"
__all__ = ["value", "arithmetic"]