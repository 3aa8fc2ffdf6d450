from .reader import InputReader

__all__ = [
    "InputReader",
]
