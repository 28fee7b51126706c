from .timing import timeit

__all__ = ["timeit"]
