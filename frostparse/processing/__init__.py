"""
Parallel processing helpers for large combat logs.
"""

from .parallel_parser import ParallelLineParser

__all__ = ["ParallelLineParser"]
