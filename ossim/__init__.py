"""Simulations of CPU scheduling, memory allocation, deadlock detection, a bounded buffer and small Unix utilities."""

__version__ = "0.1.0"