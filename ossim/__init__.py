"""Simulators for CPU scheduling, memory allocation, disk scheduling and the banker's algorithm."""

__version__ = "0.1.0"