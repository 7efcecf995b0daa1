"""Computational backends for linear systems."""

from pylinalg.systems.backends.cpu import CPUGaussJordanBackend

__all__ = ["CPUGaussJordanBackend"]
