"""Combo Key: an arcade game about pressing key sequences against the clock."""

__version__ = "0.1.0"