"""Parametric flow-field line art."""

__version__ = "0.1.0"
