"""Parking fee service: fee policies, quotes and duration formatting."""

__version__ = "0.1.0"
