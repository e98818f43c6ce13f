"""Algorithms and data structures for flows, graphs, strings, hashing and 2D geometry."""

__version__ = "0.1.0"