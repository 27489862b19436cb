"""Betting edges and paths, showdown settlement, abstractions and optimal-transport distances for Hold'em solvers."""

__version__ = "0.1.1"